"""Frequency-based keyword mining over post text."""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable

from topicpulse.models import LabeledPost, Post
from topicpulse.taxonomy import STOP_WORDS

logger = logging.getLogger(__name__)

_PUNCT_RE = re.compile(r"[^\w\s]")

# The frequency table never holds more than this many entries
_MAX_KEYWORDS = 10


def tokenize(text: str | None) -> list[str]:
    """Lowercase, strip punctuation, drop short tokens and stop words."""
    if not text:
        return []
    words = _PUNCT_RE.sub(" ", text.lower()).split()
    return [w for w in words if len(w) > 2 and w not in STOP_WORDS]


def extract_keywords(text: str | None, limit: int = _MAX_KEYWORDS) -> list[str]:
    """Return up to *limit* tokens of *text*, most frequent first.

    Equal counts keep first-seen order. Never returns more than ten tokens.
    """
    counts = Counter(tokenize(text))
    top = [word for word, _ in counts.most_common(_MAX_KEYWORDS)]
    return top[: max(limit, 0)]


def post_text(post: Post | LabeledPost) -> str:
    """Title and message joined by a space; missing parts are empty."""
    if isinstance(post, LabeledPost):
        post = post.post
    return f"{post.link_title or ''} {post.post_message or ''}"


def top_keywords(posts: Iterable[Post | LabeledPost], limit: int = 20) -> list[str]:
    """Top keywords across the whole batch.

    Each post contributes its message before its title, which decides the
    order of equally frequent keywords.
    """
    items = [p.post if isinstance(p, LabeledPost) else p for p in posts]
    blob = " ".join(f"{p.post_message or ''} {p.link_title or ''}" for p in items)
    keywords = extract_keywords(blob, limit)
    logger.debug("Top keywords: %s", ", ".join(keywords))
    return keywords
