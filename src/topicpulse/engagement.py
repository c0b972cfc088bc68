"""Weighted engagement scoring for posts."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from topicpulse.models import EngagementLevel, EngagementScore, LabeledPost, Post

logger = logging.getLogger(__name__)

# ── Weights ────────────────────────────────────────────────────────────────
_W_LIKE = 1
_W_COMMENT = 2
_W_SHARE = 3

_SCALE = 5
_MAX_NORMALIZED = 100

# Upper bound (inclusive) of each tier on the normalized scale
_LEVEL_BANDS: tuple[tuple[int, EngagementLevel], ...] = (
    (20, EngagementLevel.LOW),
    (40, EngagementLevel.MODERATE),
    (60, EngagementLevel.GOOD),
    (80, EngagementLevel.HIGH),
)


def round_half_up(value: float) -> int:
    """Round to the nearest int with .5 going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def level_for(normalized: int) -> EngagementLevel:
    for upper, level in _LEVEL_BANDS:
        if normalized <= upper:
            return level
    return EngagementLevel.EXCEPTIONAL


def score_engagement(post: Post) -> EngagementScore:
    """Compute raw, normalized (0-100) and tiered engagement for one post."""
    raw = post.likes * _W_LIKE + post.comments * _W_COMMENT + post.shares * _W_SHARE
    normalized = max(min(round_half_up(raw / _SCALE), _MAX_NORMALIZED), 0)
    return EngagementScore(raw=raw, normalized=normalized, level=level_for(normalized))


def top_engaged(posts: Sequence[LabeledPost], limit: int = 10) -> list[LabeledPost]:
    """Most engaged posts by raw score; ties keep input order."""
    ranked = sorted(posts, key=lambda p: p.engagement.raw, reverse=True)
    logger.info(
        "Ranked %d posts; top raw score=%d",
        len(ranked),
        ranked[0].engagement.raw if ranked else 0,
    )
    return ranked[:limit]


def level_distribution(posts: Iterable[LabeledPost]) -> dict[str, int]:
    """Post count per engagement tier, lowest tier first; empty tiers omitted."""
    counts = {level.value: 0 for level in EngagementLevel}
    for p in posts:
        counts[p.engagement.level.value] += 1
    return {name: n for name, n in counts.items() if n}
