"""Predicate filtering over labeled posts."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from topicpulse.models import FilterCriteria, LabeledPost

logger = logging.getLogger(__name__)

ALL_TOPICS = "all"


def _contains(haystack: str | None, needle: str) -> bool:
    """Case-insensitive substring test; a missing haystack never matches."""
    if not needle:
        return True
    if not haystack:
        return False
    return needle.lower() in haystack.lower()


def matches(item: LabeledPost, criteria: FilterCriteria) -> bool:
    if not _contains(item.post.link_title, criteria.title):
        return False
    if not _contains(item.post.post_message, criteria.message):
        return False
    if criteria.topic and criteria.topic != ALL_TOPICS:
        if item.topic is None or item.topic.id != criteria.topic:
            return False
    return True


def filter_posts(
    posts: Sequence[LabeledPost],
    criteria: FilterCriteria | Mapping[str, Any] | None = None,
) -> list[LabeledPost]:
    """Return the posts satisfying every active criterion, in input order."""
    if criteria is None:
        criteria = FilterCriteria()
    elif not isinstance(criteria, FilterCriteria):
        criteria = FilterCriteria.model_validate(dict(criteria))

    kept = [item for item in posts if matches(item, criteria)]
    logger.info(
        "Filter: %d total → %d kept (title=%r, message=%r, topic=%r)",
        len(posts),
        len(kept),
        criteria.title,
        criteria.message,
        criteria.topic,
    )
    return kept
