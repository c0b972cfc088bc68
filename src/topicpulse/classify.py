"""Assign each post a single topic by keyword overlap with the taxonomy."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from topicpulse.keywords import post_text
from topicpulse.models import Post, TopicAssignment
from topicpulse.taxonomy import FALLBACK_ID, FALLBACK_NAME, TOPICS, TopicDefinition

logger = logging.getLogger(__name__)

# Denominator cap: a topic with more keywords than this can score above 1.0
_MATCH_CAP = 5

FALLBACK = TopicAssignment(id=FALLBACK_ID, name=FALLBACK_NAME, score=0.0)


def _match_text(post: Post) -> str:
    return post_text(post).lower()


def _topic_score(text: str, topic: TopicDefinition) -> float:
    """Matched keyword phrases over ``min(5, len(keywords))``.

    Matching is plain substring containment, so "win" hits "winning".
    """
    hits = sum(1 for kw in topic.keywords if kw in text)
    return hits / min(_MATCH_CAP, len(topic.keywords))


def match_scores(
    post: Post,
    topics: Sequence[TopicDefinition] = TOPICS,
) -> list[tuple[TopicDefinition, float]]:
    """Return every topic paired with its match score, in taxonomy order."""
    if not post.link_title and not post.post_message:
        return [(topic, 0.0) for topic in topics]
    text = _match_text(post)
    return [(topic, _topic_score(text, topic)) for topic in topics]


def assign_topic(
    post: Post,
    topics: Sequence[TopicDefinition] = TOPICS,
) -> TopicAssignment:
    """Pick the highest-scoring topic for *post*.

    Ties go to the topic listed first. A best score of zero yields the
    ``other`` fallback.
    """
    scores = match_scores(post, topics)
    if not scores:
        return FALLBACK

    # max() keeps the first of equal elements
    best_topic, best_score = max(scores, key=lambda pair: pair[1])
    if best_score == 0:
        return FALLBACK

    return TopicAssignment(id=best_topic.id, name=best_topic.name, score=best_score)


def assign_topics(
    posts: Sequence[Post],
    topics: Sequence[TopicDefinition] = TOPICS,
) -> list[TopicAssignment]:
    """Classify a batch, preserving input order."""
    assignments = [assign_topic(post, topics) for post in posts]
    logger.info(
        "Classified %d posts against %d topics (%d fell back to '%s')",
        len(posts),
        len(topics),
        sum(1 for a in assignments if a.id == FALLBACK_ID),
        FALLBACK_ID,
    )
    return assignments
