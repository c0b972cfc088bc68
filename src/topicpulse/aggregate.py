"""Per-topic statistics and dataset-wide summary over labeled posts."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from topicpulse.engagement import level_distribution, round_half_up
from topicpulse.models import ClusterStat, DatasetSummary, LabeledPost, percent_value
from topicpulse.taxonomy import FALLBACK_ID, FALLBACK_NAME

logger = logging.getLogger(__name__)


def cluster_stats(posts: Sequence[LabeledPost]) -> list[ClusterStat]:
    """Group posts by assigned topic and compute count and mean engagement.

    Result is ordered by count, descending. Topics with equal counts stay in
    the order their first post appeared in *posts*.
    """
    groups: dict[str, ClusterStat] = {}

    for item in posts:
        topic_id = item.topic.id if item.topic else FALLBACK_ID
        topic_name = item.topic.name if item.topic else FALLBACK_NAME

        stat = groups.get(topic_id)
        if stat is None:
            stat = groups[topic_id] = ClusterStat(id=topic_id, name=topic_name)

        stat.count += 1
        stat.total_engagement += item.engagement.normalized
        stat.posts.append(item)

    for stat in groups.values():
        stat.avg_engagement = round_half_up(stat.total_engagement / stat.count)

    # sorted() is stable, so insertion order breaks count ties
    stats = sorted(groups.values(), key=lambda s: s.count, reverse=True)
    logger.info("Aggregated %d posts into %d topics", len(posts), len(stats))
    return stats


def summarize(posts: Sequence[LabeledPost]) -> DatasetSummary:
    """Dataset-wide averages of engagement, interaction counts and audience profile."""
    total = len(posts)
    denom = total or 1
    return DatasetSummary(
        total=total,
        avg_engagement=round(sum(p.engagement.normalized for p in posts) / denom, 1),
        avg_likes=sum(p.post.likes for p in posts) / denom,
        avg_comments=sum(p.post.comments for p in posts) / denom,
        avg_shares=sum(p.post.shares for p in posts) / denom,
        level_distribution=level_distribution(posts),
        avg_affluence_index=sum(p.post.affluence_index or 0.0 for p in posts) / denom,
        avg_male_pct=sum(percent_value(p.post.male_prop) for p in posts) / denom,
        avg_muslim_pct=sum(percent_value(p.post.muslim_prop) for p in posts) / denom,
        avg_age_index=sum(p.post.age_index or 0.0 for p in posts) / denom,
    )
