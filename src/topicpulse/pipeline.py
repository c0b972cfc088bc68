"""Pipeline orchestration: wires ingest → classify → score → filter → aggregate → export."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path

from topicpulse import config
from topicpulse.aggregate import cluster_stats, summarize
from topicpulse.classify import assign_topic
from topicpulse.engagement import score_engagement, top_engaged
from topicpulse.export import write_csv
from topicpulse.filters import filter_posts
from topicpulse.ingest import load_csv
from topicpulse.keywords import top_keywords
from topicpulse.models import AnalysisReport, FilterCriteria, LabeledPost, Post
from topicpulse.taxonomy import TOPICS, TopicDefinition, resolve_taxonomy

logger = logging.getLogger(__name__)


def label_posts(
    posts: Sequence[Post],
    topics: Sequence[TopicDefinition] = TOPICS,
) -> list[LabeledPost]:
    """Classify and score every post in one pass, preserving order."""
    labeled = [
        LabeledPost(post=post, topic=assign_topic(post, topics), engagement=score_engagement(post))
        for post in posts
    ]
    logger.info(
        "Labeled %d posts into %d topics",
        len(labeled),
        len({item.topic.id for item in labeled if item.topic}),
    )
    return labeled


def label_posts_async(
    posts: Sequence[Post],
    topics: Sequence[TopicDefinition] = TOPICS,
    executor: Executor | None = None,
) -> Future[list[LabeledPost]]:
    """Run :func:`label_posts` off the calling thread.

    Without an *executor* a single-use worker thread is started. The returned
    future can be awaited via ``asyncio.wrap_future``, polled, or cancelled
    before it starts running.
    """
    if executor is not None:
        return executor.submit(label_posts, list(posts), topics)

    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="topicpulse-label")
    try:
        return pool.submit(label_posts, list(posts), topics)
    finally:
        # Already-submitted work still runs to completion
        pool.shutdown(wait=False)


def analyze(
    posts: Sequence[Post],
    criteria: FilterCriteria | None = None,
    topics: Sequence[TopicDefinition] = TOPICS,
    top_n: int = config.TOP_POSTS,
    keyword_limit: int = config.KEYWORD_LIMIT,
) -> AnalysisReport:
    """Label *posts* and derive every view the dashboard needs.

    Topic stats cover the whole batch; summary, top posts and keywords
    cover the filtered subset.
    """
    labeled = label_posts(posts, topics)
    filtered = filter_posts(labeled, criteria)
    return AnalysisReport(
        labeled=labeled,
        filtered=filtered,
        stats=cluster_stats(labeled),
        summary=summarize(filtered),
        top_posts=top_engaged(filtered, top_n),
        keywords=top_keywords(filtered, keyword_limit),
    )


def run_pipeline(
    csv_path: Path,
    criteria: FilterCriteria | None = None,
    export_to: Path | None = None,
    top_n: int = config.TOP_POSTS,
) -> AnalysisReport:
    """Load a CSV, analyze it and optionally export the filtered posts."""
    logger.info("=== topicpulse pipeline start [%s] ===", csv_path)

    topics = resolve_taxonomy(config.TAXONOMY_PATH)
    posts = load_csv(csv_path)
    if not posts:
        logger.warning("No usable posts in %s", csv_path)

    report = analyze(posts, criteria=criteria, topics=topics, top_n=top_n)

    if export_to is not None:
        write_csv(report.filtered, export_to)

    logger.info(
        "=== topicpulse pipeline done, showing %d of %d posts ===",
        len(report.filtered),
        len(report.labeled),
    )
    return report
