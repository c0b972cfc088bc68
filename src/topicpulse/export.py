"""Flatten labeled posts into plain rows and write them out as CSV."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd

from topicpulse.models import LabeledPost

logger = logging.getLogger(__name__)


def to_row(item: LabeledPost, include_derived: bool = True) -> dict[str, Any]:
    row: dict[str, Any] = item.post.model_dump()
    if include_derived:
        row.update(
            {
                "topic_id": item.topic.id if item.topic else None,
                "topic_name": item.topic.name if item.topic else None,
                "topic_score": item.topic.score if item.topic else None,
                "engagement_raw": item.engagement.raw,
                "engagement_normalized": item.engagement.normalized,
                "engagement_level": item.engagement.level.value,
            }
        )
    return row


def to_rows(posts: Sequence[LabeledPost], include_derived: bool = True) -> list[dict[str, Any]]:
    """Plain dict rows (numbers, strings, ``None``) ready for any serializer."""
    return [to_row(item, include_derived) for item in posts]


def write_csv(
    posts: Sequence[LabeledPost],
    path: str | Path,
    include_derived: bool = True,
) -> Path:
    """Write *posts* to *path* as CSV and return the path."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    rows = to_rows(posts, include_derived)
    pd.DataFrame(rows).to_csv(out_path, index=False)
    logger.info("Exported %d posts to %s", len(rows), out_path)
    return out_path
