"""Turn raw records (CSV rows, dicts) into ``Post`` models."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import pandas as pd

from topicpulse.models import Post

logger = logging.getLogger(__name__)


class IngestError(ValueError):
    """Raised when a source file exists but cannot be parsed into records."""


def _has_id(record: Mapping[str, Any]) -> bool:
    value = record.get("id")
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(str(value).strip())


def posts_from_records(records: Iterable[Mapping[str, Any]]) -> list[Post]:
    """Build posts from mappings, dropping any record without an ``id``."""
    posts: list[Post] = []
    dropped = 0
    for record in records:
        if not _has_id(record):
            dropped += 1
            continue
        posts.append(Post.model_validate(dict(record)))
    logger.info(
        "Ingest: %d records → %d posts (dropped %d without id)",
        len(posts) + dropped,
        len(posts),
        dropped,
    )
    return posts


def load_csv(path: str | Path) -> list[Post]:
    """Read a CSV export of posts; the header row names the fields.

    An empty file yields no posts. A file pandas cannot parse raises
    :class:`IngestError`.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"CSV file not found: {p}")
    try:
        df = pd.read_csv(p)
    except pd.errors.EmptyDataError:
        logger.warning("CSV file is empty, no posts loaded: %s", p)
        return []
    except pd.errors.ParserError as exc:
        raise IngestError(f"Could not parse CSV {p}: {exc}") from exc
    # NaN cells come back as floats; models coerce them
    records = df.to_dict(orient="records")
    logger.info("Read %d rows from %s", len(records), p)
    return posts_from_records(records)
