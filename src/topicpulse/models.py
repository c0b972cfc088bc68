"""Domain models used across the pipeline."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_count(value: Any) -> int:
    """Turn a raw count cell into an int; anything unusable becomes 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
        try:
            value = float(value)
        except ValueError:
            return 0
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _coerce_text(value: Any) -> str | None:
    """Blank, NaN and missing text all collapse to ``None``."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    text = value if isinstance(value, str) else str(value)
    return text if text.strip() else None


def percent_value(value: str | None) -> float:
    """Parse a "54.2%" style share into 54.2; missing or unparsable gives 0."""
    if not value:
        return 0.0
    try:
        number = float(value.replace("%", "").strip())
    except ValueError:
        return 0.0
    return 0.0 if math.isnan(number) else number


def _coerce_index(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


class Post(BaseModel):
    """A single post record as it arrives from ingestion."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    link_title: str | None = None
    post_message: str | None = None
    likes: int = 0
    comments: int = 0
    shares: int = 0
    link: str | None = None
    male_prop: str | None = None  # e.g. "54.2%"
    muslim_prop: str | None = None
    affluence_index: float | None = None
    age_index: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _normalise_id(cls, value: Any) -> str:
        if value is None:
            raise ValueError("post id is required")
        # CSV readers hand back 123.0 for an int column with gaps
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value).strip()

    @field_validator("likes", "comments", "shares", mode="before")
    @classmethod
    def _count(cls, value: Any) -> int:
        return _coerce_count(value)

    @field_validator(
        "link_title",
        "post_message",
        "link",
        "male_prop",
        "muslim_prop",
        mode="before",
    )
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return _coerce_text(value)

    @field_validator("affluence_index", "age_index", mode="before")
    @classmethod
    def _index(cls, value: Any) -> float | None:
        return _coerce_index(value)


class TopicAssignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    score: float = 0.0  # not bounded to [0, 1]


class EngagementLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    GOOD = "Good"
    HIGH = "High"
    EXCEPTIONAL = "Exceptional"


class EngagementScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: int
    normalized: int
    level: EngagementLevel


class LabeledPost(BaseModel):
    """A post together with its derived topic and engagement."""

    model_config = ConfigDict(frozen=True)

    post: Post
    topic: TopicAssignment | None = None
    engagement: EngagementScore


class ClusterStat(BaseModel):
    id: str
    name: str
    count: int = 0
    total_engagement: int = 0
    avg_engagement: int = 0
    posts: list[LabeledPost] = Field(default_factory=list)


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    message: str = ""
    topic: str = Field(default="all", alias="cluster")

    @field_validator("title", "message", "topic", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any) -> Any:
        return "" if value is None else value


class DatasetSummary(BaseModel):
    total: int = 0
    avg_engagement: float = 0.0
    avg_likes: float = 0.0
    avg_comments: float = 0.0
    avg_shares: float = 0.0
    level_distribution: dict[str, int] = Field(default_factory=dict)
    # Audience profile; missing values count as 0
    avg_affluence_index: float = 0.0
    avg_male_pct: float = 0.0
    avg_muslim_pct: float = 0.0
    avg_age_index: float = 0.0


class AnalysisReport(BaseModel):
    """Everything one ``analyze`` run produces."""

    labeled: list[LabeledPost] = Field(default_factory=list)
    filtered: list[LabeledPost] = Field(default_factory=list)
    stats: list[ClusterStat] = Field(default_factory=list)
    summary: DatasetSummary = Field(default_factory=DatasetSummary)
    top_posts: list[LabeledPost] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
