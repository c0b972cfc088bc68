"""Fixed topic taxonomy, fallback topic and stop words.

The order of ``TOPICS`` is significant: when two topics tie on match score
the one listed first wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)

FALLBACK_ID = "other"
FALLBACK_NAME = "Other Topics"


class TaxonomyError(ValueError):
    """Raised when a taxonomy file cannot be turned into topic definitions."""


class TopicDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    keywords: tuple[str, ...]

    @field_validator("keywords", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> tuple[str, ...]:
        if not isinstance(value, (list, tuple)):
            raise ValueError("keywords must be a list of phrases")
        if not value:
            raise ValueError("a topic needs at least one keyword")
        keywords = tuple(str(kw).lower() for kw in value)
        # a blank phrase is a substring of every text
        if any(not kw.strip() for kw in keywords):
            raise ValueError("keyword phrases must not be blank")
        return keywords


def _topic(topic_id: str, name: str, keywords: list[str]) -> TopicDefinition:
    return TopicDefinition(id=topic_id, name=name, keywords=keywords)


# ── Built-in table ─────────────────────────────────────────────────────────
TOPICS: tuple[TopicDefinition, ...] = (
    _topic(
        "politics",
        "Politics & Governance",
        [
            "politics", "government", "minister", "election", "vote", "party",
            "democracy", "parliament", "president", "prime minister", "congress",
            "bjp", "campaign", "leader", "policy", "politician", "political",
            "assembly", "chief minister", "opposition",
        ],
    ),
    _topic(
        "business",
        "Business & Economy",
        [
            "business", "economy", "market", "stock", "company", "finance",
            "industry", "trade", "investment", "economic", "financial",
            "corporate", "bank", "tax", "entrepreneur", "startup", "profit",
            "revenue", "investor", "budget", "gdp", "growth", "commerce",
        ],
    ),
    _topic(
        "tech",
        "Technology & Innovation",
        [
            "technology", "tech", "digital", "innovation", "startup", "app",
            "software", "internet", "online", "mobile", "smartphone", "computer",
            "website", "social media", "ai", "artificial intelligence",
            "machine learning", "data", "coding", "programming",
        ],
    ),
    _topic(
        "entertainment",
        "Entertainment & Celebrities",
        [
            "movie", "film", "cinema", "actor", "actress", "director",
            "bollywood", "hollywood", "star", "celebrity", "tv", "show",
            "television", "music", "singer", "dance", "concert", "award",
            "performance", "entertainment", "reality show", "netflix", "ott",
        ],
    ),
    _topic(
        "sports",
        "Sports & Athletics",
        [
            "sports", "cricket", "football", "soccer", "tennis", "basketball",
            "athlete", "tournament", "championship", "match", "team", "player",
            "game", "win", "victory", "medal", "olympic", "coach", "stadium",
            "league", "bat", "ball", "field", "court", "ipl", "world cup",
        ],
    ),
    _topic(
        "health",
        "Health & Wellness",
        [
            "health", "healthcare", "medical", "doctor", "hospital", "medicine",
            "disease", "treatment", "patient", "wellness", "fitness", "exercise",
            "diet", "nutrition", "mental health", "pandemic", "covid", "virus",
            "vaccine", "yoga", "meditation", "therapy",
        ],
    ),
    _topic(
        "crime",
        "Crime & Justice",
        [
            "crime", "criminal", "police", "arrest", "law", "court", "justice",
            "judge", "lawyer", "trial", "murder", "rape", "assault", "theft",
            "robbery", "case", "investigation", "prison", "sentence", "convict",
            "victim", "accused",
        ],
    ),
    _topic(
        "world",
        "International News",
        [
            "international", "global", "world", "foreign", "united nations",
            "un", "europe", "america", "usa", "china", "russia", "pakistan",
            "asia", "africa", "middle east", "summit", "treaty", "diplomatic",
            "embassy", "foreign affairs", "overseas",
        ],
    ),
    _topic(
        "education",
        "Education & Learning",
        [
            "education", "student", "school", "college", "university", "teacher",
            "professor", "learning", "exam", "course", "degree", "academic",
            "study", "research", "science", "knowledge", "classroom", "campus",
            "diploma", "scholarship", "coaching",
        ],
    ),
    _topic(
        "environment",
        "Environment & Climate",
        [
            "environment", "climate", "pollution", "green", "sustainable",
            "ecology", "wildlife", "conservation", "forest", "nature",
            "biodiversity", "renewable", "energy", "carbon", "global warming",
            "climate change", "recycle", "eco-friendly", "clean", "earth",
            "planet",
        ],
    ),
)

# Ignored by the keyword extractor
STOP_WORDS: frozenset[str] = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
        "with", "by", "about", "as", "of", "from", "is", "are", "was", "were",
        "be", "been", "being", "have", "has", "had", "do", "does", "did",
        "will", "would", "should", "can", "could", "may", "might", "must",
        "shall", "all", "any", "this", "that", "these", "those", "it", "its",
        "i", "you", "he", "she", "we", "they", "who", "which", "what", "where",
        "when", "why", "how", "not", "no",
    }
)


def load_taxonomy(path: str | Path) -> tuple[TopicDefinition, ...]:
    """Parse a YAML taxonomy file into an ordered tuple of topics.

    Expected shape::

        topics:
          - id: politics
            name: Politics & Governance
            keywords: [election, vote, ...]

    List order in the file becomes tie-break order.
    """
    p = Path(path)
    with open(p, encoding="utf-8") as fh:
        try:
            cfg: Any = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise TaxonomyError(f"{p}: not valid YAML: {exc}") from exc

    if not isinstance(cfg, dict) or not isinstance(cfg.get("topics"), list) or not cfg["topics"]:
        raise TaxonomyError(f"{p}: expected a non-empty 'topics' list")

    topics: list[TopicDefinition] = []
    seen: set[str] = set()
    for entry in cfg["topics"]:
        try:
            topic = TopicDefinition.model_validate(entry)
        except ValidationError as exc:
            raise TaxonomyError(f"{p}: invalid topic entry {entry!r}: {exc}") from exc
        if topic.id == FALLBACK_ID:
            raise TaxonomyError(f"{p}: topic id '{FALLBACK_ID}' is reserved for the fallback")
        if topic.id in seen:
            raise TaxonomyError(f"{p}: duplicate topic id '{topic.id}'")
        seen.add(topic.id)
        topics.append(topic)

    logger.info("Loaded %d topics from %s", len(topics), p)
    return tuple(topics)


def resolve_taxonomy(path: str | Path | None = None) -> tuple[TopicDefinition, ...]:
    """Return the override taxonomy at *path*, or the built-in table."""
    if not path:
        return TOPICS
    return load_taxonomy(path)
