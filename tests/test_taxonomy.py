"""Unit tests for the topic taxonomy table and YAML overrides."""

from pathlib import Path

import pytest

from topicpulse.classify import assign_topic
from topicpulse.models import Post
from topicpulse.taxonomy import (
    STOP_WORDS,
    TOPICS,
    TaxonomyError,
    load_taxonomy,
    resolve_taxonomy,
)


class TestBuiltinTable:
    def test_ten_topics_in_order(self) -> None:
        assert [t.id for t in TOPICS] == [
            "politics",
            "business",
            "tech",
            "entertainment",
            "sports",
            "health",
            "crime",
            "world",
            "education",
            "environment",
        ]

    def test_keywords_lowercase_and_nonempty(self) -> None:
        for topic in TOPICS:
            assert topic.keywords
            assert all(kw == kw.lower() for kw in topic.keywords)

    def test_fallback_id_not_in_table(self) -> None:
        assert "other" not in {t.id for t in TOPICS}

    def test_stop_words(self) -> None:
        assert {"the", "and", "which", "no"} <= STOP_WORDS
        assert "election" not in STOP_WORDS


class TestLoadTaxonomy:
    def test_yaml_order_and_lowercasing(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text(
            "topics:\n"
            "  - id: food\n"
            "    name: Food\n"
            "    keywords: [Recipe, Chef, Kitchen]\n"
            "  - id: travel\n"
            "    name: Travel\n"
            "    keywords: [flight, hotel, beach]\n"
        )
        topics = load_taxonomy(path)
        assert [t.id for t in topics] == ["food", "travel"]
        assert topics[0].keywords == ("recipe", "chef", "kitchen")

        post = Post(id="1", post_message="The chef flew: flight booked, hotel too")
        assert assign_topic(post, topics).id == "travel"

    def test_missing_topics_key(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text("categories: []\n")
        with pytest.raises(TaxonomyError):
            load_taxonomy(path)

    def test_duplicate_ids(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text(
            "topics:\n"
            "  - {id: a, name: A, keywords: [x1]}\n"
            "  - {id: a, name: A2, keywords: [x2]}\n"
        )
        with pytest.raises(TaxonomyError, match="duplicate"):
            load_taxonomy(path)

    def test_reserved_fallback_id(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text("topics:\n  - {id: other, name: Other, keywords: [x]}\n")
        with pytest.raises(TaxonomyError, match="reserved"):
            load_taxonomy(path)

    def test_empty_keywords(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text("topics:\n  - {id: a, name: A, keywords: []}\n")
        with pytest.raises(TaxonomyError):
            load_taxonomy(path)

    def test_invalid_yaml_syntax(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text("topics:\n  - id: food\n    name: Food\n    keywords: [x\n")
        with pytest.raises(TaxonomyError, match="not valid YAML"):
            load_taxonomy(path)

    def test_keywords_as_bare_string_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text("topics:\n  - {id: food, name: Food, keywords: recipe}\n")
        with pytest.raises(TaxonomyError):
            load_taxonomy(path)

    def test_blank_keyword_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text("topics:\n  - {id: food, name: Food, keywords: [recipe, \"  \"]}\n")
        with pytest.raises(TaxonomyError):
            load_taxonomy(path)

    def test_topics_must_be_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "taxonomy.yml"
        path.write_text("topics:\n  food: [recipe]\n")
        with pytest.raises(TaxonomyError):
            load_taxonomy(path)

    def test_resolve_defaults_to_builtin(self) -> None:
        assert resolve_taxonomy(None) is TOPICS
        assert resolve_taxonomy("") is TOPICS
