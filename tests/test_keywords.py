"""Unit tests for keyword extraction."""

from topicpulse.keywords import extract_keywords, post_text, tokenize, top_keywords
from topicpulse.models import Post


def _make(title: str | None = None, message: str | None = None, post_id: str = "1") -> Post:
    return Post(id=post_id, link_title=title, post_message=message)


class TestTokenize:
    def test_strips_punctuation_and_short_words(self) -> None:
        assert tokenize("Hello, World! Go to it.") == ["hello", "world"]

    def test_drops_stop_words(self) -> None:
        assert tokenize("The cat and the hat were there") == ["cat", "hat", "there"]

    def test_empty(self) -> None:
        assert tokenize("") == []
        assert tokenize(None) == []


class TestExtractKeywords:
    def test_most_frequent_first(self) -> None:
        text = "rain rain rain sun sun wind"
        assert extract_keywords(text) == ["rain", "sun", "wind"]

    def test_ties_keep_first_seen_order(self) -> None:
        assert extract_keywords("zebra apple mango") == ["zebra", "apple", "mango"]

    def test_limit(self) -> None:
        assert extract_keywords("rain rain sun wind", limit=2) == ["rain", "sun"]

    def test_never_more_than_ten(self) -> None:
        words = [f"word{chr(ord('a') + i)}" for i in range(15)]
        result = extract_keywords(" ".join(words), limit=50)
        assert len(result) == 10
        assert result == words[:10]


class TestTopKeywords:
    def test_batch_blob(self) -> None:
        posts = [
            _make(title="Budget budget", message="tax"),
            _make(message="Budget cuts", post_id="2"),
        ]
        assert top_keywords(posts, limit=2) == ["budget", "tax"]

    def test_post_text_missing_parts(self) -> None:
        assert post_text(_make(message="hi")) == " hi"
        assert post_text(_make()) == " "

    def test_empty_batch(self) -> None:
        assert top_keywords([]) == []

    def test_message_before_title_for_ties(self) -> None:
        posts = [_make(title="zebra", message="apple")]
        assert top_keywords(posts) == ["apple", "zebra"]
