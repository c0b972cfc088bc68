"""Unit tests for engagement scoring."""

from topicpulse.engagement import (
    level_distribution,
    level_for,
    round_half_up,
    score_engagement,
    top_engaged,
)
from topicpulse.models import EngagementLevel, LabeledPost, Post


def _make(likes: int = 0, comments: int = 0, shares: int = 0, post_id: str = "1") -> Post:
    return Post(id=post_id, likes=likes, comments=comments, shares=shares)


def _labeled(post: Post) -> LabeledPost:
    return LabeledPost(post=post, engagement=score_engagement(post))


class TestScore:
    def test_zero_engagement(self) -> None:
        s = score_engagement(_make())
        assert (s.raw, s.normalized, s.level) == (0, 0, EngagementLevel.LOW)

    def test_weighted_formula(self) -> None:
        s = score_engagement(_make(likes=10, comments=5, shares=2))
        # 10 + 5*2 + 2*3 = 26; 26 / 5 = 5.2 → 5
        assert s.raw == 26
        assert s.normalized == 5
        assert s.level == "Low"

    def test_level_is_plain_string(self) -> None:
        s = score_engagement(_make(likes=500))
        assert s.model_dump(mode="json")["level"] == "Exceptional"

    def test_missing_counts_are_zero(self) -> None:
        post = Post.model_validate({"id": "x", "likes": None, "comments": "n/a"})
        s = score_engagement(post)
        assert s.raw == 0

    def test_negative_counts_do_not_crash(self) -> None:
        s = score_engagement(_make(likes=-50))
        assert s.raw == -50
        assert s.normalized == 0
        assert s.level == EngagementLevel.LOW

    def test_deterministic(self) -> None:
        post = _make(likes=7, comments=3, shares=1)
        assert score_engagement(post) == score_engagement(post)


class TestBoundaries:
    def test_twenty_is_low(self) -> None:
        s = score_engagement(_make(likes=100))
        assert s.normalized == 20
        assert s.level == EngagementLevel.LOW

    def test_twenty_one_is_moderate(self) -> None:
        s = score_engagement(_make(likes=105))
        assert s.normalized == 21
        assert s.level == EngagementLevel.MODERATE

    def test_fractional_quotients(self) -> None:
        # 102 / 5 = 20.4 → 20; 103 / 5 = 20.6 → 21
        assert score_engagement(_make(likes=102)).normalized == 20
        assert score_engagement(_make(likes=103)).normalized == 21

    def test_exact_half(self) -> None:
        assert round_half_up(20.5) == 21
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-2.5) == -2

    def test_clamps_at_hundred(self) -> None:
        s = score_engagement(_make(likes=500))
        assert s.normalized == 100
        assert s.level == EngagementLevel.EXCEPTIONAL

        s = score_engagement(_make(shares=10_000))
        assert s.raw == 30_000
        assert s.normalized == 100

    def test_band_edges(self) -> None:
        assert level_for(40) == EngagementLevel.MODERATE
        assert level_for(41) == EngagementLevel.GOOD
        assert level_for(60) == EngagementLevel.GOOD
        assert level_for(61) == EngagementLevel.HIGH
        assert level_for(80) == EngagementLevel.HIGH
        assert level_for(81) == EngagementLevel.EXCEPTIONAL
        assert level_for(100) == EngagementLevel.EXCEPTIONAL


class TestTopEngaged:
    def test_higher_raw_first(self) -> None:
        a = _labeled(_make(likes=1, post_id="a"))
        b = _labeled(_make(shares=20, post_id="b"))
        c = _labeled(_make(comments=5, post_id="c"))
        ranked = top_engaged([a, b, c])
        assert [p.post.id for p in ranked] == ["b", "c", "a"]

    def test_limit_and_stable_ties(self) -> None:
        posts = [_labeled(_make(likes=5, post_id=str(i))) for i in range(15)]
        ranked = top_engaged(posts, limit=10)
        assert [p.post.id for p in ranked] == [str(i) for i in range(10)]

    def test_empty_list(self) -> None:
        assert top_engaged([]) == []


class TestLevelDistribution:
    def test_counts_in_tier_order(self) -> None:
        posts = [
            _labeled(_make(likes=500, post_id="1")),
            _labeled(_make(likes=0, post_id="2")),
            _labeled(_make(likes=1, post_id="3")),
        ]
        dist = level_distribution(posts)
        assert list(dist.items()) == [("Low", 2), ("Exceptional", 1)]

    def test_empty(self) -> None:
        assert level_distribution([]) == {}
