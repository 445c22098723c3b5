"""Unit tests for follower validation."""

import pytest

from profilecheck.analysis.followers import engagement_rate, validate_followers
from profilecheck.models.analysis import FollowerQuality
from profilecheck.models.profile import Post, ProfileData
from profilecheck.models.request import SearchCriteria


def make_profile(followers: int | None, likes: list[int]) -> ProfileData:
    return ProfileData(
        username="someone",
        follower_count=followers,
        recent_posts=[Post(content="", likes=n) for n in likes],
    )


class TestEngagementRate:
    """Test engagement rate computation."""

    def test_mean_likes_over_followers(self):
        assert engagement_rate(make_profile(10_000, [100, 300])) == pytest.approx(0.02)

    def test_zero_followers_uses_one(self):
        assert engagement_rate(make_profile(0, [5])) == 5.0

    def test_no_posts(self):
        assert engagement_rate(make_profile(1000, [])) == 0.0


class TestValidateFollowers:
    """Test follower bounds and quality tiers."""

    def test_in_range_medium(self):
        criteria = SearchCriteria(min_followers=10_000, max_followers=500_000)
        result = validate_followers(make_profile(50_000, [2000]), criteria)
        assert result.score == 100
        assert result.in_range is True
        assert result.quality == FollowerQuality.MEDIUM
        assert result.engagement_rate == pytest.approx(0.04)
        assert "50,000 followers with 4.00% engagement" in result.explanation

    def test_below_minimum_costs_exactly_fifty(self):
        profile = make_profile(5_000, [150])
        baseline = validate_followers(profile, SearchCriteria())
        result = validate_followers(profile, SearchCriteria(min_followers=10_000))

        assert result.in_range is False
        assert baseline.score - result.score == 50
        assert result.explanation.startswith("Below minimum: 5,000 < 10,000")

    def test_above_maximum(self):
        result = validate_followers(make_profile(600_000, [12_000]), SearchCriteria(max_followers=500_000))
        assert result.score == 50
        assert result.in_range is False

    def test_high_quality_clamped(self):
        result = validate_followers(make_profile(1_000, [100]), SearchCriteria())
        assert result.quality == FollowerQuality.HIGH
        assert result.score == 100

    def test_high_quality_offsets_penalty(self):
        result = validate_followers(make_profile(1_000, [100]), SearchCriteria(min_followers=5_000))
        assert result.score == 60

    def test_low_quality(self):
        result = validate_followers(make_profile(100_000, [10]), SearchCriteria())
        assert result.quality == FollowerQuality.LOW
        assert result.score == 80

    def test_missing_follower_count(self):
        result = validate_followers(make_profile(None, []), SearchCriteria(min_followers=10))
        assert result.in_range is False
        assert result.quality == FollowerQuality.LOW
        assert result.score == 30

    def test_zero_bound_not_checked(self):
        result = validate_followers(make_profile(0, []), SearchCriteria(min_followers=0))
        assert result.in_range is True
