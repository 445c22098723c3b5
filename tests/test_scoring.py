"""Unit tests for overall scoring and result construction."""

from datetime import datetime

import pytest

from profilecheck.core.scoring import (
    VERIFICATION_THRESHOLD,
    WEIGHTS,
    build_result,
    calculate_overall_score,
    degraded_result,
    round_half_up,
)
from profilecheck.models.analysis import (
    BrandCompatibility,
    DemographicMatch,
    FollowerQuality,
    FollowerValidation,
    MatchAnalysis,
    NicheAlignment,
)
from profilecheck.models.profile import ProfileData
from profilecheck.models.request import Platform, VerificationRequest


def make_analysis(niche: int, demographics: int, brand: int, followers: int) -> MatchAnalysis:
    return MatchAnalysis(
        niche_alignment=NicheAlignment(score=niche),
        demographic_match=DemographicMatch(score=demographics, location_match=True),
        brand_compatibility=BrandCompatibility(score=brand),
        follower_validation=FollowerValidation(score=followers, in_range=True),
    )


class TestRounding:
    """Test half-up rounding."""

    @pytest.mark.parametrize("value,expected", [(2.5, 3), (3.5, 4), (72.49, 72), (0.0, 0), (99.5, 100)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestOverallScore:
    """Test the weighted overall score."""

    def test_weights_sum_to_hundred(self):
        assert sum(WEIGHTS.values()) == 100

    def test_weighted_sum(self):
        assert calculate_overall_score(make_analysis(20, 100, 100, 100)) == 76

    def test_half_rounds_up(self):
        # 15 * 0.30 = 4.5
        assert calculate_overall_score(make_analysis(15, 0, 0, 0)) == 5

    def test_bounds(self):
        assert calculate_overall_score(make_analysis(0, 0, 0, 0)) == 0
        assert calculate_overall_score(make_analysis(100, 100, 100, 100)) == 100

    def test_deterministic(self):
        analysis = make_analysis(33, 67, 41, 89)
        assert calculate_overall_score(analysis) == calculate_overall_score(analysis.model_copy(deep=True))


class TestBuildResult:
    """Test successful result assembly."""

    def setup_method(self):
        self.request = VerificationRequest(profile_identifier="@someone", platform=Platform.INSTAGRAM)
        self.profile = ProfileData(username="someone")

    def test_fields(self):
        scraped_at = datetime(2026, 1, 1, 12, 0)
        result = build_result(self.request, self.profile, make_analysis(20, 100, 100, 100), scraped_at)
        assert result.overall_score == 76
        assert result.confidence == 0.76
        assert result.verified is True
        assert result.errors is None
        assert result.degraded is False
        assert result.scraped_at == scraped_at
        assert result.extracted_data == self.profile
        assert result.profile_identifier == "@someone"

    def test_threshold_is_inclusive(self):
        # 30 + 25 + 15 = 70
        at = build_result(self.request, self.profile, make_analysis(100, 0, 100, 60))
        assert at.overall_score == VERIFICATION_THRESHOLD
        assert at.verified is True

        below = build_result(self.request, self.profile, make_analysis(100, 0, 100, 56))
        assert below.overall_score == 69
        assert below.verified is False


class TestDegradedResult:
    """Test zero-score placeholders."""

    def test_fields(self):
        request = VerificationRequest(
            profile_identifier="https://www.instagram.com/someone/",
            platform=Platform.INSTAGRAM,
        )
        result = degraded_result(request, "Failed to scrape profile data")

        assert result.verified is False
        assert result.overall_score == 0
        assert result.confidence == 0.0
        assert result.errors == ["Failed to scrape profile data"]
        assert result.degraded is True
        assert result.extracted_data.username == "someone"

        analysis = result.match_analysis
        assert analysis.niche_alignment.score == 0
        assert analysis.demographic_match.location_match is False
        assert analysis.brand_compatibility.red_flags == ["Scraping failed"]
        assert analysis.follower_validation.in_range is False
        assert analysis.follower_validation.quality == FollowerQuality.LOW
        assert analysis.follower_validation.explanation == "Could not validate - scraping failed"

    def test_empty_reason(self):
        request = VerificationRequest(profile_identifier="someone", platform=Platform.TIKTOK)
        assert degraded_result(request, "").errors == ["Unknown error"]
