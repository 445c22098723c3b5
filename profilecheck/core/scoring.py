"""Weighted overall score and result construction."""

import math
from datetime import datetime

from profilecheck.models.analysis import (
    BrandCompatibility,
    DemographicMatch,
    FollowerQuality,
    FollowerValidation,
    MatchAnalysis,
    NicheAlignment,
)
from profilecheck.models.profile import ProfileData
from profilecheck.models.request import VerificationRequest
from profilecheck.models.result import VerificationResult
from profilecheck.platforms.usernames import best_effort_username

# Percentages; must sum to 100
WEIGHTS = {
    "niche_alignment": 30,
    "brand_compatibility": 25,
    "follower_validation": 25,
    "demographic_match": 20,
}

VERIFICATION_THRESHOLD = 70

SCRAPE_FAILED = "Could not analyze - scraping failed"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (Python's round() goes to even)."""
    return math.floor(value + 0.5)


def calculate_overall_score(analysis: MatchAnalysis) -> int:
    """
    Weighted sum of the four sub-scores, rounded half up, in [0, 100].

    Integer arithmetic keeps the result exact for every input.
    """
    weighted = sum(getattr(analysis, name).score * weight for name, weight in WEIGHTS.items())
    overall = (weighted + 50) // 100
    return max(0, min(100, overall))


def build_result(
    request: VerificationRequest,
    profile: ProfileData,
    analysis: MatchAnalysis,
    scraped_at: datetime | None = None,
) -> VerificationResult:
    """Assemble a successful result from the analysis of a scraped profile."""
    overall = calculate_overall_score(analysis)
    return VerificationResult(
        profile_identifier=request.profile_identifier,
        platform=request.platform,
        verified=overall >= VERIFICATION_THRESHOLD,
        confidence=overall / 100,
        extracted_data=profile,
        match_analysis=analysis,
        overall_score=overall,
        scraped_at=scraped_at or datetime.now(),
    )


def degraded_result(
    request: VerificationRequest,
    reason: str,
    scraped_at: datetime | None = None,
) -> VerificationResult:
    """
    Zero-score placeholder for a request that could not be scraped or analyzed.

    Args:
        request: The failed request
        reason: Human-readable cause, stored in `errors`
        scraped_at: Timestamp (defaults to now)

    Returns:
        VerificationResult with every score at 0 and verified=False
    """
    analysis = MatchAnalysis(
        niche_alignment=NicheAlignment(score=0, explanation=SCRAPE_FAILED),
        demographic_match=DemographicMatch(score=0, location_match=False, explanation=SCRAPE_FAILED),
        brand_compatibility=BrandCompatibility(score=0, red_flags=["Scraping failed"], explanation=SCRAPE_FAILED),
        follower_validation=FollowerValidation(
            score=0,
            in_range=False,
            quality=FollowerQuality.LOW,
            explanation="Could not validate - scraping failed",
        ),
    )
    return VerificationResult(
        profile_identifier=request.profile_identifier,
        platform=request.platform,
        verified=False,
        confidence=0.0,
        extracted_data=ProfileData(
            username=best_effort_username(request.profile_identifier, request.platform)
        ),
        match_analysis=analysis,
        overall_score=0,
        errors=[reason or "Unknown error"],
        scraped_at=scraped_at or datetime.now(),
    )
