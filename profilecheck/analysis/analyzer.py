"""Combines the four sub-analyzers into a MatchAnalysis."""

from profilecheck.analysis.brand import analyze_brand_compatibility
from profilecheck.analysis.demographics import analyze_demographics
from profilecheck.analysis.followers import validate_followers
from profilecheck.analysis.niche import analyze_niche_alignment
from profilecheck.models.analysis import MatchAnalysis
from profilecheck.models.profile import ProfileData
from profilecheck.models.request import SearchCriteria


def analyze_profile(
    profile: ProfileData,
    criteria: SearchCriteria,
    current_year: int | None = None,
) -> MatchAnalysis:
    """Run every sub-analyzer on one profile. Pure apart from the default year."""
    return MatchAnalysis(
        niche_alignment=analyze_niche_alignment(profile, criteria.niches, criteria.brand_name),
        demographic_match=analyze_demographics(profile, criteria, current_year),
        brand_compatibility=analyze_brand_compatibility(profile, criteria.brand_name),
        follower_validation=validate_followers(profile, criteria),
    )
