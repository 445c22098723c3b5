"""Batch summary and search recommendations."""

from profilecheck.core.scoring import round_half_up
from profilecheck.models.request import SearchCriteria
from profilecheck.models.result import VerificationResult, VerificationSummary

HIGH_QUALITY_SCORE = 80
MEDIUM_QUALITY_SCORE = 60


def recommendations(results: list[VerificationResult], criteria: SearchCriteria | None = None) -> list[str]:
    """
    Suggestions for the next search, derived from how the batch scored.

    Args:
        results: Verification results of one batch
        criteria: Criteria the batch was searched with

    Returns:
        List of human-readable suggestions (may be empty)
    """
    if not results:
        return []

    total = len(results)
    high = [r for r in results if r.overall_score >= HIGH_QUALITY_SCORE]
    low = [r for r in results if r.overall_score < MEDIUM_QUALITY_SCORE]
    tips: list[str] = []

    if not high:
        tips.append("No high-quality matches found. Consider broadening your search criteria.")
    elif len(high) < 3:
        tips.append("Consider searching for more profiles to increase your options.")

    if len(low) > total * 0.7:
        tips.append("Many profiles have low match scores. Try refining your search parameters.")

    out_of_range = [r for r in results if not r.match_analysis.follower_validation.in_range]
    if len(out_of_range) > total * 0.5:
        tips.append("Many profiles fall outside your follower range. Consider adjusting min/max followers.")

    weak_niche = [r for r in results if r.match_analysis.niche_alignment.score < 50]
    if len(weak_niche) > total * 0.5:
        tips.append("Poor niche alignment detected. Try different keywords or niche categories.")

    if criteria and criteria.location:
        mismatched = [r for r in results if not r.match_analysis.demographic_match.location_match]
        if len(mismatched) > total * 0.7:
            tips.append("Location targeting appears too restrictive. Consider broader geographic areas.")

    if len(high) >= 5:
        tips.append("Great results! You have multiple high-quality matches to choose from.")

    return tips


def summarize(
    results: list[VerificationResult],
    criteria: SearchCriteria | None = None,
    processing_time_ms: float = 0.0,
) -> VerificationSummary:
    """Counts, quality bands and average score of a batch of results."""
    total = len(results)
    average = round_half_up(sum(r.overall_score for r in results) / total) if total else 0
    return VerificationSummary(
        total_profiles=total,
        verified_profiles=sum(1 for r in results if r.verified),
        average_score=average,
        high_quality_matches=sum(1 for r in results if r.overall_score >= HIGH_QUALITY_SCORE),
        medium_quality_matches=sum(
            1 for r in results if MEDIUM_QUALITY_SCORE <= r.overall_score < HIGH_QUALITY_SCORE
        ),
        low_quality_matches=sum(1 for r in results if r.overall_score < MEDIUM_QUALITY_SCORE),
        processing_time_ms=processing_time_ms,
        recommendations=recommendations(results, criteria),
    )
