"""Demographic match: location, age and gender sub-scores."""

from profilecheck.analysis.age import AgeEstimate, estimate_age
from profilecheck.analysis.gender import estimate_gender
from profilecheck.analysis.locale import find_locale_provider, substring_location_match
from profilecheck.models.analysis import DemographicMatch
from profilecheck.models.profile import ProfileData
from profilecheck.models.request import Gender, SearchCriteria

LOCATION_WEIGHT = 40
AGE_BOUND_WEIGHT = 15
GENDER_WEIGHT = 30
GENDER_UNKNOWN_CREDIT = 15


def _location_score(profile: ProfileData, target: str | None, notes: list[str]) -> tuple[int, bool]:
    if not target:
        return LOCATION_WEIGHT, True

    provider = find_locale_provider(target)
    if provider:
        detection = provider.detect(profile)
        if detection.is_match:
            notes.append(
                f"Location detected ({detection.confidence}% confidence): "
                f"{'; '.join(detection.indicators[:2])}"
            )
            if detection.detected_locations:
                notes.append(f"Specific locations: {', '.join(detection.detected_locations[:3])}")
            return LOCATION_WEIGHT, True
        notes.append(f"No location indicators for {target} ({detection.confidence}% confidence)")
        return 0, False

    if not profile.location:
        notes.append("No location information available in profile")
        return 0, False
    if substring_location_match(profile.location, target):
        notes.append(f"Location matches: {profile.location}")
        return LOCATION_WEIGHT, True
    notes.append(f"Location mismatch: {profile.location} vs {target}")
    return 0, False


def _age_score(estimate: AgeEstimate | None, criteria: SearchCriteria, notes: list[str]) -> int:
    if estimate is None:
        notes.append("Age could not be determined from profile")
        return 2 * AGE_BOUND_WEIGHT

    age = estimate.estimated_age
    if estimate.age_range:
        low, high = estimate.age_range
        notes.append(f"Age estimated: {low}-{high} ({estimate.confidence_level} confidence, method: {estimate.method})")
    else:
        notes.append(f"Age estimated: {age} ({estimate.confidence_level} confidence, method: {estimate.method})")

    score = 0
    if criteria.min_age is None:
        score += AGE_BOUND_WEIGHT
    elif age >= criteria.min_age:
        score += AGE_BOUND_WEIGHT
        notes.append(f"Age {age} meets minimum requirement ({criteria.min_age}+)")
    else:
        notes.append(f"Age {age} below minimum requirement ({criteria.min_age}+)")

    if criteria.max_age is None:
        score += AGE_BOUND_WEIGHT
    elif age <= criteria.max_age:
        score += AGE_BOUND_WEIGHT
        notes.append(f"Age {age} meets maximum requirement ({criteria.max_age}-)")
    else:
        notes.append(f"Age {age} above maximum requirement ({criteria.max_age}-)")
    return score


def _gender_score(estimated: str | None, hits: int, target: Gender | None, notes: list[str]) -> int:
    if target is None or target == Gender.ANY:
        return GENDER_WEIGHT
    if estimated is None:
        notes.append("Gender could not be determined from profile")
        return GENDER_UNKNOWN_CREDIT
    if estimated == target.value:
        notes.append(f"Gender appears to match: {estimated} ({hits} indicators)")
        return GENDER_WEIGHT
    notes.append(f"Gender mismatch: appears {estimated}, looking for {target.value}")
    return 0


def analyze_demographics(
    profile: ProfileData,
    criteria: SearchCriteria,
    current_year: int | None = None,
) -> DemographicMatch:
    """
    Score location (40), age (30) and gender (30) against the criteria.

    A criterion that is not set earns its full weight. An age or gender
    that cannot be estimated is never penalized below partial credit.

    Args:
        profile: Normalized profile
        criteria: Search criteria
        current_year: Passed to the age estimator

    Returns:
        DemographicMatch
    """
    notes: list[str] = []

    location_points, location_match = _location_score(profile, criteria.location, notes)

    estimate = estimate_age(profile, current_year)
    age_points = _age_score(estimate, criteria, notes)

    gender, hits = estimate_gender(profile)
    gender_points = _gender_score(gender, hits, criteria.gender, notes)

    return DemographicMatch(
        score=min(100, location_points + age_points + gender_points),
        estimated_age=estimate.estimated_age if estimate else None,
        estimated_gender=gender,
        location_match=location_match,
        explanation="; ".join(notes),
    )
