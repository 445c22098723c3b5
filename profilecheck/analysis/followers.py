"""Follower count validation and engagement quality."""

from profilecheck.models.analysis import FollowerQuality, FollowerValidation
from profilecheck.models.profile import ProfileData
from profilecheck.models.request import SearchCriteria

OUT_OF_RANGE_PENALTY = 50
HIGH_ENGAGEMENT_RATE = 0.05
LOW_ENGAGEMENT_RATE = 0.01
HIGH_QUALITY_BONUS = 10
LOW_QUALITY_PENALTY = 20


def engagement_rate(profile: ProfileData) -> float:
    """Mean likes per recent post divided by followers (at least 1)."""
    return profile.mean_likes_per_post / max(profile.follower_count or 0, 1)


def validate_followers(profile: ProfileData, criteria: SearchCriteria) -> FollowerValidation:
    """
    Check the follower count against the requested bounds.

    Each violated bound costs 50 points. Engagement above 5% earns 10,
    below 1% costs 20. A missing follower count is treated as 0.

    Args:
        profile: Normalized profile
        criteria: Search criteria with optional follower bounds

    Returns:
        FollowerValidation with score clamped to [0, 100]
    """
    followers = profile.follower_count or 0
    score = 100
    in_range = True
    explanations: list[str] = []

    if criteria.min_followers and followers < criteria.min_followers:
        score -= OUT_OF_RANGE_PENALTY
        in_range = False
        explanations.append(f"Below minimum: {followers:,} < {criteria.min_followers:,}")

    if criteria.max_followers and followers > criteria.max_followers:
        score -= OUT_OF_RANGE_PENALTY
        in_range = False
        explanations.append(f"Above maximum: {followers:,} > {criteria.max_followers:,}")

    rate = engagement_rate(profile)
    if rate > HIGH_ENGAGEMENT_RATE:
        quality = FollowerQuality.HIGH
        score += HIGH_QUALITY_BONUS
        explanations.append("High engagement rate indicates quality followers")
    elif rate < LOW_ENGAGEMENT_RATE:
        quality = FollowerQuality.LOW
        score -= LOW_QUALITY_PENALTY
        explanations.append("Low engagement rate may indicate fake followers")
    else:
        quality = FollowerQuality.MEDIUM

    if followers > 0:
        explanations.append(f"{followers:,} followers with {rate * 100:.2f}% engagement")

    return FollowerValidation(
        score=max(0, min(100, score)),
        in_range=in_range,
        quality=quality,
        engagement_rate=rate,
        explanation="; ".join(explanations),
    )
