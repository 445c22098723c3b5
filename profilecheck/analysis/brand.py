"""Brand profiles and brand compatibility analysis."""

from dataclasses import dataclass

from profilecheck.models.analysis import BrandCompatibility
from profilecheck.models.profile import ProfileData

BASELINE_SCORE = 50
GENERIC_BRAND_BONUS = 10
VERIFIED_BONUS = 10
ENGAGEMENT_ADJUSTMENT = 10
HIGH_ENGAGEMENT_LIKES = 1000
LOW_ENGAGEMENT_LIKES = 50


@dataclass(frozen=True)
class ContentRule:
    """Bonus applied once when any of `keywords` appears in the profile text."""

    keywords: tuple[str, ...]
    points: int
    reason: str


@dataclass(frozen=True)
class BrandProfile:
    """What a known brand looks for, and who it competes with."""

    name: str
    keywords: tuple[str, ...]
    content_rules: tuple[ContentRule, ...] = ()
    competitors: tuple[str, ...] = ()
    competitor_penalty: int = 20


BRAND_PROFILES: dict[str, BrandProfile] = {
    "ikea": BrandProfile(
        name="ikea",
        keywords=(
            "ikea", "furniture", "home", "interior", "design", "storage", "minimalist",
            "nordic", "scandinavian", "affordable", "diy", "assembly",
        ),
        content_rules=(
            ContentRule(("home", "interior"), 20, "Content includes home/interior themes"),
            ContentRule(("diy", "furniture"), 15, "Shows interest in DIY/furniture"),
        ),
        competitors=("west elm", "pottery barn", "wayfair", "cb2"),
    ),
    "nike": BrandProfile(
        name="nike",
        keywords=(
            "nike", "sport", "athletic", "fitness", "running", "training",
            "performance", "just do it",
        ),
        content_rules=(
            ContentRule(("sport", "athletic", "running"), 20, "Content includes sport/athletic themes"),
            ContentRule(("training", "fitness"), 15, "Shows interest in training/fitness"),
        ),
        competitors=("adidas", "puma", "under armour", "reebok"),
    ),
    "sephora": BrandProfile(
        name="sephora",
        keywords=("sephora", "beauty", "makeup", "skincare", "cosmetics", "products"),
        content_rules=(
            ContentRule(("makeup", "beauty"), 20, "Content includes makeup/beauty themes"),
            ContentRule(("skincare", "cosmetics"), 15, "Shows interest in skincare/cosmetics"),
        ),
        competitors=("ulta", "douglas", "primor"),
    ),
}


def get_brand_profile(brand_name: str | None) -> BrandProfile | None:
    """Known profile for a brand name (case-insensitive), if any."""
    if not brand_name:
        return None
    return BRAND_PROFILES.get(brand_name.strip().lower())


def analyze_brand_compatibility(profile: ProfileData, brand_name: str | None) -> BrandCompatibility:
    """
    Score how suitable a profile is for a brand collaboration.

    Starts from a neutral baseline; brand content rules and account
    signals push it up, competitor mentions and weak engagement push it
    down. Positive signals go to `reasons`, negative ones to `red_flags`.

    Args:
        profile: Normalized profile
        brand_name: Target brand, or None for no brand requirement

    Returns:
        BrandCompatibility with score clamped to [0, 100]
    """
    if not brand_name:
        return BrandCompatibility(
            score=100,
            reasons=["No specific brand requirements"],
            explanation="No specific brand requirements",
        )

    text = profile.text_corpus().lower()
    reasons: list[str] = []
    red_flags: list[str] = []
    score = BASELINE_SCORE

    brand = get_brand_profile(brand_name)
    if brand:
        for rule in brand.content_rules:
            if any(keyword in text for keyword in rule.keywords):
                score += rule.points
                reasons.append(rule.reason)

        mentioned = [name for name in brand.competitors if name in text]
        if mentioned:
            score -= brand.competitor_penalty
            red_flags.append(f"Mentions competitors: {', '.join(mentioned)}")
    else:
        score += GENERIC_BRAND_BONUS
        reasons.append("Profile appears suitable for brand collaboration")

    if profile.is_verified:
        score += VERIFIED_BONUS
        reasons.append("Verified account shows credibility")

    mean_likes = profile.mean_likes_per_post
    if mean_likes > HIGH_ENGAGEMENT_LIKES:
        score += ENGAGEMENT_ADJUSTMENT
        reasons.append("High engagement rates")
    elif mean_likes < LOW_ENGAGEMENT_LIKES:
        score -= ENGAGEMENT_ADJUSTMENT
        red_flags.append("Low engagement rates")

    score = max(0, min(100, score))
    return BrandCompatibility(
        score=score,
        reasons=reasons,
        red_flags=red_flags,
        explanation=(
            f"{brand_name} compatibility {score}/100: "
            f"{len(reasons)} positive signal(s), {len(red_flags)} red flag(s)"
        ),
    )
