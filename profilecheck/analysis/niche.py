"""Niche alignment: keyword overlap between profile text and requested niches."""

from profilecheck.analysis.brand import get_brand_profile
from profilecheck.models.analysis import NicheAlignment
from profilecheck.models.profile import ProfileData

GENERAL_KEYWORD_POINTS = 10
BRAND_KEYWORD_POINTS = 15

NICHE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "home": (
        "home", "interior", "decor", "furniture", "design", "room", "house", "apartment",
        "living", "kitchen", "bedroom", "decorating", "styling",
    ),
    "lifestyle": (
        "lifestyle", "daily", "life", "routine", "wellness", "self-care", "mindfulness",
        "healthy", "balance",
    ),
    "fashion": (
        "fashion", "style", "outfit", "clothing", "wardrobe", "trend", "designer", "brand",
        "look", "wear",
    ),
    "beauty": ("beauty", "makeup", "skincare", "cosmetics", "hair", "nails", "glow", "routine"),
    "fitness": (
        "fitness", "workout", "gym", "exercise", "health", "training", "muscle", "cardio",
        "yoga", "pilates",
    ),
    "food": (
        "food", "cooking", "recipe", "kitchen", "chef", "delicious", "meal", "restaurant",
        "eat", "taste",
    ),
    "travel": (
        "travel", "trip", "vacation", "explore", "adventure", "destination", "journey",
        "wanderlust", "discover",
    ),
    "tech": (
        "tech", "technology", "gadget", "app", "software", "digital", "innovation", "coding",
        "programming",
    ),
}


def keywords_for_niche(niche: str) -> tuple[str, ...]:
    """Keyword list for a niche; unknown niches match on their own name."""
    key = niche.strip().lower()
    if not key:
        return ()
    return NICHE_KEYWORDS.get(key, (key,))


def _band(score: int, matched: int) -> str:
    if score >= 80:
        return f"Excellent niche alignment with {matched} relevant keywords found"
    if score >= 60:
        return f"Good niche alignment with {matched} relevant keywords found"
    if score >= 40:
        return f"Moderate niche alignment with {matched} relevant keywords found"
    return f"Poor niche alignment - only {matched} relevant keywords found"


def analyze_niche_alignment(
    profile: ProfileData,
    niches: list[str],
    brand_name: str | None = None,
) -> NicheAlignment:
    """
    Count keyword hits of the requested niches (and brand) in bio + posts.

    Each niche keyword found is worth 10 points and each brand keyword 15;
    a keyword shared by two requested niches counts for both. The score is
    capped at 100 and `matched_keywords` lists each hit once.

    Args:
        profile: Normalized profile
        niches: Requested niche names
        brand_name: Optional brand whose keyword set is also checked

    Returns:
        NicheAlignment
    """
    text = profile.text_corpus().lower()
    matched: list[str] = []
    total = 0

    for niche in niches:
        hits = [keyword for keyword in keywords_for_niche(niche) if keyword in text]
        matched.extend(hits)
        total += len(hits) * GENERAL_KEYWORD_POINTS

    brand = get_brand_profile(brand_name)
    if brand:
        hits = [keyword for keyword in brand.keywords if keyword in text]
        matched.extend(hits)
        total += len(hits) * BRAND_KEYWORD_POINTS

    unique = list(dict.fromkeys(matched))
    score = min(100, total)
    return NicheAlignment(score=score, matched_keywords=unique, explanation=_band(score, len(unique)))
