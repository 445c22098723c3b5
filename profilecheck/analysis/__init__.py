"""Profile analyzers: niche, demographics, brand and followers."""

from profilecheck.analysis.age import AgeEstimate, estimate_age
from profilecheck.analysis.analyzer import analyze_profile
from profilecheck.analysis.brand import BRAND_PROFILES, BrandProfile, ContentRule, analyze_brand_compatibility
from profilecheck.analysis.demographics import analyze_demographics
from profilecheck.analysis.followers import validate_followers
from profilecheck.analysis.gender import estimate_gender
from profilecheck.analysis.locale import (
    LOCALE_PROVIDERS,
    LocaleDetection,
    LocaleHeuristicProvider,
    SpanishLocaleProvider,
    find_locale_provider,
    register_locale_provider,
)
from profilecheck.analysis.niche import NICHE_KEYWORDS, analyze_niche_alignment

__all__ = [
    "analyze_profile",
    "analyze_niche_alignment",
    "analyze_demographics",
    "analyze_brand_compatibility",
    "validate_followers",
    "estimate_age",
    "estimate_gender",
    "AgeEstimate",
    "BrandProfile",
    "ContentRule",
    "BRAND_PROFILES",
    "NICHE_KEYWORDS",
    "LocaleDetection",
    "LocaleHeuristicProvider",
    "SpanishLocaleProvider",
    "LOCALE_PROVIDERS",
    "find_locale_provider",
    "register_locale_provider",
]
