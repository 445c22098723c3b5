"""Pydantic models for profilecheck."""

from profilecheck.models.profile import Post, ProfileData
from profilecheck.models.request import Gender, Platform, SearchCriteria, VerificationRequest
from profilecheck.models.analysis import (
    BrandCompatibility,
    DemographicMatch,
    FollowerQuality,
    FollowerValidation,
    MatchAnalysis,
    NicheAlignment,
)
from profilecheck.models.result import VerificationReport, VerificationResult, VerificationSummary

__all__ = [
    "Post",
    "ProfileData",
    "Gender",
    "Platform",
    "SearchCriteria",
    "VerificationRequest",
    "BrandCompatibility",
    "DemographicMatch",
    "FollowerQuality",
    "FollowerValidation",
    "MatchAnalysis",
    "NicheAlignment",
    "VerificationReport",
    "VerificationResult",
    "VerificationSummary",
]
