"""Match analysis sub-result models."""

from enum import Enum

from pydantic import BaseModel, Field


class FollowerQuality(str, Enum):
    """Audience quality tier derived from engagement."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class NicheAlignment(BaseModel):
    score: int = Field(ge=0, le=100)
    matched_keywords: list[str] = []
    explanation: str = ""


class DemographicMatch(BaseModel):
    score: int = Field(ge=0, le=100)
    estimated_age: int | None = None
    estimated_gender: str | None = None
    location_match: bool = False
    explanation: str = ""


class BrandCompatibility(BaseModel):
    score: int = Field(ge=0, le=100)
    reasons: list[str] = []
    red_flags: list[str] = []
    explanation: str = ""


class FollowerValidation(BaseModel):
    score: int = Field(ge=0, le=100)
    in_range: bool = False
    quality: FollowerQuality = FollowerQuality.LOW
    engagement_rate: float = 0.0
    explanation: str = ""


class MatchAnalysis(BaseModel):
    """The four independent scoring dimensions of a profile."""

    niche_alignment: NicheAlignment
    demographic_match: DemographicMatch
    brand_compatibility: BrandCompatibility
    follower_validation: FollowerValidation
