"""Verification result, summary and report models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from profilecheck.models.analysis import MatchAnalysis
from profilecheck.models.profile import ProfileData
from profilecheck.models.request import Platform


class VerificationResult(BaseModel):
    """Outcome of verifying one profile against one set of criteria."""

    model_config = ConfigDict(frozen=True)

    profile_identifier: str
    platform: Platform
    verified: bool
    confidence: float = Field(ge=0.0, le=1.0)
    extracted_data: ProfileData
    match_analysis: MatchAnalysis
    overall_score: int = Field(ge=0, le=100)
    errors: list[str] | None = None
    scraped_at: datetime

    @property
    def degraded(self) -> bool:
        """True when the profile could not be fetched or analyzed."""
        return bool(self.errors)


class VerificationSummary(BaseModel):
    """Aggregate view over a batch of results."""

    total_profiles: int
    verified_profiles: int
    average_score: int
    high_quality_matches: int
    medium_quality_matches: int
    low_quality_matches: int
    processing_time_ms: float
    recommendations: list[str] = []


class VerificationReport(BaseModel):
    """Results plus their summary, as handed back to a caller."""

    results: list[VerificationResult]
    summary: VerificationSummary
    generated_at: datetime
