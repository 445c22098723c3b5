"""Verification request and search criteria models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Platform(str, Enum):
    """Supported social platforms."""
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    YOUTUBE = "youtube"
    TWITTER = "twitter"


class Gender(str, Enum):
    """Target gender of a search."""
    MALE = "male"
    FEMALE = "female"
    ANY = "any"


class SearchCriteria(BaseModel):
    """What the caller is looking for in a profile."""

    model_config = ConfigDict(frozen=True)

    min_age: int | None = Field(default=None, ge=0)
    max_age: int | None = Field(default=None, ge=0)
    location: str | None = None
    gender: Gender | None = None
    niches: list[str] = []
    brand_name: str | None = None
    min_followers: int | None = Field(default=None, ge=0)
    max_followers: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "SearchCriteria":
        if self.min_age and self.max_age and self.min_age > self.max_age:
            raise ValueError("min_age cannot be greater than max_age")
        if self.min_followers and self.max_followers and self.min_followers > self.max_followers:
            raise ValueError("min_followers cannot be greater than max_followers")
        return self


class VerificationRequest(BaseModel):
    """A profile identifier plus the criteria to score it against."""

    model_config = ConfigDict(frozen=True)

    profile_identifier: str
    platform: Platform
    criteria: SearchCriteria = Field(default_factory=SearchCriteria)
