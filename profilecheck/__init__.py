"""profilecheck - batch social profile verification."""

from profilecheck.models.profile import Post, ProfileData
from profilecheck.models.request import Gender, Platform, SearchCriteria, VerificationRequest
from profilecheck.models.analysis import MatchAnalysis
from profilecheck.models.result import VerificationReport, VerificationResult, VerificationSummary
from profilecheck.config import VerifierConfig
from profilecheck.core.orchestrator import BatchOrchestrator, dynamic_batch_size
from profilecheck.core.rate_limiter import RateLimiter
from profilecheck.core.exporter import to_json, to_dict, save_report, load_report
from profilecheck.analysis.analyzer import analyze_profile
from profilecheck.platforms import JsonFileSource, PlatformScraper, build_scrapers

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "BatchOrchestrator",
    "VerifierConfig",
    "RateLimiter",
    "build_scrapers",
    "dynamic_batch_size",
    "analyze_profile",
    # Platforms
    "PlatformScraper",
    "JsonFileSource",
    # Models
    "Post",
    "ProfileData",
    "Gender",
    "Platform",
    "SearchCriteria",
    "VerificationRequest",
    "MatchAnalysis",
    "VerificationResult",
    "VerificationSummary",
    "VerificationReport",
    # Export utilities
    "to_json",
    "to_dict",
    "save_report",
    "load_report",
    "__version__",
]
