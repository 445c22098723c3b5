"""Custom exception hierarchy for profilecheck."""


class ProfileCheckError(Exception):
    """Base exception for all profilecheck errors."""


class FetchError(ProfileCheckError):
    """Failed to fetch profile data."""


class PageBlockedError(FetchError):
    """Detected bot blocking or rate limit."""


class ProfileNotFoundError(FetchError):
    """Profile does not exist or is suspended."""


class ParseError(ProfileCheckError):
    """Failed to parse fetched content."""


class InvalidIdentifierError(ProfileCheckError):
    """Profile identifier failed URL/username validation."""

    def __init__(
        self,
        identifier: str,
        reasons: list[str],
        requires_resolution: bool = False,
    ):
        self.identifier = identifier
        self.reasons = reasons
        self.requires_resolution = requires_resolution
        super().__init__(f"Invalid identifier {identifier!r}: {'; '.join(reasons)}")


class UnsupportedPlatformError(ProfileCheckError):
    """No scraper is configured for the requested platform."""


class ConfigError(ProfileCheckError):
    """Invalid configuration."""
