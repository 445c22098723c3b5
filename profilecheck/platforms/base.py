"""Abstract platform scraper interface."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from profilecheck.logging import get_logger
from profilecheck.models.profile import Post, ProfileData
from profilecheck.models.request import Platform
from profilecheck.platforms.normalize import extract_hashtags, normalize_count
from profilecheck.platforms.usernames import IdentifierInfo, UsernameExtractor, get_extractor

# The opaque external client: username -> raw payload (one item or a dataset page)
RawProfileSource = Callable[[str], Awaitable[dict | list[dict] | None]]


class PlatformScraper(ABC):
    """
    Translates a profile identifier into a canonical ProfileData.

    Subclasses implement `fetch_profile`, which may raise. `scrape` is the
    public entry point and never raises: every failure is logged and mapped
    to None.
    """

    platform: Platform

    def __init__(self, extractor: UsernameExtractor | None = None, max_recent_posts: int = 5):
        self.extractor = extractor or get_extractor(self.platform)
        self.max_recent_posts = max_recent_posts
        self._log = get_logger(f"scraper.{self.platform.value}")

    def resolve(self, identifier: str) -> IdentifierInfo:
        """
        Validate an identifier before any network call.

        Raises:
            InvalidIdentifierError: If no valid username can be extracted
        """
        return self.extractor.extract(identifier)

    async def scrape(self, username: str) -> ProfileData | None:
        """
        Fetch and normalize a profile.

        Args:
            username: Validated username (see `resolve`)

        Returns:
            ProfileData, or None if the profile could not be fetched or parsed
        """
        try:
            profile = await self.fetch_profile(username)
        except Exception as e:
            self._log.warning(
                "scrape_failed",
                username=username,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        if profile is None:
            self._log.info("scrape_empty", username=username)
        return profile

    @abstractmethod
    async def fetch_profile(self, username: str) -> ProfileData | None:
        """
        Fetch a profile from the platform.

        Args:
            username: Validated username

        Returns:
            ProfileData or None when the platform returned nothing
        """
        ...

    def _posts(self, raw_posts: Any, to_post: Callable[[dict], Post]) -> list[Post]:
        if not isinstance(raw_posts, list):
            return []
        return [to_post(item) for item in raw_posts[: self.max_recent_posts] if isinstance(item, dict)]

    @staticmethod
    def _post(content: str | None, likes: Any, comments: Any) -> Post:
        text = content or ""
        return Post(
            content=text,
            likes=_count(likes),
            comments=_count(comments),
            hashtags=extract_hashtags(text),
        )


class SourcePlatformScraper(PlatformScraper):
    """
    Scraper backed by an injected raw profile source.

    Subclasses only translate the platform's payload schema in `transform`.
    """

    def __init__(
        self,
        source: RawProfileSource,
        extractor: UsernameExtractor | None = None,
        max_recent_posts: int = 5,
    ):
        super().__init__(extractor, max_recent_posts)
        self.source = source

    async def fetch_profile(self, username: str) -> ProfileData | None:
        payload = await self.source(username)
        if isinstance(payload, list):
            payload = next((item for item in payload if isinstance(item, dict)), None)
        if not payload:
            return None
        return self.transform(payload, username)

    @abstractmethod
    def transform(self, raw: dict, username: str) -> ProfileData:
        """
        Map a raw platform payload to ProfileData.

        Args:
            raw: First item returned by the source
            username: Requested username, used when the payload lacks one
        """
        ...


def _count(value: Any) -> int:
    return normalize_count(value) or 0
