"""Platform adapters and identifier handling."""

from profilecheck.config import VerifierConfig
from profilecheck.exceptions import ConfigError
from profilecheck.models.request import Platform
from profilecheck.platforms.base import PlatformScraper, RawProfileSource, SourcePlatformScraper
from profilecheck.platforms.instagram import InstagramScraper
from profilecheck.platforms.sources import JsonFileSource
from profilecheck.platforms.tiktok import TikTokScraper
from profilecheck.platforms.twitter import TwitterScraper
from profilecheck.platforms.usernames import UsernameExtractor, get_extractor
from profilecheck.platforms.youtube import YouTubeScraper

SOURCE_SCRAPERS: dict[Platform, type[SourcePlatformScraper]] = {
    Platform.INSTAGRAM: InstagramScraper,
    Platform.TIKTOK: TikTokScraper,
    Platform.YOUTUBE: YouTubeScraper,
}


def build_scrapers(
    config: VerifierConfig | None = None,
    sources: dict[Platform, RawProfileSource] | None = None,
    include_twitter: bool = True,
) -> dict[Platform, PlatformScraper]:
    """
    Assemble the platform -> scraper map handed to the orchestrator.

    Instagram, TikTok and YouTube need a raw profile source and are only
    included for platforms present in `sources`. X/Twitter is served by the
    browser-based adapter.

    Args:
        config: Pipeline configuration
        sources: Raw profile source per platform
        include_twitter: Add the browser-based X/Twitter adapter

    Returns:
        Dict of platform -> scraper

    Raises:
        ConfigError: If a source is given for a platform without a source adapter
    """
    config = config or VerifierConfig()
    sources = sources or {}
    unsupported = [p.value for p in sources if p not in SOURCE_SCRAPERS]
    if unsupported:
        raise ConfigError(f"No source-backed adapter for: {', '.join(unsupported)}")
    scrapers: dict[Platform, PlatformScraper] = {}

    for platform, scraper_cls in SOURCE_SCRAPERS.items():
        if platform in sources:
            scrapers[platform] = scraper_cls(sources[platform], max_recent_posts=config.max_recent_posts)

    if include_twitter:
        scrapers[Platform.TWITTER] = TwitterScraper(config)

    return scrapers


__all__ = [
    "PlatformScraper",
    "SourcePlatformScraper",
    "RawProfileSource",
    "InstagramScraper",
    "TikTokScraper",
    "YouTubeScraper",
    "TwitterScraper",
    "JsonFileSource",
    "UsernameExtractor",
    "get_extractor",
    "build_scrapers",
]
