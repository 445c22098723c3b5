"""X/Twitter adapter: renders the profile page in a browser and parses it."""

from profilecheck.config import VerifierConfig
from profilecheck.models.profile import ProfileData
from profilecheck.models.request import Platform
from profilecheck.platforms.base import PlatformScraper
from profilecheck.platforms.twitter.fetcher import fetch_profile_page
from profilecheck.platforms.twitter.parser import parse_page


class TwitterScraper(PlatformScraper):
    """Scrapes public X/Twitter profiles with Playwright + BeautifulSoup."""

    platform = Platform.TWITTER

    def __init__(self, config: VerifierConfig | None = None):
        self.config = config or VerifierConfig()
        super().__init__(max_recent_posts=self.config.max_recent_posts)

    async def fetch_profile(self, username: str) -> ProfileData | None:
        html = await fetch_profile_page(
            username,
            headless=self.config.headless,
            timeout_ms=self.config.browser_timeout_ms,
            user_agent=self.config.user_agent,
            proxy=self.config.proxy_url,
        )
        return parse_page(html, username, max_posts=self.max_recent_posts)


__all__ = ["TwitterScraper"]
