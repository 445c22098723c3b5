"""YouTube adapter for channel-scraper dataset items."""

from profilecheck.models.profile import ProfileData
from profilecheck.models.request import Platform
from profilecheck.platforms.base import SourcePlatformScraper
from profilecheck.platforms.normalize import normalize_count, optional_str


def _video_text(video: dict) -> str:
    return " ".join(part for part in (video.get("title"), video.get("description")) if part)


class YouTubeScraper(SourcePlatformScraper):
    """Maps YouTube channel items (channelName, subscriberCount, videos[...]) to ProfileData."""

    platform = Platform.YOUTUBE

    def transform(self, raw: dict, username: str) -> ProfileData:
        return ProfileData(
            username=optional_str(raw.get("channelUsername")) or username,
            display_name=optional_str(raw.get("channelName")),
            follower_count=normalize_count(raw.get("subscriberCount")),
            post_count=normalize_count(raw.get("videoCount")),
            bio=optional_str(raw.get("description") or raw.get("channelDescription")),
            location=optional_str(raw.get("channelLocation")),
            website=optional_str(raw.get("channelUrl")),
            profile_picture_url=optional_str(raw.get("channelThumbnail")),
            is_verified=bool(raw.get("isChannelVerified")),
            recent_posts=self._posts(
                raw.get("videos"),
                lambda video: self._post(_video_text(video), video.get("likeCount"), video.get("commentCount")),
            ),
        )
