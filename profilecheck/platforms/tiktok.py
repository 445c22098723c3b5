"""TikTok adapter for profile-scraper dataset items."""

from profilecheck.models.profile import ProfileData
from profilecheck.models.request import Platform
from profilecheck.platforms.base import SourcePlatformScraper
from profilecheck.platforms.normalize import normalize_count, optional_str


class TikTokScraper(SourcePlatformScraper):
    """
    Maps TikTok items to ProfileData.

    Profile fields live under `authorMeta` (name, nickName, fans, following,
    video, signature, avatar, verified, region); recent videos under
    `collector` as {text, diggCount, commentCount}.
    """

    platform = Platform.TIKTOK

    def transform(self, raw: dict, username: str) -> ProfileData:
        author = raw.get("authorMeta") or {}
        return ProfileData(
            username=optional_str(author.get("name")) or username,
            display_name=optional_str(author.get("nickName")),
            follower_count=normalize_count(author.get("fans")),
            following_count=normalize_count(author.get("following")),
            post_count=normalize_count(author.get("video")),
            bio=optional_str(author.get("signature")),
            location=optional_str(author.get("region")),
            profile_picture_url=optional_str(author.get("avatar")),
            is_verified=bool(author.get("verified")),
            recent_posts=self._posts(
                raw.get("collector"),
                lambda video: self._post(video.get("text"), video.get("diggCount"), video.get("commentCount")),
            ),
        )
