"""Instagram adapter for profile-scraper dataset items."""

from profilecheck.models.profile import ProfileData
from profilecheck.models.request import Platform
from profilecheck.platforms.base import SourcePlatformScraper
from profilecheck.platforms.normalize import normalize_count, optional_str


class InstagramScraper(SourcePlatformScraper):
    """
    Maps Instagram profile items to ProfileData.

    Expected item shape (camelCase keys as emitted by common scraper actors):
        username, fullName, followersCount, followsCount, postsCount,
        biography, businessCategoryName, city, country, externalUrl, profilePicUrl,
        verified, latestPosts[{caption, likesCount, commentsCount}]
    """

    platform = Platform.INSTAGRAM

    def transform(self, raw: dict, username: str) -> ProfileData:
        return ProfileData(
            username=optional_str(raw.get("username")) or username,
            display_name=optional_str(raw.get("fullName")),
            follower_count=normalize_count(raw.get("followersCount")),
            following_count=normalize_count(raw.get("followsCount")),
            post_count=normalize_count(raw.get("postsCount")),
            bio=optional_str(raw.get("biography")),
            location=optional_str(raw.get("city") or raw.get("country") or raw.get("businessCategoryName")),
            website=optional_str(raw.get("externalUrl")),
            profile_picture_url=optional_str(raw.get("profilePicUrl")),
            is_verified=bool(raw.get("verified")),
            recent_posts=self._posts(
                raw.get("latestPosts"),
                lambda post: self._post(post.get("caption"), post.get("likesCount"), post.get("commentsCount")),
            ),
        )
