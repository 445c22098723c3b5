"""Normalized profile data model."""

from pydantic import BaseModel


class Post(BaseModel):
    """A recent post, video or tweet reduced to the fields the analyzers read."""

    content: str = ""
    likes: int = 0
    comments: int = 0
    hashtags: list[str] = []


class ProfileData(BaseModel):
    """Platform-independent view of a scraped profile."""

    username: str
    display_name: str | None = None
    follower_count: int | None = None
    following_count: int | None = None
    post_count: int | None = None
    bio: str | None = None
    location: str | None = None
    website: str | None = None
    profile_picture_url: str | None = None
    is_verified: bool | None = None
    recent_posts: list[Post] = []

    def text_corpus(self, *, include_location: bool = False, include_display_name: bool = False) -> str:
        """Join bio and post contents (plus optional fields) into one string."""
        parts = [self.bio or ""]
        if include_location:
            parts.append(self.location or "")
        if include_display_name:
            parts.append(self.display_name or "")
        parts.extend(post.content for post in self.recent_posts)
        return " ".join(parts)

    @property
    def mean_likes_per_post(self) -> float:
        """Average likes over recent posts, 0 when there are none."""
        if not self.recent_posts:
            return 0.0
        return sum(post.likes for post in self.recent_posts) / len(self.recent_posts)
