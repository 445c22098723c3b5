"""Platform-specific profile URL parsing and username validation."""

import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from profilecheck.exceptions import InvalidIdentifierError
from profilecheck.models.request import Platform


class UrlType(str, Enum):
    """Kind of link an identifier was given as."""
    HANDLE = "handle"
    PROFILE = "profile"
    VIDEO = "video"
    POST = "post"
    LIVE = "live"
    SHARE = "share"
    UNKNOWN = "unknown"


@dataclass
class IdentifierInfo:
    """A validated username and where it came from."""

    username: str
    url_type: UrlType
    original: str
    normalized_url: str
    content_id: str | None = None


@dataclass
class ExtractionOutcome:
    """Result of extracting one URL found in free text."""

    identifier: str
    info: IdentifierInfo | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.info is not None


@dataclass(frozen=True)
class UrlPattern:
    """
    One URL shape. Patterns are tried in order, first match wins.

    A pattern with an `error` recognizes a URL that cannot yield a username.
    """

    regex: re.Pattern
    url_type: UrlType
    error: str | None = None
    requires_resolution: bool = False


# Query parameters that never affect which profile a URL points at
TRACKING_PARAMS = {
    "utm_source", "utm_medium", "utm_campaign", "utm_content", "utm_term",
    "fbclid", "gclid", "igshid", "igsh", "si", "_nc_ht", "checksum",
    "dry_run", "source", "_r", "_t", "is_from_webapp", "sender_device",
}

MAX_USERNAME_LENGTH = 24

USERNAME_CHARSET = re.compile(r"^[A-Za-z0-9._]+$")
EDGE_SPECIALS = re.compile(r"^[._]{2,}|[._]{2,}$")
CONSECUTIVE_SPECIALS = re.compile(r"[._]{4,}")

SHARE_ERROR = "Share URLs require resolution to extract username"


def clean_url(url: str) -> str:
    """
    Normalize a profile URL for pattern matching.

    Adds a missing scheme, maps mobile hosts to www, lower-cases the host and
    drops tracking parameters.
    """
    cleaned = url.strip()
    if not cleaned.lower().startswith(("http://", "https://")):
        cleaned = "https://" + cleaned

    parts = urlsplit(cleaned)
    host = parts.netloc.lower()
    if host.startswith("m."):
        host = "www." + host[2:]
    elif host.startswith("mobile."):
        host = host[len("mobile."):]

    query = urlencode(
        [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k not in TRACKING_PARAMS]
    )
    return urlunsplit((parts.scheme.lower(), host, parts.path, query, ""))


def validate_username(
    username: str,
    reserved: frozenset[str] = frozenset(),
    max_length: int = MAX_USERNAME_LENGTH,
) -> list[str]:
    """
    Check a username against the shared charset and shape rules.

    Returns:
        List of human-readable problems, empty when the username is valid
    """
    if not username:
        return ["Username cannot be empty"]

    errors = []
    if len(username) > max_length:
        errors.append(f"Username must be {max_length} characters or less")
    if not USERNAME_CHARSET.match(username):
        errors.append("Username can only contain letters, numbers, periods, and underscores")
    if EDGE_SPECIALS.search(username):
        errors.append("Username cannot start or end with multiple periods or underscores")
    if CONSECUTIVE_SPECIALS.search(username):
        errors.append("Username cannot contain 4 or more consecutive periods or underscores")
    if username.lower() in reserved:
        errors.append("Username is reserved and cannot be used")
    return errors


class UsernameExtractor:
    """Turns a profile identifier (handle or URL) into a validated username."""

    def __init__(
        self,
        platform: Platform,
        domains: tuple[str, ...],
        patterns: list[UrlPattern],
        reserved: frozenset[str],
        profile_url_template: str,
        max_length: int = MAX_USERNAME_LENGTH,
    ):
        self.platform = platform
        self.domains = domains
        self.patterns = patterns
        self.reserved = reserved
        self.profile_url_template = profile_url_template
        self.max_length = max_length

        hosts = "|".join(re.escape(d) for d in domains)
        self._host_re = re.compile(rf"^(?:[\w-]+\.)*(?:{hosts})$", re.IGNORECASE)
        self._find_re = re.compile(
            rf"(?<![\w.-])(?:https?://)?(?:[\w-]+\.)*(?:{hosts})/[^\s<>\"']+",
            re.IGNORECASE,
        )

    def looks_like_url(self, identifier: str) -> bool:
        """Whether the identifier should be parsed as a URL instead of a handle."""
        text = identifier.strip()
        if "/" in text or text.lower().startswith(("http://", "https://")):
            return True
        return bool(self._host_re.match(text))

    def is_platform_url(self, url: str) -> bool:
        """Whether the URL points at one of this platform's hosts."""
        host = urlsplit(clean_url(url)).netloc
        return bool(self._host_re.match(host))

    def validate(self, username: str) -> list[str]:
        return validate_username(username, self.reserved, self.max_length)

    def profile_url(self, username: str) -> str:
        """Canonical profile URL for a valid username."""
        username = username.lstrip("@")
        errors = self.validate(username)
        if errors:
            raise InvalidIdentifierError(username, errors)
        return self.profile_url_template.format(username=username)

    def extract(self, identifier: str) -> IdentifierInfo:
        """
        Extract and validate the username behind an identifier.

        Args:
            identifier: Bare handle ("name", "@name") or profile/content URL

        Returns:
            IdentifierInfo for a valid username

        Raises:
            InvalidIdentifierError: Malformed URL, unresolvable link or invalid username
        """
        text = identifier.strip()
        if not text:
            raise InvalidIdentifierError(identifier, ["Identifier cannot be empty"])

        if not self.looks_like_url(text):
            username = text.lstrip("@")
            info = IdentifierInfo(
                username=username,
                url_type=UrlType.HANDLE,
                original=identifier,
                normalized_url=self.profile_url_template.format(username=username),
            )
            return self._validated(info)

        url = clean_url(text)
        if not self.is_platform_url(url):
            raise InvalidIdentifierError(
                identifier, [f"Malformed URL: not a {self.platform.value} URL"]
            )

        for pattern in self.patterns:
            match = pattern.regex.match(url)
            if not match:
                continue
            if pattern.error:
                raise InvalidIdentifierError(
                    identifier, [pattern.error], requires_resolution=pattern.requires_resolution
                )
            groups = match.groupdict()
            username = groups["username"]
            info = IdentifierInfo(
                username=username,
                url_type=pattern.url_type,
                original=identifier,
                normalized_url=self.profile_url_template.format(username=username),
                content_id=groups.get("content_id"),
            )
            return self._validated(info)

        raise InvalidIdentifierError(
            identifier, [f"Malformed URL: does not match any known {self.platform.value} URL pattern"]
        )

    def _validated(self, info: IdentifierInfo) -> IdentifierInfo:
        errors = self.validate(info.username)
        if errors:
            raise InvalidIdentifierError(info.original, errors)
        return info

    def extract_all(self, text: str) -> list[ExtractionOutcome]:
        """Extract every URL of this platform found in free text."""
        outcomes = []
        for match in self._find_re.finditer(text):
            url = match.group(0).rstrip(".,;:!?)")
            try:
                outcomes.append(ExtractionOutcome(identifier=url, info=self.extract(url)))
            except InvalidIdentifierError as e:
                outcomes.append(ExtractionOutcome(identifier=url, error="; ".join(e.reasons)))
        return outcomes


def _p(regex: str, url_type: UrlType, error: str | None = None, resolve: bool = False) -> UrlPattern:
    return UrlPattern(re.compile(regex, re.IGNORECASE), url_type, error, resolve)


_USER = r"(?P<username>[^/?#]+)"
_TAIL = r"(?:[/?#].*)?$"

_TT = r"^https?://(?:www\.)?tiktok\.com"
TIKTOK = UsernameExtractor(
    platform=Platform.TIKTOK,
    domains=("tiktok.com",),
    patterns=[
        _p(rf"{_TT}/@{_USER}/video/(?P<content_id>\d+){_TAIL}", UrlType.VIDEO),
        _p(rf"{_TT}/@{_USER}/live{_TAIL}", UrlType.LIVE),
        _p(rf"^https?://vm\.tiktok\.com/(?P<content_id>[A-Za-z0-9]+){_TAIL}", UrlType.SHARE, SHARE_ERROR, True),
        _p(rf"{_TT}/t/(?P<content_id>[A-Za-z0-9]+){_TAIL}", UrlType.SHARE, SHARE_ERROR, True),
        _p(rf"{_TT}/discover/", UrlType.UNKNOWN, "Discovery URLs do not contain profile information"),
        _p(rf"{_TT}/tag/", UrlType.UNKNOWN, "Hashtag URLs do not contain profile information"),
        _p(rf"{_TT}/music/", UrlType.UNKNOWN, "Sound URLs do not contain profile information"),
        _p(rf"{_TT}/(?:trending|foryou|following){_TAIL}", UrlType.UNKNOWN,
           "Trending/feed URLs do not contain profile information"),
        _p(rf"{_TT}/search", UrlType.UNKNOWN, "Search URLs do not contain profile information"),
        _p(rf"{_TT}/@{_USER}{_TAIL}", UrlType.PROFILE),
    ],
    reserved=frozenset({
        "www", "api", "admin", "support", "help", "tiktok", "bytedance",
        "discover", "trending", "foryou", "live", "music", "tag", "share",
        "embed", "oembed",
    }),
    profile_url_template="https://www.tiktok.com/@{username}",
)

_IG = r"^https?://(?:www\.)?(?:instagram\.com|instagr\.am)"
INSTAGRAM = UsernameExtractor(
    platform=Platform.INSTAGRAM,
    domains=("instagram.com", "instagr.am"),
    patterns=[
        _p(rf"{_IG}/(?:p|reel|reels|tv)/(?P<content_id>[^/?#]+){_TAIL}", UrlType.POST,
           "Post URLs without a username require resolution", True),
        _p(rf"{_IG}/share/", UrlType.SHARE, SHARE_ERROR, True),
        _p(rf"{_IG}/stories/{_USER}{_TAIL}", UrlType.POST),
        _p(rf"{_IG}/explore/", UrlType.UNKNOWN, "Explore and hashtag URLs do not contain profile information"),
        _p(rf"{_IG}/(?:accounts|direct|about|developer|legal)(?:[/?#].*)?$", UrlType.UNKNOWN,
           "System URLs do not contain profile information"),
        _p(rf"{_IG}/{_USER}/(?:p|reel)/(?P<content_id>[^/?#]+){_TAIL}", UrlType.POST),
        _p(rf"{_IG}/{_USER}/live{_TAIL}", UrlType.LIVE),
        _p(rf"{_IG}/{_USER}{_TAIL}", UrlType.PROFILE),
    ],
    reserved=frozenset({
        "www", "api", "admin", "instagram", "explore", "accounts", "p", "reel",
        "reels", "tv", "stories", "direct", "about", "developer", "legal", "share",
    }),
    profile_url_template="https://www.instagram.com/{username}/",
)

_YT = r"^https?://(?:www\.)?youtube\.com"
YOUTUBE = UsernameExtractor(
    platform=Platform.YOUTUBE,
    domains=("youtube.com", "youtu.be"),
    patterns=[
        _p(r"^https?://(?:www\.)?youtu\.be/", UrlType.SHARE, SHARE_ERROR, True),
        _p(rf"{_YT}/watch", UrlType.VIDEO, "Video URLs require resolution to the uploading channel", True),
        _p(rf"{_YT}/shorts/", UrlType.VIDEO, "Video URLs require resolution to the uploading channel", True),
        _p(rf"{_YT}/channel/", UrlType.PROFILE, "Channel ID URLs require resolution to a handle", True),
        _p(rf"{_YT}/(?:results|feed|playlist)", UrlType.UNKNOWN,
           "Search, feed and playlist URLs do not contain profile information"),
        _p(rf"{_YT}/@{_USER}/(?:live|streams){_TAIL}", UrlType.LIVE),
        _p(rf"{_YT}/@{_USER}{_TAIL}", UrlType.PROFILE),
        _p(rf"{_YT}/(?:c|user)/{_USER}{_TAIL}", UrlType.PROFILE),
    ],
    reserved=frozenset({
        "www", "api", "admin", "youtube", "feed", "results", "playlist",
        "watch", "channel", "shorts", "c", "user",
    }),
    profile_url_template="https://www.youtube.com/@{username}",
)

_TW = r"^https?://(?:www\.)?(?:twitter\.com|x\.com)"
TWITTER = UsernameExtractor(
    platform=Platform.TWITTER,
    domains=("twitter.com", "x.com", "t.co"),
    patterns=[
        _p(r"^https?://t\.co/", UrlType.SHARE, SHARE_ERROR, True),
        _p(rf"{_TW}/(?:home|explore|search|i|settings|notifications|messages|hashtag|intent|share)"
           rf"(?:[/?#].*)?$", UrlType.UNKNOWN, "System URLs do not contain profile information"),
        _p(rf"{_TW}/{_USER}/status/(?P<content_id>\d+){_TAIL}", UrlType.POST),
        _p(rf"{_TW}/{_USER}{_TAIL}", UrlType.PROFILE),
    ],
    reserved=frozenset({
        "www", "api", "admin", "twitter", "x", "home", "explore", "search", "i",
        "settings", "notifications", "messages", "hashtag", "intent", "share",
        "login", "signup", "tos", "privacy",
    }),
    profile_url_template="https://x.com/{username}",
)

EXTRACTORS: dict[Platform, UsernameExtractor] = {
    Platform.TIKTOK: TIKTOK,
    Platform.INSTAGRAM: INSTAGRAM,
    Platform.YOUTUBE: YOUTUBE,
    Platform.TWITTER: TWITTER,
}


def get_extractor(platform: Platform) -> UsernameExtractor:
    """Return the extractor for a platform."""
    return EXTRACTORS[Platform(platform)]


def best_effort_username(identifier: str, platform: Platform) -> str:
    """
    Username for display on degraded results; never raises.

    Falls back to the last path segment (or the raw identifier) when the
    identifier does not validate. Share links are returned as given, since
    their last segment is a share code rather than a username.
    """
    text = identifier.strip()
    try:
        return get_extractor(platform).extract(identifier).username
    except InvalidIdentifierError as e:
        if e.requires_resolution:
            return text
        return _fallback_username(text)
    except (KeyError, ValueError):
        return _fallback_username(text)


def _fallback_username(text: str) -> str:
    match = re.search(r"@([^/?\s#]+)", text)
    if match:
        return match.group(1)
    return text.rstrip("/").split("/")[-1] or text
