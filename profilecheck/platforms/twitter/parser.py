"""BeautifulSoup-based parser turning an X/Twitter profile page into ProfileData."""

from bs4 import BeautifulSoup

from profilecheck.exceptions import ParseError
from profilecheck.models.profile import Post, ProfileData
from profilecheck.platforms.normalize import extract_hashtags, normalize_count

# data-testid hooks of the x.com profile page
SELECTORS = {
    "user_name": '[data-testid="UserName"]',
    "user_description": '[data-testid="UserDescription"]',
    "user_url": '[data-testid="UserUrl"]',
    "user_location": '[data-testid="UserLocation"]',
    "followers_link": 'a[href$="/verified_followers"], a[href$="/followers"]',
    "following_link": 'a[href$="/following"]',
    "verified_icon": '[data-testid="icon-verified"]',
    "tweet": '[data-testid="tweet"]',
    "tweet_text": '[data-testid="tweetText"]',
    "reply_button": '[data-testid="reply"]',
    "like_button": '[data-testid="like"]',
}


def parse_profile(soup: BeautifulSoup) -> dict:
    """
    Extract raw profile fields from the page header.

    Returns:
        Dict of raw strings; counts are not yet normalized
    """
    profile = {}

    user_name_el = soup.select_one(SELECTORS["user_name"])
    if user_name_el:
        texts = [span.get_text(strip=True) for span in user_name_el.find_all("span")]
        handle = next((t for t in texts if t.startswith("@")), None)
        display = next((t for t in texts if t and not t.startswith("@")), None)
        if handle:
            profile["username"] = handle[1:]
        if display:
            profile["display_name"] = display

    for field, selector in (
        ("bio", "user_description"),
        ("location", "user_location"),
    ):
        el = soup.select_one(SELECTORS[selector])
        if el:
            profile[field] = el.get_text(" ", strip=True)

    url_el = soup.select_one(SELECTORS["user_url"])
    if url_el:
        link = url_el if url_el.name == "a" else url_el.find("a")
        if link and link.get("href"):
            profile["website"] = link.get("href")

    for field, selector in (
        ("followers_count_raw", "followers_link"),
        ("following_count_raw", "following_link"),
    ):
        el = soup.select_one(SELECTORS[selector])
        if el:
            span = el.find("span")
            profile[field] = (span or el).get_text(strip=True)

    profile["is_verified"] = soup.select_one(SELECTORS["verified_icon"]) is not None
    return profile


def _extract_metric(element) -> str:
    """Metric count from an engagement button ("1.2K Likes" aria-label or nested span)."""
    aria_label = element.get("aria-label", "")
    if aria_label:
        parts = aria_label.split()
        if parts:
            return parts[0]
    span = element.find("span")
    if span:
        return span.get_text(strip=True)
    return "0"


def parse_tweets(soup: BeautifulSoup) -> list[dict]:
    """Extract raw text and engagement for each rendered tweet."""
    tweets = []
    for tweet_el in soup.select(SELECTORS["tweet"]):
        text_el = tweet_el.select_one(SELECTORS["tweet_text"])
        tweet = {"text": text_el.get_text(" ", strip=True) if text_el else ""}

        reply_el = tweet_el.select_one(SELECTORS["reply_button"])
        if reply_el:
            tweet["reply_count_raw"] = _extract_metric(reply_el)

        like_el = tweet_el.select_one(SELECTORS["like_button"])
        if like_el:
            tweet["like_count_raw"] = _extract_metric(like_el)

        tweets.append(tweet)
    return tweets


def parse_page(html: str, username: str, max_posts: int = 5) -> ProfileData:
    """
    Parse a rendered profile page.

    Args:
        html: Raw HTML content
        username: Requested handle, used when the page omits it
        max_posts: Number of tweets to keep

    Returns:
        ProfileData

    Raises:
        ParseError: If the page has no profile header
    """
    soup = BeautifulSoup(html, "lxml")
    raw = parse_profile(soup)
    if "username" not in raw and "display_name" not in raw:
        raise ParseError(f"No profile header found for @{username}")

    posts = []
    for tweet in parse_tweets(soup)[:max_posts]:
        posts.append(Post(
            content=tweet["text"],
            likes=normalize_count(tweet.get("like_count_raw")) or 0,
            comments=normalize_count(tweet.get("reply_count_raw")) or 0,
            hashtags=extract_hashtags(tweet["text"]),
        ))

    return ProfileData(
        username=raw.get("username", username),
        display_name=raw.get("display_name"),
        follower_count=normalize_count(raw.get("followers_count_raw")),
        following_count=normalize_count(raw.get("following_count_raw")),
        bio=raw.get("bio"),
        location=raw.get("location"),
        website=raw.get("website"),
        is_verified=raw.get("is_verified", False),
        recent_posts=posts,
    )
