"""Playwright-based page fetcher for X/Twitter profiles."""

from playwright.async_api import async_playwright, Error as PlaywrightError

from profilecheck.exceptions import FetchError, PageBlockedError, ProfileNotFoundError

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


async def fetch_profile_page(
    username: str,
    headless: bool = True,
    timeout_ms: int = 30000,
    user_agent: str | None = None,
    proxy: str | None = None,
) -> str:
    """
    Fetch the rendered HTML of an X/Twitter profile page.

    Args:
        username: X/Twitter handle (without @)
        headless: Run browser in headless mode
        timeout_ms: Page load timeout in milliseconds
        user_agent: Custom user agent string
        proxy: Proxy URL (e.g., "http://proxy:8080")

    Returns:
        Rendered HTML

    Raises:
        ProfileNotFoundError: HTTP 404
        PageBlockedError: HTTP 403/429
        FetchError: Any other browser or HTTP failure
    """
    url = f"https://x.com/{username}"

    async with async_playwright() as p:
        launch_options = {"headless": headless}
        if proxy:
            launch_options["proxy"] = {"server": proxy}

        browser = await p.chromium.launch(**launch_options)

        try:
            context = await browser.new_context(
                viewport={"width": 1920, "height": 1080},
                user_agent=user_agent or DEFAULT_USER_AGENT,
            )
            page = await context.new_page()

            response = await page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
            if response is None:
                raise FetchError("No response received")

            status = response.status
            if status == 404:
                raise ProfileNotFoundError(f"Profile @{username} not found")
            if status in (403, 429):
                raise PageBlockedError(f"Blocked or rate limited (HTTP {status})")
            if status >= 400:
                raise FetchError(f"HTTP {status}")

            try:
                await page.wait_for_selector('[data-testid="UserName"]', timeout=timeout_ms)
            except PlaywrightError:
                # Header missing usually means a suspended or empty account; the parser decides
                pass

            try:
                await page.wait_for_selector('[data-testid="tweet"]', timeout=5000)
            except PlaywrightError:
                pass

            return await page.content()

        except PlaywrightError as e:
            raise FetchError(f"Browser error: {e}") from e
        finally:
            await browser.close()
