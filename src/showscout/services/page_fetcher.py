"""Render movie pages with Playwright and flatten them to text."""

import asyncio
import logging
import re
from contextlib import AsyncExitStack
from dataclasses import dataclass

from bs4 import BeautifulSoup
from playwright.async_api import Browser, Page, async_playwright
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright_stealth import Stealth

from showscout.config import settings

logger = logging.getLogger(__name__)

# Containers whose text is appended to the page text on the first load
VENUE_CONTAINER_SELECTORS = (
    '[class*="theatre"]',
    '[class*="cinema"]',
    '[class*="venue"]',
    '[id*="theatre"]',
    '[id*="cinema"]',
)

# Containers harvested during the deeper pass used when few venues were found
AUGMENTED_CONTAINER_SELECTORS = (
    '[class*="venue"]',
    '[class*="theatre"]',
    '[class*="cinema"]',
    '[class*="showtime"]',
    '[class*="booking"]',
)

MOVIE_TITLE_SELECTORS = ("h1", '[data-component-type="movie-title"]', ".movie-title", "title")

EXPAND_ATTEMPTS = 3

# Clicks "show more" style controls and scrolls to trigger lazy loading
EXPAND_SCRIPT = """
() => {
  for (let i = 0; i < 5; i++) {
    window.scrollTo(0, document.body.scrollHeight);
  }
  const labels = ["show more", "load more", "view all", "expand",
                  "see more", "load all", "show all", "view more"];
  document.querySelectorAll("button, a, div, span").forEach((el) => {
    const text = (el.textContent || "").toLowerCase();
    if (labels.some((label) => text.includes(label))) {
      try { el.click(); } catch (e) {}
    }
  });
}
"""

# Broader variant used for the augmented pass
DEEP_EXPAND_SCRIPT = """
() => {
  for (let i = 0; i < 10; i++) {
    window.scrollTo(0, document.body.scrollHeight);
    window.scrollTo(0, 0);
  }
  const words = ["show", "load", "view", "expand", "more", "all"];
  document.querySelectorAll("button, a, div, span, li").forEach((el) => {
    const text = (el.textContent || "").toLowerCase();
    if (words.some((word) => text.includes(word))) {
      try { el.click(); } catch (e) {}
    }
  });
}
"""


@dataclass
class PageSnapshot:
    """Text and status markers captured from a rendered movie page."""

    page_title: str
    final_url: str
    movie_title: str
    body_text: str
    release_date: str | None = None
    has_interested_button: bool = False
    has_book_tickets_button: bool = False
    has_releasing_text: bool = False


def harvest_container_text(html: str, selectors: tuple[str, ...]) -> str:
    """
    Collect the text of elements matching any of the CSS selectors.

    Args:
        html: Rendered page HTML
        selectors: CSS selectors (attribute substring selectors work)

    Returns:
        Container texts joined by newlines, in document order
    """
    soup = BeautifulSoup(html, "html.parser")
    elements = soup.select(", ".join(selectors))
    return "\n".join(element.get_text("\n") for element in elements)


def build_snapshot(page_title: str, final_url: str, body_text: str, html: str) -> PageSnapshot:
    """Derive the movie title, release date and status markers from page content."""
    soup = BeautifulSoup(html, "html.parser")

    movie_title = "Unknown Movie"
    for selector in MOVIE_TITLE_SELECTORS:
        element = soup.select_one(selector)
        if element and element.get_text(strip=True):
            movie_title = element.get_text(strip=True)
            break

    release_match = re.search(r"Releasing on (\d{1,2} \w{3}, \d{4})", body_text, re.IGNORECASE) or re.search(
        r"(\d{1,2} \w{3}, \d{4})", body_text
    )

    return PageSnapshot(
        page_title=page_title,
        final_url=final_url,
        movie_title=movie_title,
        body_text=body_text,
        release_date=release_match.group(1) if release_match else None,
        has_interested_button=(
            "I'm interested" in body_text or "Mark interested" in body_text or "interested" in html
        ),
        has_book_tickets_button="Book tickets" in body_text or "Book now" in body_text,
        has_releasing_text="Releasing" in body_text,
    )


class PageFetcher:
    """
    Headless Chromium session for loading movie pages.

    Use as an async context manager; the browser closes on exit::

        async with PageFetcher() as fetcher:
            snapshot = await fetcher.load(url)
            extra_text = await fetcher.fetch_augmented_text()
    """

    def __init__(self) -> None:
        self._stack: AsyncExitStack | None = None
        self._browser: Browser | None = None
        self._page: Page | None = None

    async def __aenter__(self) -> "PageFetcher":
        self._stack = AsyncExitStack()
        try:
            playwright = await self._stack.enter_async_context(Stealth().use_async(async_playwright()))
            self._browser = await playwright.chromium.launch(
                headless=True,
                args=["--no-sandbox", "--disable-dev-shm-usage", "--disable-gpu"],
            )
            # Closed before the Playwright driver stops
            self._stack.push_async_callback(self._browser.close)
            context = await self._browser.new_context(
                viewport={"width": settings.viewport_width, "height": settings.viewport_height},
                user_agent=settings.user_agent,
                locale="en-IN",
                timezone_id="Asia/Kolkata",
            )
            self._page = await context.new_page()
        except BaseException:
            await self._close()
            raise
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self._close()

    async def _close(self) -> None:
        stack = self._stack
        self._browser = None
        self._page = None
        self._stack = None
        if stack:
            await stack.aclose()

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("PageFetcher must be used as an async context manager")
        return self._page

    async def load(self, url: str) -> PageSnapshot:
        """
        Load a movie page and capture its fully expanded text.

        Args:
            url: Movie page URL

        Returns:
            PageSnapshot of the rendered page
        """
        page = self.page
        timeout_ms = settings.browser_timeout * 1000

        logger.info(f"Loading page: {url}")
        try:
            await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        except PlaywrightTimeoutError:
            logger.warning("Page did not settle, retrying with domcontentloaded")
            await page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
            await asyncio.sleep(settings.expand_wait_seconds)

        page_title = await page.title()
        logger.info(f"Page title: {page_title}")
        logger.info(f"Final URL: {page.url}")

        # Keep the longest text seen across expansion attempts
        body_text = ""
        for _ in range(EXPAND_ATTEMPTS):
            await page.evaluate(EXPAND_SCRIPT)
            await asyncio.sleep(settings.expand_wait_seconds)
            current_text = await page.inner_text("body")
            if len(current_text) > len(body_text):
                body_text = current_text

        html = await page.content()
        container_text = harvest_container_text(html, VENUE_CONTAINER_SELECTORS)
        if container_text:
            body_text = f"{body_text}\n{container_text}"

        return build_snapshot(page_title, page.url, body_text, html)

    async def fetch_augmented_text(self) -> str:
        """
        Expand the current page more aggressively and return all its text.

        Used when the first extraction found few venues.
        """
        page = self.page
        await page.evaluate(DEEP_EXPAND_SCRIPT)
        await asyncio.sleep(settings.expand_wait_seconds + 2)

        full_text = await page.inner_text("body")
        html = await page.content()
        container_text = harvest_container_text(html, AUGMENTED_CONTAINER_SELECTORS)
        if container_text:
            full_text = f"{full_text}\n{container_text}"
        return full_text
