import re
import time
from dataclasses import dataclass, field
from typing import Optional

from playwright.async_api import Page

from linkharvest.core.constants import TITLE_SELECTOR, COUNT_SELECTOR, DEFAULT_WAIT_UNTIL
from linkharvest.core.errors import MetadataParseError
from linkharvest.core.logging import log


# Plain digits, or digits grouped in threes by commas
COUNT_PATTERN = re.compile(r"\d+|\d{1,3}(?:,\d{3})+", re.ASCII)


@dataclass(frozen=True)
class Session:
    """One harvesting run: where it points and what the listing claims to hold."""
    url: str
    title: str
    expected_count: int
    started_at: float = field(default_factory=time.monotonic)

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started_at


def parse_count(text: Optional[str]) -> int:
    """Turn the count marker's text ("1,204") into an int."""
    if text is None:
        raise MetadataParseError(text)
    cleaned = text.strip()
    if not COUNT_PATTERN.fullmatch(cleaned):
        raise MetadataParseError(text)
    return int(cleaned.replace(",", ""))


async def read_marker(page: Page, selector: str) -> Optional[str]:
    # Driver default timeout applies
    handle = await page.wait_for_selector(selector)
    return await handle.text_content()


async def open_session(page: Page, url: str, wait_until: str = DEFAULT_WAIT_UNTIL, navigation_timeout_ms: Optional[int] = None) -> Session:
    """
    Navigate to the listing and read its title and expected item count.

    Driver errors (navigation, selector waits) propagate unchanged.
    A non-numeric count raises MetadataParseError; it is not retried.
    """
    started_at = time.monotonic()
    log(f"Navigating to {url}", level="debug")
    try:
        await page.goto(url, wait_until=wait_until, timeout=navigation_timeout_ms)
    except Exception as e:
        log(f"Navigation failed: {e}", level="error")
        raise

    title = (await read_marker(page, TITLE_SELECTOR) or "").strip()
    count_text = await read_marker(page, COUNT_SELECTOR)
    expected_count = parse_count(count_text)

    log(f"Collection metadata read: {title} ({expected_count} items)", level="debug",
        url=url, title=title, expected_count=expected_count)
    return Session(url=url, title=title, expected_count=expected_count, started_at=started_at)
