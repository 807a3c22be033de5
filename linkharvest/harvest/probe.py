from typing import List

from playwright.async_api import Page

from linkharvest.core.constants import ITEM_SELECTOR
from linkharvest.core.errors import NoItemsFoundError
from linkharvest.core.logging import log

# Runs inside the page. Receives the selector as its only argument and
# returns plain strings, so nothing from the Python side leaks into it.
EXTRACT_ITEMS_JS = """
(selector) => Array.from(document.querySelectorAll(selector), (element) => element.href)
"""


class DOMProbe:
    """
    Reads the links currently rendered in the infinite-scroll container.

    Every call is a full re-read of the DOM, not an incremental append.
    """

    def __init__(self, selector: str = ITEM_SELECTOR):
        self.selector = selector

    async def extract(self, page: Page) -> List[str]:
        items = await page.evaluate(EXTRACT_ITEMS_JS, self.selector)
        log(f"Probe matched {len(items)} items", level="debug", item_count=len(items))
        if not items:
            raise NoItemsFoundError(self.selector)
        return list(items)
