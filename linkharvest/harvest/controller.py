from typing import Callable, List, Optional

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from linkharvest.core.constants import (
    CONTAINER_SELECTOR,
    STATE_EMOJIS,
    DEFAULT_SCROLL_DELAY_MS,
    DEFAULT_GROWTH_TIMEOUT_MS
)
from linkharvest.core.errors import GrowthTimeout
from linkharvest.core.logging import log
from linkharvest.core.state import HarvestState, TRANSITIONS, TransitionError
from linkharvest.harvest.probe import DOMProbe

SCROLL_HEIGHT_JS = "document.body.scrollHeight"
SCROLL_TO_BOTTOM_JS = "window.scrollTo(0, document.body.scrollHeight)"
HEIGHT_GREW_JS = "(previousHeight) => document.body.scrollHeight > previousHeight"

ProgressCallback = Callable[[int, int], None]


class HarvestController:
    """
    Scrolls an infinite-scroll listing until the probe sees the target count.

    One iteration is: extract, stop if the target is met, otherwise sample the
    scroll height, scroll to the bottom, wait for the height to grow, then
    pause for the fixed scroll delay. Errors from the probe or the page are
    never retried; they end the loop and propagate to the caller.
    """

    def __init__(
        self,
        page: Page,
        probe: Optional[DOMProbe] = None,
        scroll_delay_ms: int = DEFAULT_SCROLL_DELAY_MS,
        growth_timeout_ms: int = DEFAULT_GROWTH_TIMEOUT_MS,
        container_selector: str = CONTAINER_SELECTOR,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.page = page
        self.probe = probe or DOMProbe()
        self.scroll_delay_ms = scroll_delay_ms
        self.growth_timeout_ms = growth_timeout_ms
        self.container_selector = container_selector
        self.on_progress = on_progress
        self.state = HarvestState.INIT
        self.history: List[HarvestState] = [HarvestState.INIT]
        self.scrolls = 0

    def _transition(self, new_state: HarvestState) -> None:
        if new_state not in TRANSITIONS[self.state]:
            raise TransitionError(f"Cannot move from {self.state.value} to {new_state.value}")
        log(f"{STATE_EMOJIS[new_state.name]} Harvest state: {self.state.value} -> {new_state.value}", level="debug",
            state=new_state.value)
        self.state = new_state
        self.history.append(new_state)

    async def harvest(self, target_count: int) -> List[str]:
        """Return the last extraction snapshot once it holds target_count links."""
        items: List[str] = []

        # Existence only, no explicit timeout: inherits the driver default
        await self.page.wait_for_selector(self.container_selector, state="attached")

        if target_count <= 0:
            self._transition(HarvestState.DONE)
            return items

        while True:
            self._transition(HarvestState.EXTRACTING)
            items = await self.probe.extract(self.page)
            if self.on_progress:
                self.on_progress(len(items), target_count)

            if len(items) >= target_count:
                break

            self._transition(HarvestState.SCROLLING)
            previous_height = await self.page.evaluate(SCROLL_HEIGHT_JS)
            await self.page.evaluate(SCROLL_TO_BOTTOM_JS)
            self.scrolls += 1

            self._transition(HarvestState.WAITING_GROWTH)
            await self._wait_for_growth(previous_height, len(items), target_count)
            await self.page.wait_for_timeout(self.scroll_delay_ms)

        if len(items) > target_count:
            log(f"Listing rendered {len(items)} items, more than the expected {target_count}", level="warning")

        self._transition(HarvestState.DONE)
        log(f"Harvested {len(items)} items after {self.scrolls} scrolls", level="debug",
            item_count=len(items), scrolls=self.scrolls)
        return items

    async def _wait_for_growth(self, previous_height: int, harvested: int, target: int) -> None:
        # A timeout of 0 waits forever
        try:
            await self.page.wait_for_function(
                HEIGHT_GREW_JS, arg=previous_height, timeout=self.growth_timeout_ms
            )
        except PlaywrightTimeoutError as e:
            self._transition(HarvestState.STALLED_FAIL)
            raise GrowthTimeout(harvested, target, self.growth_timeout_ms) from e
