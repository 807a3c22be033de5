import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from linkharvest.harvest.controller import SCROLL_HEIGHT_JS, SCROLL_TO_BOTTOM_JS
from linkharvest.harvest.probe import EXTRACT_ITEMS_JS


class FakeElement:
    def __init__(self, text):
        self.text = text

    async def text_content(self):
        return self.text


class FakePage:
    """
    In-memory stand-in for a Playwright page showing an infinite-scroll listing.

    snapshots: what each probe evaluation returns, in order (the last one repeats).
    growth: per scroll, the heights the page reports while the growth predicate polls.
    """

    def __init__(self, snapshots=None, growth=None, height=1000, markers=None, goto_error=None):
        self.snapshots = [list(s) for s in (snapshots or [])]
        self.growth = [list(g) for g in (growth or [])]
        self.height = height
        self.markers = markers or {}
        self.goto_error = goto_error
        self.calls = []
        self.scrolls = 0
        self.delays = []
        self.growth_waits = []

    async def goto(self, url, wait_until=None, timeout=None):
        self.calls.append(("goto", url))
        if self.goto_error:
            raise self.goto_error

    async def wait_for_selector(self, selector, timeout=None, state=None):
        self.calls.append(("wait_for_selector", selector))
        return FakeElement(self.markers.get(selector))

    async def evaluate(self, expression, arg=None):
        if expression == EXTRACT_ITEMS_JS:
            self.calls.append(("extract", arg))
            if len(self.snapshots) > 1:
                return self.snapshots.pop(0)
            return list(self.snapshots[0]) if self.snapshots else []
        if expression == SCROLL_HEIGHT_JS:
            self.calls.append(("height",))
            return self.height
        if expression == SCROLL_TO_BOTTOM_JS:
            self.calls.append(("scroll",))
            self.scrolls += 1
            return None
        raise AssertionError(f"Unexpected expression: {expression}")

    async def wait_for_function(self, expression, arg=None, timeout=None):
        self.calls.append(("wait_for_function", arg))
        self.growth_waits.append({"expression": expression, "arg": arg, "timeout": timeout})
        samples = self.growth.pop(0) if self.growth else [self.height + 500]
        for sample in samples:
            self.height = sample
            if sample > arg:
                return True
        raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def wait_for_timeout(self, timeout):
        self.calls.append(("delay", timeout))
        self.delays.append(timeout)


class FakeBrowser:
    """Async context manager shaped like BrowserManager, wrapping a FakePage."""

    instances = []

    def __init__(self, page, **kwargs):
        self.page = page
        self.kwargs = kwargs
        self.entered = False
        self.closed = False
        FakeBrowser.instances.append(self)

    async def __aenter__(self):
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True


@pytest.fixture
def make_page():
    return FakePage


@pytest.fixture
def browser_factory():
    """Returns a function building a BrowserManager-compatible factory for a page."""
    FakeBrowser.instances = []

    def build(page):
        return lambda **kwargs: FakeBrowser(page, **kwargs)

    build.instances = FakeBrowser.instances
    return build
