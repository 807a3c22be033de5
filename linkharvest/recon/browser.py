from typing import Dict, List, Optional
from playwright.async_api import async_playwright
from linkharvest.core.logging import log
from linkharvest.core.constants import (
    DEFAULT_LAUNCH_ARGS,
    DEFAULT_USER_AGENT,
    DEFAULT_VIEWPORT
)

class BrowserManager:
    """
    Owns the Playwright browser session for one harvesting run.

    Use it as an async context manager so the browser is closed on every
    exit path, including errors raised while harvesting.
    """
    def __init__(self, headless: bool = True, viewport: Optional[Dict[str, int]] = None, user_agent: str = DEFAULT_USER_AGENT, launch_args: Optional[List[str]] = None):
        self.headless = headless
        self.viewport = viewport or dict(DEFAULT_VIEWPORT)
        self.user_agent = user_agent
        self.launch_args = list(DEFAULT_LAUNCH_ARGS if launch_args is None else launch_args)
        self.playwright = None
        self.browser = None
        self.context = None
        self.page = None

    async def __aenter__(self):
        try:
            await self.start()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def start(self) -> None:
        """Start the browser session."""
        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(
            headless=self.headless,
            args=self.launch_args
        )
        self.context = await self.browser.new_context(
            user_agent=self.user_agent,
            viewport=self.viewport
        )
        self.page = await self.context.new_page()
        log("Browser session started", level="debug", headless=self.headless)

    async def close(self) -> None:
        """Close the browser session."""
        if self.context:
            await self.context.close()
            self.context = None
        if self.browser:
            await self.browser.close()
            self.browser = None
        if self.playwright:
            await self.playwright.stop()
            self.playwright = None
        self.page = None
