import asyncio
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from linkharvest.core.config import ConfigManager
from linkharvest.core.logging import log
from linkharvest.harvest.controller import HarvestController, ProgressCallback
from linkharvest.harvest.probe import DOMProbe
from linkharvest.harvest.session import Session, open_session
from linkharvest.recon.browser import BrowserManager
from linkharvest.utils.file_io import write_items_file


@dataclass
class HarvestReport:
    session: Session
    items: List[str]
    output_path: Path
    duration: float


class Harvester:
    """
    Runs one harvest end to end: open the listing, read its metadata,
    scroll until every link is rendered, then write the links file.

    Nothing is written unless the whole harvest succeeds.
    """

    def __init__(
        self,
        url: str,
        output_path: Optional[Path] = None,
        config: Optional[Dict[str, Any]] = None,
        on_session: Optional[Callable[[Session], None]] = None,
        on_progress: Optional[ProgressCallback] = None,
        browser_factory: Callable[..., BrowserManager] = BrowserManager,
    ):
        self.url = url
        self.config = config if config is not None else ConfigManager.load_config()
        self.output_path = Path(output_path or self.config["output_path"])
        self.on_session = on_session
        self.on_progress = on_progress
        self.browser_factory = browser_factory
        self.session: Optional[Session] = None
        self.items: List[str] = []

    def _emit_wide_event(self, success: bool, duration: float, error: Optional[str] = None) -> None:
        """Log one structured record describing the whole run."""
        wide_event = {
            "event_type": "harvest_completion",
            "url": self.url,
            "title": self.session.title if self.session else None,
            "expected_count": self.session.expected_count if self.session else None,
            "harvested_count": len(self.items),
            "output_path": str(self.output_path) if success else None,
            "success": success,
            "duration_seconds": round(duration, 2),
            "error": error,
        }
        log("Harvest finished" if success else "Harvest failed", level="debug", **wide_event)

    async def run_async(self) -> HarvestReport:
        start_time = time.monotonic()
        error_msg = None
        success = False
        try:
            async with self.browser_factory(headless=self.config["headless"]) as browser:
                self.session = await open_session(
                    browser.page, self.url, wait_until=self.config["wait_until"]
                )
                if self.on_session:
                    self.on_session(self.session)

                controller = HarvestController(
                    browser.page,
                    DOMProbe(),
                    scroll_delay_ms=self.config["scroll_delay_ms"],
                    growth_timeout_ms=self.config["growth_timeout_ms"],
                    on_progress=self.on_progress,
                )
                self.items = await controller.harvest(self.session.expected_count)

            write_items_file(self.output_path, self.session, self.items)
            success = True
            return HarvestReport(
                session=self.session,
                items=self.items,
                output_path=self.output_path,
                duration=time.monotonic() - start_time,
            )
        except Exception as e:
            error_msg = str(e)
            raise
        finally:
            self._emit_wide_event(success, time.monotonic() - start_time, error_msg)

    def run(self) -> HarvestReport:
        return asyncio.run(self.run_async())
