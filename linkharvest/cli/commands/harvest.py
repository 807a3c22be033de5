import traceback
import typer
from pathlib import Path
from typing import Optional

from linkharvest.core.config import ConfigManager
from linkharvest.core.errors import HarvestError
from linkharvest.core.logging import log, Logger
from linkharvest.harvest.runner import Harvester
from linkharvest.interactive.ui import UI
from linkharvest.utils.ux import UX

def harvest(
    link: Optional[str] = typer.Option(None, "--link", help="Listing URL (prompted for when omitted)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="File to write the links to"),
    scroll_delay: Optional[int] = typer.Option(None, "--scroll-delay", min=0, help="Pause after each scroll, in ms"),
    growth_timeout: Optional[int] = typer.Option(None, "--growth-timeout", min=0, help="Max wait for new content after a scroll, in ms (0 waits forever)"),
    headless: Optional[bool] = typer.Option(None, "--headless/--headed", help="Run browser in headless mode"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging")
):
    """
    Scroll a listing until every item is loaded and save the links.
    """
    config = ConfigManager.load_config()
    Logger.setup_logging(log_dir=config.get("log_dir"), verbose=verbose)

    # CLI flags win over saved defaults
    if scroll_delay is not None:
        config["scroll_delay_ms"] = scroll_delay
    if growth_timeout is not None:
        config["growth_timeout_ms"] = growth_timeout
    if headless is not None:
        config["headless"] = headless

    try:
        url = ConfigManager.validate_url(link if link else UI.ask_link())
    except ValueError as e:
        log(str(e), level="error")
        raise typer.Exit(code=1)

    spinner = UX.spinner("Opening listing...")
    progress = UI.harvest_progress()
    task = progress.add_task("harvest", total=None)

    def on_session(session):
        spinner.stop()
        UI.show_collection(session)
        progress.update(task, total=session.expected_count)
        progress.start()

    def on_progress(count, target):
        progress.update(task, completed=min(count, target))

    harvester = Harvester(url, output_path=output, config=config, on_session=on_session, on_progress=on_progress)

    try:
        spinner.start()
        report = harvester.run()
    except KeyboardInterrupt:
        log("Harvest interrupted by user.", level="warning")
        UX.print_warning("Harvest interrupted. Nothing was saved.")
        raise typer.Exit(code=0)
    except HarvestError as e:
        log(f"Harvest failed: {e}", level="error")
        UX.print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        log(f"Harvest failed: {e}", level="error")
        log(f"Fatal Traceback: {traceback.format_exc()}", level="debug")
        UX.print_error(str(e))
        raise typer.Exit(code=1)
    finally:
        spinner.stop()
        progress.stop()

    if len(report.items) > report.session.expected_count:
        UX.print_warning(
            f"Listing rendered {len(report.items)} items, more than the {report.session.expected_count} it advertised."
        )
    UX.print_success(f"Done. Saved {len(report.items)} collection links to {report.output_path}")
