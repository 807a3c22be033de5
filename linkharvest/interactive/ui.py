from InquirerPy import inquirer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, MofNCompleteColumn, TimeElapsedColumn

from linkharvest.core.config import ConfigManager
from linkharvest.core.constants import LONG_RUN_ITEM_THRESHOLD
from linkharvest.harvest.session import Session
from linkharvest.utils.ux import UX

console = Console()

def _is_valid_url(value: str) -> bool:
    try:
        ConfigManager.validate_url(value)
        return True
    except ValueError:
        return False

class UI:
    """
    Handles all interactive user prompts with rich display.
    """

    @staticmethod
    def ask_link() -> str:
        """Prompt for the listing URL to harvest."""
        link = inquirer.text(
            message="link:",
            validate=lambda result: _is_valid_url(result) or "Enter an http(s) URL.",
        ).execute()
        return link.strip()

    @staticmethod
    def show_collection(session: Session) -> None:
        console.print(Panel(
            f"🎉 Found collection: [bold]{session.title}[/bold]\n"
            f"🎲 Items: [cyan]{session.expected_count}[/cyan]",
            expand=False
        ))
        word = UX.duration_word(session.expected_count, LONG_RUN_ITEM_THRESHOLD)
        console.print(f"\n⏳ Start crawling. This will take a few {word}...")

    @staticmethod
    def harvest_progress() -> Progress:
        """Progress bar fed by the controller's on_progress callback."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]Harvesting links[/bold blue]"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True
        )
