from yaspin import yaspin
from rich.console import Console

console = Console()

class UX:
    """
    Centralized UX handler for the CLI.
    Wraps Yaspin for spinners and consolidates Rich output.
    """

    @staticmethod
    def spinner(text: str):
        """Returns a configured yaspin spinner."""
        return yaspin(text=text, color="cyan", spinner="dots")

    @staticmethod
    def print_success(message: str):
        console.print(f"[green]✓ {message}[/green]")

    @staticmethod
    def print_error(message: str):
        console.print(f"[red]✗ {message}[/red]")

    @staticmethod
    def print_warning(message: str):
        console.print(f"[yellow]⚠️  {message}[/yellow]")

    @staticmethod
    def duration_word(expected_count: int, threshold: int) -> str:
        """How long to tell the user a crawl of this size will take."""
        return "minutes" if expected_count > threshold else "seconds"
