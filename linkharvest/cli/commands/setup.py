import typer
from typing import Optional
from InquirerPy import inquirer
from linkharvest.core.config import ConfigManager
from linkharvest.core.logging import log

def _non_negative_int(result: str) -> bool:
    return result.strip().isdecimal()

def setup(
    output: Optional[str] = typer.Option(None, help="Default output file"),
    scroll_delay: Optional[int] = typer.Option(None, min=0, help="Pause after each scroll, in ms"),
    growth_timeout: Optional[int] = typer.Option(None, min=0, help="Max wait for new content after a scroll, in ms"),
    headless: Optional[bool] = typer.Option(None, "--headless/--headed", help="Run browser in headless mode by default")
) -> None:
    """
    Save default harvesting settings.
    """
    log("Running setup...")
    
    current_config = ConfigManager.load_config()
    
    # Interactive mode if arguments are missing
    if output is None:
        output = inquirer.text(
            message="Output file:",
            default=str(current_config["output_path"]),
            validate=lambda result: len(result.strip()) > 0 or "Output file cannot be empty"
        ).execute()

    if scroll_delay is None:
        scroll_delay = int(inquirer.text(
            message="Scroll delay (ms):",
            default=str(current_config["scroll_delay_ms"]),
            validate=lambda result: _non_negative_int(result) or "Enter a whole number of milliseconds"
        ).execute())

    if growth_timeout is None:
        growth_timeout = int(inquirer.text(
            message="Growth timeout (ms, 0 waits forever):",
            default=str(current_config["growth_timeout_ms"]),
            validate=lambda result: _non_negative_int(result) or "Enter a whole number of milliseconds"
        ).execute())

    if headless is None:
        headless = inquirer.confirm(
            message="Run the browser headless?",
            default=current_config["headless"]
        ).execute()

    current_config.update({
        "output_path": output.strip(),
        "scroll_delay_ms": scroll_delay,
        "growth_timeout_ms": growth_timeout,
        "headless": headless
    })
    if not ConfigManager.save_config(current_config):
        log("Failed to save configuration.", level="error")
        raise typer.Exit(code=1)
    log("Configuration saved successfully.")
