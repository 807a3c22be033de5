import typer
from linkharvest.cli.commands import harvest, setup

app = typer.Typer(
    name="linkharvest",
    help="Harvest item links from infinite-scroll listings",
    add_completion=False
)

# Register commands
app.command()(harvest.harvest)
app.command()(setup.setup)

VERSION = "0.1.0"

@app.command()
def version():
    """Show the linkharvest version."""
    typer.echo(f"linkharvest {VERSION}")

def version_callback(value: bool):
    if value:
        typer.echo(f"linkharvest {VERSION}")
        raise typer.Exit()

@app.callback()
def main(
    version: bool = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """
    linkharvest CLI - scroll a listing and save every item link.
    """
    pass

if __name__ == "__main__":
    app()
