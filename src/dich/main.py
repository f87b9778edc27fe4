"""Main entry point for dich."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from dich import __version__
from dich.adapters.sqlite import SqliteTaskRepository
from dich.config import ConfigManager
from dich.exceptions import PersistenceInitError
from dich.ui.app import DichApp
from dich.utils import exit_codes
from dich.utils.logger import get_logger, set_level

app = typer.Typer(
    name="dich",
    help="A single-screen to-do list for the terminal",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]dich[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.command()
def run(
    db: Path | None = typer.Option(
        None, "--db", help="Task database file (default: user data directory)"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", help="Configuration file (default: user config directory)"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Open the task list."""
    logger = get_logger()

    config = ConfigManager(config_file).config
    set_level(config.logging.level)

    db_path = db.expanduser() if db is not None else config.storage.db_path
    repository = SqliteTaskRepository(db_path)
    try:
        repository.open()
    except PersistenceInitError as e:
        logger.error("startup aborted: %s", e)
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=exit_codes.ERROR_PERSISTENCE) from e

    logger.info("dich %s started", __version__)
    DichApp(repository, config).run()
    logger.info("dich exited")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
