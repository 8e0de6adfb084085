"""Config commands.

Shows the effective configuration and writes a default config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from whichpm.core.config import (
    ConfigError,
    WhichpmConfig,
    get_default_config,
    load_config_or_default,
    save_config,
)
from whichpm.core.paths import get_config_path
from whichpm.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the whichpm configuration.",
    no_args_is_help=True,
)


def _create_config_table(config: WhichpmConfig, source: Path) -> Table:
    """Create a table of configuration keys and their effective values."""
    table = Table(
        title=f"Configuration ({source})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", no_wrap=True, style="info")
    table.add_column("Value", style="text")

    for key, value in config.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        table.add_row(key, str(value))

    return table


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a config file.",
        ),
    ] = None,
) -> None:
    """Show the effective configuration."""
    path = config_path or get_config_path()
    try:
        config = load_config_or_default(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not path.exists():
        print_info(f"No config file at {path}, showing defaults.")
    console.print(_create_config_table(config, path))


@app.command()
def init(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to write the config file to.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing config file.",
        ),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        print_error(f"Config already exists: {path}. Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
