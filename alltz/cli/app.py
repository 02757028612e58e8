from __future__ import annotations

import os
from pathlib import Path

import typer

from alltz import __version__
from alltz.cli.commands.dashboard_cmd import dashboard
from alltz.cli.commands.edit_cmd import add, remove
from alltz.cli.commands.list_cmd import list_zones
from alltz.cli.commands.time_cmd import time_in
from alltz.cli.commands.zone_cmd import zone_info
from alltz.core.errors import ErrorCode
from alltz.platform.paths import CONFIG_ENV_VAR


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    invoke_without_command=True,
    rich_markup_mode="rich",
    help="Terminal timezone viewer.",
)


app.command("list")(list_zones)
app.command("time")(time_in)
app.command("zone")(zone_info)
app.command()(add)
app.command()(remove)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-V", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (overrides ALLTZ_CONFIG and the default location)",
    ),
) -> None:
    if version:
        typer.echo(f"alltz {__version__}")
        raise typer.Exit(code=0)

    if config is not None:
        path = config.expanduser()
        if path.exists() and not path.is_file():
            typer.echo(f"error: --config '{path}' is not a file", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        os.environ[CONFIG_ENV_VAR] = str(path)

    if ctx.invoked_subcommand is None:
        dashboard()


def main() -> None:
    app(prog_name="alltz")
