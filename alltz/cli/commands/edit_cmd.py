"""`alltz add` / `alltz remove` - edit the saved timezone list."""

from __future__ import annotations

import typer

from alltz.app.state import AppState
from alltz.cli.commands._helpers import exit_on_error, resolve_zone
from alltz.cli.context import CLIContext, build_context
from alltz.core.config import save_config
from alltz.core.errors import ErrorCode
from alltz.output.console import Style


def _load_state(ctx: CLIContext) -> AppState:
    state, warnings = AppState.from_config(ctx.config, ctx.registry)
    for warning in warnings:
        ctx.console.warning(warning)
    return state


def _save(ctx: CLIContext, state: AppState) -> None:
    exit_on_error(save_config(state.to_config(ctx.config), ctx.config_path), ctx, ErrorCode.IO_ERROR)
    ctx.console.print(f"saved {ctx.config_path}", Style.DIM)


def add(
    city: str = typer.Argument(..., help="City name or IANA timezone"),
) -> None:
    """Add a timezone to your list."""
    ctx = build_context()
    zone = resolve_zone(ctx, city)
    state = _load_state(ctx)

    if not state.add_zone(zone):
        ctx.console.info(f"{zone.name} is already in your list")
        return
    _save(ctx, state)
    ctx.console.success(f"added {zone.name} ({zone.key})")


def remove(
    city: str = typer.Argument(..., help="City name or IANA timezone"),
) -> None:
    """Remove a timezone from your list."""
    ctx = build_context()
    zone = resolve_zone(ctx, city)
    state = _load_state(ctx)

    keys = [z.key for z in state.zones]
    if zone.key not in keys:
        ctx.console.error(f"{zone.name} is not in your list")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    state.selected = keys.index(zone.key)
    if state.remove_selected() is None:
        ctx.console.error("cannot remove the last timezone")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    _save(ctx, state)
    ctx.console.success(f"removed {zone.name}")
