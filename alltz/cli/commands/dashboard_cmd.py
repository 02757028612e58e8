"""Interactive dashboard (`alltz` with no subcommand)."""

from __future__ import annotations

from alltz.app.state import AppState
from alltz.cli.commands._helpers import exit_on_error, exit_with_code
from alltz.cli.context import build_context
from alltz.core.config import save_config
from alltz.core.errors import ErrorCode
from alltz.output.console import Style
from alltz.ui.keys import is_interactive_terminal
from alltz.ui.runner import run_dashboard


def dashboard() -> None:
    """Launch the interactive timezone dashboard."""
    ctx = build_context()
    if not is_interactive_terminal():
        ctx.console.error("the interactive dashboard needs a terminal")
        ctx.console.print("hint: use `alltz list` or `alltz time <city>`", Style.DIM)
        exit_with_code(int(ErrorCode.ENV_ERROR))

    state, warnings = AppState.from_config(ctx.config, ctx.registry)
    for warning in warnings:
        ctx.console.warning(warning)

    final = run_dashboard(state)
    if final.dirty:
        exit_on_error(
            save_config(final.to_config(ctx.config), ctx.config_path), ctx, ErrorCode.IO_ERROR
        )
