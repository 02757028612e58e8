"""Interactive loop: read keys, update state, redraw."""

from __future__ import annotations

from rich.console import Console
from rich.live import Live

from alltz.app.actions import action_for_key, apply_action
from alltz.app.state import AppState

from .dashboard import render_dashboard
from .keys import KeyReader

__all__ = ["run_dashboard", "TICK_SECONDS"]

TICK_SECONDS = 1.0


def run_dashboard(state: AppState, console: Console | None = None) -> AppState:
    """Run until the user quits; returns the final state for saving."""
    console = console or Console()

    with (
        KeyReader() as keys,
        Live(
            render_dashboard(state, console.width),
            console=console,
            screen=True,
            auto_refresh=False,
        ) as live,
    ):
        try:
            while True:
                key = keys.read(TICK_SECONDS)
                if key is not None:
                    action = action_for_key(key)
                    if action is not None and not apply_action(state, action):
                        break
                state.tick()
                live.update(render_dashboard(state, console.width), refresh=True)
        except KeyboardInterrupt:
            # cbreak keeps ISIG, so Ctrl-C arrives as SIGINT rather than a key
            pass

    return state
