"""User actions and how they change AppState."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum, auto

from .state import AppState

__all__ = ["Action", "KEYMAP", "HELP_LINES", "apply_action", "action_for_key"]


class Action(Enum):
    SCRUB_BACK = auto()
    SCRUB_FORWARD = auto()
    SCRUB_BACK_DAY = auto()
    SCRUB_FORWARD_DAY = auto()
    SCRUB_BACK_FINE = auto()
    SCRUB_FORWARD_FINE = auto()
    NOW = auto()
    NEXT = auto()
    PREVIOUS = auto()
    MOVE_DOWN = auto()
    MOVE_UP = auto()
    CYCLE_THEME = auto()
    TOGGLE_DATE = auto()
    TOGGLE_FORMAT = auto()
    TOGGLE_MODE = auto()
    REMOVE = auto()
    HELP = auto()
    QUIT = auto()


_SCRUB_STEPS = {
    Action.SCRUB_BACK: timedelta(hours=-1),
    Action.SCRUB_FORWARD: timedelta(hours=1),
    Action.SCRUB_BACK_DAY: timedelta(days=-1),
    Action.SCRUB_FORWARD_DAY: timedelta(days=1),
    Action.SCRUB_BACK_FINE: timedelta(minutes=-15),
    Action.SCRUB_FORWARD_FINE: timedelta(minutes=15),
}

# Key names as reported by alltz.ui.keys.KeyReader
KEYMAP: dict[str, Action] = {
    "h": Action.SCRUB_BACK,
    "left": Action.SCRUB_BACK,
    "l": Action.SCRUB_FORWARD,
    "right": Action.SCRUB_FORWARD,
    "H": Action.SCRUB_BACK_DAY,
    "L": Action.SCRUB_FORWARD_DAY,
    ",": Action.SCRUB_BACK_FINE,
    ".": Action.SCRUB_FORWARD_FINE,
    "t": Action.NOW,
    "j": Action.NEXT,
    "down": Action.NEXT,
    "k": Action.PREVIOUS,
    "up": Action.PREVIOUS,
    "J": Action.MOVE_DOWN,
    "K": Action.MOVE_UP,
    "c": Action.CYCLE_THEME,
    "d": Action.TOGGLE_DATE,
    "f": Action.TOGGLE_FORMAT,
    "m": Action.TOGGLE_MODE,
    "x": Action.REMOVE,
    "?": Action.HELP,
    "q": Action.QUIT,
    "esc": Action.QUIT,
    "ctrl-c": Action.QUIT,
}

HELP_LINES: tuple[tuple[str, str], ...] = (
    ("h/l  ←/→", "scrub one hour"),
    ("H/L", "scrub one day"),
    (",/.", "scrub 15 minutes"),
    ("t", "back to now"),
    ("j/k  ↓/↑", "select timezone"),
    ("J/K", "move selected timezone"),
    ("x", "remove selected timezone"),
    ("c", "cycle color theme"),
    ("d", "toggle date display"),
    ("f", "toggle 12/24 hour clock"),
    ("m", "toggle short/full names"),
    ("?", "show/hide this help"),
    ("q", "quit"),
)


def action_for_key(key: str) -> Action | None:
    return KEYMAP.get(key)


def apply_action(state: AppState, action: Action) -> bool:
    """Apply `action` to `state`. Returns False when the app should exit."""
    if action is Action.QUIT:
        return False

    if state.show_help and action is not Action.HELP:
        # any key dismisses the help overlay
        state.show_help = False
        return True

    step = _SCRUB_STEPS.get(action)
    if step is not None:
        state.scrub(step)
        return True

    match action:
        case Action.NOW:
            state.reset_to_now()
        case Action.NEXT:
            state.select_next()
        case Action.PREVIOUS:
            state.select_previous()
        case Action.MOVE_DOWN:
            state.move_selected(1)
        case Action.MOVE_UP:
            state.move_selected(-1)
        case Action.CYCLE_THEME:
            state.cycle_theme()
        case Action.TOGGLE_DATE:
            state.toggle_date()
        case Action.TOGGLE_FORMAT:
            state.toggle_time_format()
        case Action.TOGGLE_MODE:
            state.toggle_display_mode()
        case Action.REMOVE:
            state.remove_selected()
        case Action.HELP:
            state.toggle_help()
        case _:
            pass
    return True
