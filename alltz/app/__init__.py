"""Application state and the actions that drive it."""

from .actions import Action, action_for_key, apply_action
from .state import AppState, format_scrub_offset

__all__ = [
    "Action",
    "AppState",
    "action_for_key",
    "apply_action",
    "format_scrub_offset",
]
