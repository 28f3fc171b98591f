# rusuku/ui/dashboard/dashboard_input.py
# Key dispatch for the dashboard: press events map to timer operations & the exit flag

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ...core.verbose import vlog_key
from .dashboard_state import DashboardState, DashboardStateManager


class KeyEventKind(Enum):
    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyEvent:
    key: str
    kind: KeyEventKind = KeyEventKind.PRESS


# key -> (action name, help text)
KEY_BINDINGS: dict[str, tuple[str, str]] = {
    "q": ("quit", "Quit the dashboard"),
    "i": ("start", "Start the timer"),
    "p": ("pause", "Pause the timer"),
    "c": ("resume", "Continue a paused timer"),
}


class DashboardInputHandler:

    def __init__(self, state: DashboardState, state_manager: DashboardStateManager):
        self.state = state
        self.manager = state_manager
        self._actions: dict[str, Callable[[], None]] = {
            "quit": self.manager.request_exit,
            "start": self.manager.start_timer,
            "pause": self.manager.pause_timer,
            "resume": self.manager.resume_timer,
        }

    # only key-down transitions dispatch; repeat & release are dropped
    def handle_event(self, event: KeyEvent) -> bool:
        if event.kind is not KeyEventKind.PRESS:
            return not self.state.exit_requested
        return self.handle_key(event.key)

    # dispatch one pressed key. Returns False once exit has been requested.
    def handle_key(self, k: str) -> bool:
        binding = KEY_BINDINGS.get(k)
        action = binding[0] if binding else None
        vlog_key(repr(k), action)
        if action is not None:
            self._actions[action]()
        return not self.state.exit_requested
