# rusuku/ui/dashboard/dashboard_state.py
# Session state for the dashboard: the owned timer & the exit flag

from __future__ import annotations

from dataclasses import dataclass, field

from ...core.timer import Timer


@dataclass
class DashboardState:
    timer: Timer = field(default_factory=Timer)
    exit_requested: bool = False

    @property
    def is_complete(self) -> bool:
        return self.exit_requested


# * All mutations of DashboardState go through here, called only from the input step
class DashboardStateManager:

    def __init__(self, state: DashboardState):
        self.state = state

    def start_timer(self) -> None:
        self.state.timer.start()

    def pause_timer(self) -> None:
        self.state.timer.pause()

    def resume_timer(self) -> None:
        self.state.timer.resume()

    def request_exit(self) -> None:
        self.state.exit_requested = True
