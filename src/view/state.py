"""
Navigation state for the program view
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class ViewStatus(str, Enum):
    NO_PROGRAM = "no_program"
    LOADING = "loading"
    LOADED = "loaded"


@dataclass(frozen=True)
class NavigationState:
    """
    Which program and which day are on screen.

    active_program_id is None while the selection screen is shown.
    active_day_id is set exactly when status is LOADED.
    """

    status: ViewStatus = ViewStatus.NO_PROGRAM
    active_program_id: Optional[str] = None
    active_day_id: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self.status == ViewStatus.LOADED

    def loading(self, program_id: str) -> "NavigationState":
        return NavigationState(status=ViewStatus.LOADING, active_program_id=program_id)

    def loaded(self, program_id: str, first_day_id: str) -> "NavigationState":
        return NavigationState(
            status=ViewStatus.LOADED,
            active_program_id=program_id,
            active_day_id=first_day_id,
        )

    def with_day(self, day_id: str) -> "NavigationState":
        return replace(self, active_day_id=day_id)


NO_PROGRAM = NavigationState()
