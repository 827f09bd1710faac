"""
Program view controller - loads a program and tracks which day is on screen
"""
import logging
from typing import Optional

from src.programs.errors import ProgramLoadError
from src.programs.models import ProgramDocument
from src.programs.source import ProgramSource
from .render import ProgramRenderModel, render_program
from .state import NO_PROGRAM, NavigationState

logger = logging.getLogger(__name__)


class ProgramView:
    """
    State machine for the program detail screen.

    NO_PROGRAM -> LOADING on load_program()
    LOADING -> LOADED(first day) when the fetch succeeds
    LOADING -> last settled state when the fetch fails (error kept in last_error)
    LOADED(d) -> LOADED(d') on select_day(d') for a day in the program
    any -> NO_PROGRAM on return_to_catalog()

    When loads overlap, the most recent one wins and earlier results are dropped.
    """

    def __init__(self, source: Optional[ProgramSource] = None):
        self.source = source or ProgramSource()
        self.document: Optional[ProgramDocument] = None
        self.last_error: Optional[str] = None
        self._state: NavigationState = NO_PROGRAM
        # Last state that was not LOADING; a failed load falls back to it
        self._settled_state: NavigationState = NO_PROGRAM
        self._settled_document: Optional[ProgramDocument] = None
        self._ticket = 0

    @property
    def state(self) -> NavigationState:
        return self._state

    def load_program(self, program_id: str) -> Optional[ProgramDocument]:
        """
        Fetch a full program and show its first day

        Args:
            program_id: Program identifier (data/<program_id>.json)

        Returns:
            The loaded document, or None if the load failed or was superseded
        """
        self._ticket += 1
        ticket = self._ticket
        self._state = self._state.loading(program_id)
        self.last_error = None

        try:
            document = self.source.load(program_id)
        except ProgramLoadError as e:
            if ticket != self._ticket:
                logger.info(f"Ignoring failed load of {program_id}: superseded by a newer request")
                return None
            logger.error(f"Error loading program: {e}")
            self.last_error = str(e)
            self._state, self.document = self._settled_state, self._settled_document
            return None

        if ticket != self._ticket:
            logger.info(f"Ignoring stale load of {program_id}: superseded by a newer request")
            return None

        self.document = document
        self._state = self._state.loaded(program_id, document.days[0].id)
        self._settle()
        logger.info(f"Loaded program {program_id} ({len(document.days)} days)")
        return document

    def render(self) -> ProgramRenderModel:
        """Render model for the loaded program"""
        if self.document is None or not self._state.is_loaded:
            raise RuntimeError("No program loaded")
        return render_program(self.document, self._state)

    def select_day(self, day_id: str) -> bool:
        """
        Make day_id the visible day

        Returns:
            True if the day changed or was already active, False for an unknown day
        """
        if self.document is None or not self._state.is_loaded:
            logger.warning(f"Cannot select day {day_id}: no program loaded")
            return False
        if self.document.get_day(day_id) is None:
            logger.warning(f"Unknown day {day_id} in program {self._state.active_program_id}")
            return False

        self._state = self._state.with_day(day_id)
        self._settle()
        return True

    def return_to_catalog(self):
        """Discard the loaded program and go back to the selection screen"""
        self._ticket += 1
        self.document = None
        self.last_error = None
        self._state = NO_PROGRAM
        self._settle()

    def _settle(self):
        self._settled_state, self._settled_document = self._state, self.document
