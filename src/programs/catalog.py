"""
Program catalog - the fixed list of programs and their summaries for the selection screen
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from config import settings
from .errors import ProgramLoadError
from .models import ProgramSummary
from .source import ProgramSource

logger = logging.getLogger(__name__)


class ProgramCatalog:
    """Lists available programs and loads their summary metadata"""

    def __init__(
        self,
        source: Optional[ProgramSource] = None,
        program_ids: Optional[Sequence[str]] = None,
        max_workers: Optional[int] = None,
    ):
        self.source = source or ProgramSource()
        self.program_ids = list(program_ids if program_ids is not None else settings.program_ids)
        self.max_workers = max(1, max_workers or settings.max_workers)
        self._summaries: Optional[List[ProgramSummary]] = None

    def list_programs(self) -> List[str]:
        """Program identifiers offered on the selection screen"""
        return list(self.program_ids)

    def load_summary(self, program_id: str) -> Optional[ProgramSummary]:
        """
        Load one program's summary

        Returns:
            ProgramSummary, or None if the program failed to fetch or parse
        """
        try:
            document = self.source.load(program_id)
        except ProgramLoadError as e:
            logger.error(f"Error loading program {program_id}: {e}")
            return None
        return ProgramSummary.from_document(program_id, document)

    def load_summaries(self, program_ids: Optional[Sequence[str]] = None) -> List[ProgramSummary]:
        """
        Load summaries for several programs concurrently

        Every fetch runs independently; the call waits for all of them and
        drops the ones that failed. Results keep the order of program_ids.

        Args:
            program_ids: Programs to load (default: list_programs())

        Returns:
            List of summaries for the programs that loaded
        """
        if program_ids is None:
            program_ids = self.list_programs()
        if not program_ids:
            return []

        workers = min(self.max_workers, len(program_ids))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(self.load_summary, program_ids))

        summaries = [summary for summary in results if summary is not None]
        logger.info(f"Loaded {len(summaries)}/{len(program_ids)} program summaries")
        return summaries

    @property
    def summaries(self) -> List[ProgramSummary]:
        """Summaries of all listed programs, loaded once per catalog"""
        if self._summaries is None:
            self._summaries = self.load_summaries()
        return self._summaries

    def refresh(self) -> List[ProgramSummary]:
        """Drop cached summaries and load them again"""
        self._summaries = None
        return self.summaries
