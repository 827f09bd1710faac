"""
Program document source - reads data/<program_id>.json from disk or over HTTP
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from config import settings
from .errors import ProgramFetchError, ProgramParseError
from .models import ProgramDocument

logger = logging.getLogger(__name__)


class ProgramSource:
    """Fetch and parse program documents from a directory or an http(s) base URL"""

    def __init__(self, location: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize program source

        Args:
            location: Directory path or http(s) base URL (default: settings.data_source)
            timeout: Seconds to wait for an HTTP response (default: settings.fetch_timeout)
        """
        self.location = str(location if location is not None else settings.data_source)
        self.timeout = timeout if timeout is not None else settings.fetch_timeout

    @property
    def is_remote(self) -> bool:
        return self.location.startswith(("http://", "https://"))

    def resource_for(self, program_id: str) -> str:
        """Address of the JSON resource for a program"""
        if self.is_remote:
            return f"{self.location.rstrip('/')}/{program_id}.json"
        return str(Path(self.location) / f"{program_id}.json")

    def fetch_raw(self, program_id: str) -> str:
        """
        Retrieve the raw JSON text for a program

        Raises:
            ProgramFetchError: resource missing, unreachable or returned an HTTP error
        """
        resource = self.resource_for(program_id)
        logger.debug(f"Fetching program {program_id} from {resource}")

        if self.is_remote:
            try:
                response = requests.get(resource, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException as e:
                raise ProgramFetchError(program_id, f"could not fetch {resource}: {e}") from e
            return response.text

        try:
            return Path(resource).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProgramFetchError(program_id, f"could not read {resource}: {e}") from e

    def parse(self, program_id: str, raw: str) -> ProgramDocument:
        """
        Parse raw JSON into a ProgramDocument

        Raises:
            ProgramParseError: malformed JSON or missing required fields
        """
        try:
            data: Dict[str, Any] = json.loads(raw)
        except ValueError as e:
            raise ProgramParseError(program_id, f"invalid JSON: {e}") from e

        try:
            return ProgramDocument.model_validate(data)
        except ValidationError as e:
            raise ProgramParseError(program_id, f"invalid program document: {e}") from e

    def load(self, program_id: str) -> ProgramDocument:
        """Fetch and parse the full program document"""
        return self.parse(program_id, self.fetch_raw(program_id))
