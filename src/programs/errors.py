"""
Errors raised while loading program documents
"""


class ProgramLoadError(Exception):
    """Base class for anything that prevents a program from loading"""

    def __init__(self, program_id: str, message: str):
        self.program_id = program_id
        super().__init__(f"{program_id}: {message}")


class ProgramFetchError(ProgramLoadError):
    """The program resource could not be retrieved (missing file, HTTP error, timeout)"""


class ProgramParseError(ProgramLoadError):
    """The program resource is not valid JSON or lacks required fields"""
