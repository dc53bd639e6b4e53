"""Custom exceptions for pyatomword."""
import logging
from typing import Optional

from pyatomword.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class AtomWordError(Exception):
    """Base exception for all pyatomword errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.debug("%s raised: %s", type(self).__name__, message)


class ParseError(AtomWordError):
    """Exception raised when a record of the element data source cannot be parsed."""

    def __init__(self, message: str, line: Optional[str] = None, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        if line is not None:
            message += f" (record: {line!r})"
        super().__init__(message)


class MalformedRecordError(ParseError):
    """Exception for records lacking the minimum comma structure or with an empty symbol/name."""
    pass


class InvalidWeightError(ParseError, ValueError):
    """Exception for weight fields that are not a finite, non-negative number."""

    def __init__(self, raw_weight: str, line: Optional[str] = None, line_number: Optional[int] = None):
        self.raw_weight = raw_weight
        super().__init__(f"Invalid atomic weight {raw_weight!r}", line=line, line_number=line_number)


class DataSourceError(AtomWordError):
    """Exception raised when no element data could be loaded from a source."""

    def __init__(self, source):
        self.source = source
        super().__init__(ErrorMessages.FATAL_DATA_FILE.format(path=source))


class ConfigurationError(AtomWordError, ValueError):
    """Exception raised when a run configuration file is invalid."""
    pass
