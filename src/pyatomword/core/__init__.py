"""
Core data structures of pyatomword.

This module contains the element records, the read-only element table,
the decomposition result values and the exception hierarchy.
"""

from .elements import ElementRecord, ElementTable
from .results import Success, Undefinable, DecompositionResult
from .exceptions import (AtomWordError, ParseError, MalformedRecordError, InvalidWeightError,
                         DataSourceError, ConfigurationError)

__all__ = [
    "ElementRecord",
    "ElementTable",
    "Success",
    "Undefinable",
    "DecompositionResult",
    "AtomWordError",
    "ParseError",
    "MalformedRecordError",
    "InvalidWeightError",
    "DataSourceError",
    "ConfigurationError"
]
