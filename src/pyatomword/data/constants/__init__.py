"""Processing constants for pyatomword."""

from .processing_constants import DecompositionConstants, ErrorMessages, FileConstants

__all__ = [
    "DecompositionConstants",
    "ErrorMessages",
    "FileConstants"
]
