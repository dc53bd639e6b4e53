"""
Element data and constants.

This package provides the bundled periodic table used as the default element
data source and the processing constants used throughout pyatomword.
"""

from .constants import DecompositionConstants, ErrorMessages, FileConstants
from .elements import BUNDLED_DATA_PATH

__all__ = [
    "DecompositionConstants",
    "ErrorMessages",
    "FileConstants",
    "BUNDLED_DATA_PATH"
]
