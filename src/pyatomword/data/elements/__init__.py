"""Bundled periodic table data."""
from pathlib import Path

from pyatomword.data.constants import FileConstants

BUNDLED_DATA_PATH = Path(__file__).parent / FileConstants.BUNDLED_DATA_FILE

__all__ = ["BUNDLED_DATA_PATH"]
