from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class DecompositionConstants:
    """Constants used by the word decomposer and result rendering."""
    # Weight standing for "no element"
    NO_MATCH_WEIGHT: Final[float] = 0.0
    # Longest symbol considered at a position
    MAX_SYMBOL_LENGTH: Final[int] = 2
    NAME_SEPARATOR: Final[str] = ", "
    UNDEFINABLE_TEMPLATE: Final[str] = "{word} is undefinable"
    # Words decomposed when none are given
    DEFAULT_WORDS: Final[tuple] = ("functions", "bacon", "poison", "sickness", "ticklish")


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    TOO_FEW_FIELDS: Final[str] = "Expected at least {min_fields} comma-separated fields, got {count}"
    EMPTY_SYMBOL: Final[str] = "Empty element symbol"
    EMPTY_FULL_NAME: Final[str] = "Empty element name"
    FATAL_DATA_FILE: Final[str] = "Fatal: Error with the data file: {path}"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    FIELD_DELIMITER: Final[str] = ','
    # <ignored>,<symbol>,<full_name>[,<weight>]
    MIN_FIELDS: Final[int] = 3
    MAX_FIELDS: Final[int] = 4
    BUNDLED_DATA_FILE: Final[str] = 'elements.csv'
    SUPPORTED_EXPORT_EXTENSIONS: Final[tuple] = ('.csv', '.xlsx')
