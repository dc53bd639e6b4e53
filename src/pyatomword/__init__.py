"""
PyAtomWord - Spell words with periodic-table element symbols.

This library decomposes words into sequences of chemical element symbols,
choosing at each position the heavier of the one-letter and two-letter
candidates, e.g. ``bacon`` -> ``BaCoN (Barium, Cobalt, Nitrogen)``.

Main Components:
- Core: Element records, the read-only element table and decomposition results
- Parsing: Element data source reading, YAML run configurations and the batch API
- Algorithms: The greedy word decomposer
- Data: The bundled periodic table and processing constants
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pyatomword")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Fallback version

# Core definitions
from .core.elements import ElementRecord, ElementTable
from .core.results import Success, Undefinable, DecompositionResult
from .core.exceptions import (AtomWordError, ParseError, MalformedRecordError, InvalidWeightError,
                              DataSourceError, ConfigurationError)

# Algorithms
from .algorithms.decomposition import decompose

# Data source and main API functions
from .parsing.io.data_handler import load_element_table, build_element_table
from .parsing.api import (
    load_table,
    spell_word,
    spell_words,
    export_results,
    run_from_config
)

__all__ = [
    # Version
    '__version__',

    # Core classes
    'ElementRecord',
    'ElementTable',
    'Success',
    'Undefinable',
    'DecompositionResult',

    # Exceptions
    'AtomWordError',
    'ParseError',
    'MalformedRecordError',
    'InvalidWeightError',
    'DataSourceError',
    'ConfigurationError',

    # Algorithms
    'decompose',

    # Main API
    'load_element_table',
    'build_element_table',
    'load_table',
    'spell_word',
    'spell_words',
    'export_results',
    'run_from_config'
]
