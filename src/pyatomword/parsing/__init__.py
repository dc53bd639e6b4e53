"""
Parsing and configuration modules for pyatomword.

This package handles reading the element data source, YAML run
configurations and the high-level decomposition API.
"""

from .api import load_table, spell_word, spell_words, export_results, run_from_config, get_default_words
from .config.config_parser import RunConfigParser
from .io.data_handler import load_element_table, build_element_table, parse_element_record

__all__ = [
    'load_table',
    'spell_word',
    'spell_words',
    'export_results',
    'run_from_config',
    'get_default_words',
    'RunConfigParser',
    'load_element_table',
    'build_element_table',
    'parse_element_record'
]
