"""Element data source reading."""

from .data_handler import load_element_table, build_element_table, parse_element_record

__all__ = [
    "load_element_table",
    "build_element_table",
    "parse_element_record"
]
