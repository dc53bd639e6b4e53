"""Shared pytest fixtures for PyAtomWord tests."""
import pytest
from pathlib import Path

from pyatomword.core.elements import ElementRecord, ElementTable
from pyatomword.data.elements import BUNDLED_DATA_PATH
from pyatomword.parsing.io.data_handler import load_element_table


def make_table(*records):
    """Build a table from (symbol, full_name, weight) tuples."""
    elements = [ElementRecord(symbol, name, weight) for symbol, name, weight in records]
    return ElementTable({element.key: element for element in elements})


@pytest.fixture
def table_factory():
    """Factory building tables from (symbol, full_name, weight) tuples."""
    return make_table


@pytest.fixture
def bundled_data_path():
    """Path to the bundled periodic table."""
    return BUNDLED_DATA_PATH


@pytest.fixture(scope="session")
def periodic_table():
    """Element table built from the bundled periodic table."""
    return load_element_table()


@pytest.fixture
def cobalt_table():
    """Small table with Co, Ca, O and H."""
    return make_table(
        ("Co", "Cobalt", 58.9),
        ("Ca", "Calcium", 40.1),
        ("O", "Oxygen", 16.0),
        ("H", "Hydrogen", 1.0),
    )


@pytest.fixture
def write_data_file(tmp_path):
    """Write element records to a temporary data file and return its path."""
    def _write(content: str, name: str = "elements.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML run configuration to a temporary file and return its path."""
    def _write(content: str, name: str = "run.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
