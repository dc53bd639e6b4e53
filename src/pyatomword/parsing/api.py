import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd

from pyatomword.algorithms.decomposition import decompose
from pyatomword.core.elements import ElementTable
from pyatomword.core.exceptions import DataSourceError
from pyatomword.core.results import Success
from pyatomword.data.constants import DecompositionConstants, FileConstants
from pyatomword.parsing.config.config_parser import RunConfigParser
from pyatomword.parsing.io.data_handler import load_element_table

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ('word', 'definable', 'symbols', 'full_names', 'element_count', 'total_weight', 'sentence')


def load_table(file_path: Optional[Union[str, Path]] = None, require_data: bool = True) -> ElementTable:
    """
    Load the element table used for decomposing words.

    This is the main entry point for preparing a decomposition run. The table
    is read once and should be passed to every subsequent call.
    Args:
        file_path: Path to a comma-delimited element data file
                   - None uses the bundled periodic table
        require_data: Raise when the loaded table is empty (default: True)
    Returns:
        The loaded element table
    Raises:
        DataSourceError: If require_data is set and no element could be loaded
        InvalidWeightError: If a record has a non-numeric weight field
    Examples:
        table = load_table()
        print(spell_word('bacon', table))  # BaCoN (Barium, Cobalt, Nitrogen)
    """
    table = load_element_table(file_path)
    if require_data and not table:
        raise DataSourceError(table.source)
    return table


def spell_word(word: str, table: ElementTable) -> str:
    """Decompose a word and render the result as a sentence."""
    return decompose(word, table).render()


def spell_words(words: Iterable[str], table: ElementTable) -> pd.DataFrame:
    """
    Decompose several words and collect the results in a report.
    Args:
        words: Words to decompose
        table: Element table to look symbols up in
    Returns:
        DataFrame with one row per word and the columns of REPORT_COLUMNS.
        For undefinable words, symbols and names are empty and total_weight is NaN.
    """
    rows = []
    for word in words:
        result = decompose(word, table)
        if isinstance(result, Success):
            total_weight = float(np.sum(result.weights))
            rows.append({
                'word': word,
                'definable': True,
                'symbols': ''.join(result.symbols),
                'full_names': DecompositionConstants.NAME_SEPARATOR.join(result.full_names),
                'element_count': len(result.symbols),
                'total_weight': total_weight,
                'sentence': result.render(),
            })
        else:
            rows.append({
                'word': word,
                'definable': False,
                'symbols': '',
                'full_names': '',
                'element_count': 0,
                'total_weight': np.nan,
                'sentence': result.render(),
            })
    frame = pd.DataFrame(rows, columns=list(REPORT_COLUMNS))
    frame = frame.astype({'definable': bool, 'element_count': int, 'total_weight': np.float64})
    logger.info("Decomposed %d words, %d definable", len(frame), int(frame['definable'].sum()))
    return frame


def export_results(frame: pd.DataFrame, output_path: Union[str, Path]) -> Path:
    """
    Write a decomposition report to a .csv or .xlsx file.
    Raises:
        ValueError: If the file type is unsupported or Excel support is missing
    """
    output_path = Path(output_path)
    extension = output_path.suffix.lower()
    if extension not in FileConstants.SUPPORTED_EXPORT_EXTENSIONS:
        raise ValueError(f"Unsupported file type: '{extension}'. "
                         f"Supported types are: {FileConstants.SUPPORTED_EXPORT_EXTENSIONS}")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if extension == '.xlsx':
        try:
            frame.to_excel(output_path, index=False)
        except ImportError as e:
            raise ValueError("Excel file support requires openpyxl. Install with: pip install openpyxl") from e
    else:
        frame.to_csv(output_path, index=False, encoding=FileConstants.DEFAULT_ENCODING)
    logger.info("Wrote %d results to %s", len(frame), output_path)
    return output_path


def run_from_config(config_path: Union[str, Path]) -> pd.DataFrame:
    """
    Run a decomposition described by a YAML configuration file.
    Args:
        config_path: Path to the YAML run configuration
    Returns:
        The decomposition report (also written to ``output_file`` when configured)
    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        ConfigurationError: If the configuration is invalid
        DataSourceError: If the configured element data yields an empty table
    """
    logger.info("Running decomposition from configuration: %s", config_path)
    parser = RunConfigParser(config_path)
    table = load_table(parser.data_file)
    frame = spell_words(parser.words, table)
    if parser.output_file is not None:
        export_results(frame, parser.output_file)
    return frame


def get_default_words() -> list:
    """Words decomposed when no words are given."""
    return list(DecompositionConstants.DEFAULT_WORDS)
