import logging
import math
from pathlib import Path
from typing import Iterable, Optional, Union

from pyatomword.core.elements import ElementRecord, ElementTable
from pyatomword.core.exceptions import InvalidWeightError, MalformedRecordError
from pyatomword.data.constants import ErrorMessages, FileConstants
from pyatomword.data.elements import BUNDLED_DATA_PATH

logger = logging.getLogger(__name__)


def load_element_table(file_path: Optional[Union[str, Path]] = None) -> ElementTable:
    """
    Reads the element table from a comma-delimited data file.
    Args:
        file_path: Path to the data file. Uses the bundled periodic table when None.
    Returns:
        The element table. It is empty when the file cannot be opened or decoded,
        or when it contains a malformed record.
    Raises:
        InvalidWeightError: If a record has a non-numeric weight field
    """
    file_path = Path(file_path) if file_path is not None else BUNDLED_DATA_PATH
    logger.info("Loading element data from: %s", file_path)
    try:
        with open(file_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
            table = build_element_table(f, source=file_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read element data file %s: %s", file_path, e)
        return ElementTable(source=file_path)
    logger.info("Loaded %d elements from %s", len(table), file_path)
    return table


def build_element_table(lines: Iterable[str], source: Optional[Union[str, Path]] = None) -> ElementTable:
    """
    Build an element table from an iterable of records.

    The first malformed record abandons the whole construction: entries parsed
    so far are discarded and the remaining lines are not read. Later records
    replace earlier ones with the same lowercase symbol.
    Args:
        lines: Records in the form ``<ignored>,<symbol>,<full_name>[,<weight>]``
        source: Origin of the records, kept on the table for error messages
    Returns:
        The element table, empty if a record is malformed
    Raises:
        InvalidWeightError: If a record has a non-numeric weight field
    """
    records = {}
    for line_number, line in enumerate(lines, start=1):
        try:
            record = parse_element_record(line, line_number)
        except MalformedRecordError as e:
            logger.warning("Discarding element data from %s: %s", source or "<records>", e)
            return ElementTable(source=source)
        if record.key in records:
            logger.debug("Symbol '%s' redefined on line %d", record.symbol, line_number)
        records[record.key] = record
    return ElementTable(records, source=source)


def parse_element_record(line: str, line_number: Optional[int] = None) -> ElementRecord:
    """
    Parse a single ``<ignored>,<symbol>,<full_name>[,<weight>]`` record.

    The weight field runs to the end of the line, so any further commas end up
    in it. An absent or empty weight is 0.0.
    Raises:
        MalformedRecordError: If the record has fewer than two commas or an empty symbol or name
        InvalidWeightError: If the weight is not a finite, non-negative number
    """
    text = line.rstrip('\r\n')
    fields = text.split(FileConstants.FIELD_DELIMITER, FileConstants.MAX_FIELDS - 1)
    if len(fields) < FileConstants.MIN_FIELDS:
        raise MalformedRecordError(
            ErrorMessages.TOO_FEW_FIELDS.format(min_fields=FileConstants.MIN_FIELDS, count=len(fields)),
            line=text, line_number=line_number)
    symbol, full_name = fields[1], fields[2]
    if not symbol:
        raise MalformedRecordError(ErrorMessages.EMPTY_SYMBOL, line=text, line_number=line_number)
    if not full_name:
        raise MalformedRecordError(ErrorMessages.EMPTY_FULL_NAME, line=text, line_number=line_number)
    raw_weight = fields[3] if len(fields) == FileConstants.MAX_FIELDS else ''
    weight = _parse_weight(raw_weight, text, line_number)
    return ElementRecord(symbol=symbol, full_name=full_name, weight=weight)


def _parse_weight(raw_weight: str, line: str, line_number: Optional[int]) -> float:
    """Convert the weight field, treating an empty field as 0.0."""
    if not raw_weight:
        return 0.0
    try:
        weight = float(raw_weight)
    except ValueError as e:
        raise InvalidWeightError(raw_weight, line=line, line_number=line_number) from e
    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(raw_weight, line=line, line_number=line_number)
    return weight
