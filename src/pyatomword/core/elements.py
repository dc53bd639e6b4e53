import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementRecord:
    """One row of the element data source."""
    symbol: str
    full_name: str
    weight: float = 0.0

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("Element symbol cannot be empty")
        if not self.full_name:
            raise ValueError(f"Element '{self.symbol}' has an empty name")
        if not math.isfinite(self.weight) or self.weight < 0:
            raise ValueError(f"Element '{self.symbol}' has invalid weight {self.weight}")

    @property
    def key(self) -> str:
        """Lookup key of the element (lowercased symbol)."""
        return self.symbol.lower()


class ElementTable(Mapping):
    """
    Read-only mapping from lowercase symbol to ElementRecord.

    The table is built once (see ``pyatomword.parsing.io.data_handler``) and then
    shared between decompositions. An empty table means that no usable data was
    found in the source; callers must check for it before decomposing words.
    Args:
        records: Mapping of lowercase symbol to record
        source: Path of the data source the table was built from, if any
    """

    def __init__(self, records: Optional[Dict[str, ElementRecord]] = None,
                 source: Optional[Union[str, Path]] = None) -> None:
        self._records = MappingProxyType(dict(records or {}))
        self.source = source
        logger.debug("ElementTable created with %d elements (source: %s)", len(self._records), source)

    def __getitem__(self, key: str) -> ElementRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ElementTable({len(self)} elements, source={self.source!r})"

    def weight_of(self, candidate: str) -> float:
        """Weight of the element stored under ``candidate``, 0.0 when there is none."""
        record = self._records.get(candidate)
        return record.weight if record is not None else 0.0
