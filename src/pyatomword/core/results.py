"""Result values produced by the word decomposer."""
from dataclasses import dataclass
from typing import Tuple, Union

from pyatomword.data.constants import DecompositionConstants


@dataclass(frozen=True)
class Success:
    """A word fully covered by element symbols."""
    word: str
    symbols: Tuple[str, ...]
    full_names: Tuple[str, ...]
    weights: Tuple[float, ...] = ()

    @property
    def definable(self) -> bool:
        return True

    def render(self) -> str:
        """Render as ``"BaCoN (Barium, Cobalt, Nitrogen)"``."""
        names = DecompositionConstants.NAME_SEPARATOR.join(self.full_names)
        return f"{''.join(self.symbols)} ({names})"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Undefinable:
    """A word for which the greedy scan found no covering symbols."""
    word: str

    @property
    def definable(self) -> bool:
        return False

    def render(self) -> str:
        return DecompositionConstants.UNDEFINABLE_TEMPLATE.format(word=self.word)

    def __str__(self) -> str:
        return self.render()


DecompositionResult = Union[Success, Undefinable]
