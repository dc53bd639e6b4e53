import logging
from typing import List

from pyatomword.core.elements import ElementTable
from pyatomword.core.results import DecompositionResult, Success, Undefinable
from pyatomword.data.constants import DecompositionConstants

logger = logging.getLogger(__name__)


def decompose(word: str, table: ElementTable) -> DecompositionResult:
    """
    Spell a word with element symbols, scanning greedily from left to right.

    At each position the one-letter and the two-letter candidates are looked up
    exactly as they appear in the word (the table keys are lowercase, so only
    lowercase words match). The heavier element wins and equal weights favour
    the one-letter symbol. Earlier choices are never revisited: a position that
    matches nothing makes the whole word undefinable.
    Args:
        word: Word to decompose, expected in lowercase
        table: Element table to look candidates up in
    Returns:
        Success with the chosen symbols and names, or Undefinable
    """
    no_match = DecompositionConstants.NO_MATCH_WEIGHT
    symbols: List[str] = []
    full_names: List[str] = []
    weights: List[float] = []
    i = 0
    while i < len(word):
        one_letter = word[i:i + 1]
        weight_one = table.weight_of(one_letter)
        if i + 1 < len(word):
            two_letter = word[i:i + DecompositionConstants.MAX_SYMBOL_LENGTH]
            weight_two = table.weight_of(two_letter)
        else:
            # Nothing left to pair the last character with
            if weight_one == no_match:
                logger.debug("'%s' undefinable: last character '%s' matches no element", word, one_letter)
                return Undefinable(word)
            weight_two = no_match
        if weight_one == no_match and weight_two == no_match:
            logger.debug("'%s' undefinable: no element at position %d", word, i)
            return Undefinable(word)
        if weight_one >= weight_two:
            element = table[one_letter]
            i += 1
        else:
            element = table[two_letter]
            i += 2
        symbols.append(element.symbol)
        full_names.append(element.full_name)
        weights.append(element.weight)
        logger.debug("Matched %s (%s, weight %.3f)", element.symbol, element.full_name, element.weight)
    return Success(word=word, symbols=tuple(symbols), full_names=tuple(full_names),
                   weights=tuple(weights))
