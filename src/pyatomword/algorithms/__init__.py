"""
Word decomposition algorithm.

Provides the greedy tokenizer that spells words with element symbols.
"""

from .decomposition import decompose

__all__ = [
    "decompose"
]
