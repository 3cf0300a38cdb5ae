"""
TextNormalizer: raw text to digraphs
====================================
Playfair only ever substitutes pairs of letters, so plaintext is first
reduced to the 25-letter alphabet and cut into digraphs:

    "Hello, World"  ->  HELLOWORLD  ->  HE LI LO WO RL DI

A doubled pair (LL) is broken with the filler letter and the second L starts
the next pair. An odd tail is padded with the same filler. The filler here
is ``I``; most textbooks use ``X`` instead.

Only unaccented Latin letters survive cleaning. Anything else, including
accented or non-Latin letters, is dropped like punctuation.
"""

import logging
import string
from typing import List, NamedTuple

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"   # 25 letters, J folded into I
FILLER   = "I"

_LATIN = frozenset(string.ascii_letters)


class Digraph(NamedTuple):
    """Ordered pair of alphabet letters, the unit of substitution."""

    first: str
    second: str

    def __str__(self) -> str:
        return self.first + self.second


def clean_letters(text: str) -> str:
    """Keep Latin letters only, uppercased, with J rewritten to I."""
    kept = "".join(ch for ch in text if ch in _LATIN)
    return kept.upper().replace("J", "I")


def prepare_text(text: str) -> List[Digraph]:
    """
    Split text into digraphs ready for encryption.

    Never raises; text without letters yields an empty list. The total
    letter count of the result is always even.
    """
    cleaned = clean_letters(text)
    pairs = []
    i = 0
    while i < len(cleaned):
        first = cleaned[i]
        if i + 1 == len(cleaned):
            pairs.append(Digraph(first, FILLER))
            break
        second = cleaned[i + 1]
        if first == second:
            # re-examine the repeated letter as the head of the next pair
            pairs.append(Digraph(first, FILLER))
            i += 1
        else:
            pairs.append(Digraph(first, second))
            i += 2
    logger.debug(f"Prepared {len(cleaned)} letters into {len(pairs)} digraphs")
    return pairs


def pair_up(cleaned: str) -> List[Digraph]:
    """Cut already-cleaned, even-length letters into consecutive pairs."""
    return [Digraph(cleaned[i], cleaned[i + 1]) for i in range(0, len(cleaned) - 1, 2)]
