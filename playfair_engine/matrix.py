"""
MatrixBuilder: the 5x5 key square
=================================
The keyword's distinct letters are written row by row into a 5x5 grid, then
the rest of the alphabet (A..Z without J) fills the remaining cells:

    keyword MONARCHY          M O N A R
                              C H Y B D
                              E F G I K
                              L P Q S T
                              U V W X Z

Historical note: Charles Wheatstone, 1854; promoted by Lord Playfair and
used as a British field cipher into the First World War.

The square is stored as a flat 25-tuple indexed by ``row * 5 + col`` with a
reverse index from letter to position. It is never mutated after
construction and never cached between calls.
"""

import logging
from typing import Dict, NamedTuple, Tuple

from .errors import EmptyKeyError, LetterNotInMatrixError
from .normalizer import ALPHABET, clean_letters

logger = logging.getLogger(__name__)

SIZE = 5


class Position(NamedTuple):
    row: int
    col: int


class KeySquare:
    """Immutable 5x5 permutation of the 25-letter alphabet."""

    __slots__ = ("_cells", "_index")

    def __init__(self, cells: Tuple[str, ...]):
        if len(cells) != SIZE * SIZE or set(cells) != set(ALPHABET):
            raise ValueError("Key square must hold each of the 25 letters exactly once.")
        self._cells = tuple(cells)
        self._index: Dict[str, Position] = {
            ch: Position(*divmod(i, SIZE)) for i, ch in enumerate(self._cells)
        }

    @property
    def cells(self) -> Tuple[str, ...]:
        return self._cells

    def at(self, row: int, col: int) -> str:
        """Letter at (row, col); both indices wrap modulo 5."""
        return self._cells[(row % SIZE) * SIZE + (col % SIZE)]

    def position(self, letter: str) -> Position:
        try:
            return self._index[letter]
        except KeyError:
            raise LetterNotInMatrixError(letter) from None

    def rows(self) -> Tuple[str, ...]:
        return tuple("".join(self._cells[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))

    def render(self) -> str:
        """Five space-separated rows, one per line."""
        return "\n".join(" ".join(row) for row in self.rows())

    def __contains__(self, letter) -> bool:
        return letter in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeySquare):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"KeySquare({''.join(self._cells)!r})"


def build_key_square(keyword: str) -> KeySquare:
    """
    Derive the key square from a keyword.

    Non-letters are ignored, case does not matter and J counts as I, so
    "KEY", "key!!" and "K E Y" all give the same square.
    Raises EmptyKeyError if no letters remain.
    """
    letters = clean_letters(keyword or "")
    if not letters:
        raise EmptyKeyError()

    placed = []
    seen = set()
    for ch in letters + ALPHABET:
        if ch not in seen:
            seen.add(ch)
            placed.append(ch)

    square = KeySquare(tuple(placed))
    logger.debug(f"Built key square from {len(letters)} keyword letters")
    return square
