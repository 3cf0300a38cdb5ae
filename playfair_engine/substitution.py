"""
PairSubstitutor: the geometric rule
===================================
Each digraph is replaced according to where its two letters sit in the key
square:

  * same row      -> the letter to the right (encrypt) or left (decrypt)
  * same column   -> the letter below (encrypt) or above (decrypt)
  * otherwise     -> the opposite corners of the rectangle they span,
                     keeping each letter's own row

Row and column moves wrap around the edges of the square. The rectangle
rule is its own inverse, so it is the same in both directions.
"""

import enum
from typing import NamedTuple

from .matrix import KeySquare, Position
from .normalizer import Digraph


class Direction(enum.Enum):
    FORWARD  = 1    # encrypt
    BACKWARD = -1   # decrypt


class Rule(str, enum.Enum):
    ROW       = "row"
    COLUMN    = "column"
    RECTANGLE = "rectangle"


class PairStep(NamedTuple):
    """One substitution, with enough detail to explain it."""

    source: Digraph
    first_pos: Position
    second_pos: Position
    rule: Rule
    output: Digraph


def classify(pos_a: Position, pos_b: Position) -> Rule:
    if pos_a.row == pos_b.row:
        return Rule.ROW
    if pos_a.col == pos_b.col:
        return Rule.COLUMN
    return Rule.RECTANGLE


def substitute_step(square: KeySquare, a: str, b: str,
                    direction: Direction = Direction.FORWARD) -> PairStep:
    """Substitute one pair and report which rule was applied."""
    pos_a = square.position(a)
    pos_b = square.position(b)
    rule  = classify(pos_a, pos_b)
    shift = direction.value

    if rule is Rule.ROW:
        out = Digraph(square.at(pos_a.row, pos_a.col + shift),
                      square.at(pos_b.row, pos_b.col + shift))
    elif rule is Rule.COLUMN:
        out = Digraph(square.at(pos_a.row + shift, pos_a.col),
                      square.at(pos_b.row + shift, pos_b.col))
    else:
        out = Digraph(square.at(pos_a.row, pos_b.col),
                      square.at(pos_b.row, pos_a.col))

    return PairStep(Digraph(a, b), pos_a, pos_b, rule, out)


def substitute_pair(square: KeySquare, a: str, b: str,
                    direction: Direction = Direction.FORWARD) -> Digraph:
    """
    Replace the pair (a, b) using the key square.

    Raises LetterNotInMatrixError if either letter is not in the square,
    which only happens when input skipped normalization.
    """
    return substitute_step(square, a, b, direction).output
