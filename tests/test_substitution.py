"""
playfair_engine — pair substitution tests

Reference square for keyword KEY:

    K E Y A B
    C D F G H
    I L M N O
    P Q R S T
    U V W X Z
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from playfair_engine.matrix       import Position, build_key_square
from playfair_engine.normalizer   import Digraph
from playfair_engine.substitution import Direction, Rule, substitute_pair, substitute_step
from playfair_engine.errors       import LetterNotInMatrixError

SQ = build_key_square("KEY")
FWD, BWD = Direction.FORWARD, Direction.BACKWARD


@pytest.mark.parametrize("pair, forward", [
    ("KE", "EY"),   # same row
    ("BK", "KE"),   # same row, wraps right edge
    ("UK", "KC"),   # same column, wraps bottom edge
    ("IU", "PK"),   # same column
    ("KH", "BC"),   # rectangle
    ("MP", "IR"),   # rectangle
    ("II", "LL"),   # identical letters fall under the row rule
])
def test_forward_and_back(pair, forward):
    assert str(substitute_pair(SQ, pair[0], pair[1], FWD)) == forward
    assert str(substitute_pair(SQ, forward[0], forward[1], BWD)) == pair

def test_backward_row_wraps_left_edge():
    assert substitute_pair(SQ, "K", "Y", BWD) == Digraph("B", "E")

def test_backward_column_wraps_top_edge():
    assert substitute_pair(SQ, "K", "I", BWD) == Digraph("U", "C")

def test_rectangle_is_direction_symmetric():
    assert substitute_pair(SQ, "D", "S", FWD) == substitute_pair(SQ, "D", "S", BWD)

def test_default_direction_is_forward():
    assert substitute_pair(SQ, "K", "E") == Digraph("E", "Y")

def test_step_reports_rule_and_positions():
    step = substitute_step(SQ, "M", "P")
    assert step.rule is Rule.RECTANGLE
    assert step.first_pos == Position(2, 2)
    assert step.second_pos == Position(3, 0)
    assert step.output == Digraph("I", "R")
    assert substitute_step(SQ, "K", "E").rule is Rule.ROW
    assert substitute_step(SQ, "K", "C").rule is Rule.COLUMN

def test_unknown_letter_raises():
    with pytest.raises(LetterNotInMatrixError):
        substitute_pair(SQ, "J", "K")
    with pytest.raises(LetterNotInMatrixError):
        substitute_pair(SQ, "K", "1")
