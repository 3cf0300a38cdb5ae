"""
playfair_engine — key square tests
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from playfair_engine.matrix     import KeySquare, Position, build_key_square
from playfair_engine.normalizer import ALPHABET
from playfair_engine.errors     import EmptyKeyError, LetterNotInMatrixError


def test_monarchy_square_layout():
    sq = build_key_square("MONARCHY")
    assert sq.rows() == ("MONAR", "CHYBD", "EFGIK", "LPQST", "UVWXZ")

def test_key_letter_starts_square():
    sq = build_key_square("KEY")
    assert sq.position("K") == Position(0, 0)
    assert sq.rows() == ("KEYAB", "CDFGH", "ILMNO", "PQRST", "UVWXZ")

@pytest.mark.parametrize("variant", ["key!!", "K E Y", "kEy", "k-e-y 2024"])
def test_square_ignores_case_and_punctuation(variant):
    assert build_key_square(variant) == build_key_square("KEY")

def test_square_is_permutation_of_alphabet():
    sq = build_key_square("The quick brown fox jumps over the lazy dog")
    assert len(sq.cells) == 25
    assert sorted(sq.cells) == sorted(ALPHABET)
    assert "J" not in sq

def test_duplicate_keyword_letters_placed_once():
    sq = build_key_square("BALLOON")
    assert sq.rows()[0] == "BALON"

def test_j_in_keyword_becomes_i():
    sq = build_key_square("jam")
    assert sq.position("I") == Position(0, 0)
    assert sq.rows()[0] == "IAMBC"

@pytest.mark.parametrize("keyword", ["", "123", "  !? "])
def test_letterless_keyword_rejected(keyword):
    with pytest.raises(EmptyKeyError):
        build_key_square(keyword)

def test_at_wraps_both_axes():
    sq = build_key_square("KEY")
    assert sq.at(0, 5) == "K"
    assert sq.at(-1, 0) == "U"
    assert sq.at(2, -1) == "O"

def test_missing_letter_lookup():
    sq = build_key_square("KEY")
    with pytest.raises(LetterNotInMatrixError) as info:
        sq.position("J")
    assert info.value.letter == "J"

def test_square_rejects_bad_cells():
    with pytest.raises(ValueError):
        KeySquare(tuple("ABC"))
    with pytest.raises(ValueError):
        KeySquare(tuple("A" * 25))

def test_render_is_five_rows():
    text = build_key_square("MONARCHY").render()
    lines = text.splitlines()
    assert len(lines) == 5
    assert lines[0] == "M O N A R"

def test_square_hashable_value():
    assert len({build_key_square("KEY"), build_key_square("key")}) == 1
