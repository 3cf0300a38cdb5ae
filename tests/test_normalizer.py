"""
playfair_engine — text normalization tests
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from playfair_engine.normalizer import FILLER, Digraph, clean_letters, pair_up, prepare_text


def pairs(text):
    return [str(p) for p in prepare_text(text)]


def test_filler_is_i():
    assert FILLER == "I"

def test_hello_splits_doubled_letter():
    assert pairs("HELLO") == ["HE", "LI", "LO"]

def test_balloon():
    assert pairs("BALLOON") == ["BA", "LI", "LO", "ON"]

def test_punctuation_and_case_dropped():
    assert pairs("Hello, World!") == ["HE", "LI", "LO", "WO", "RL", "DI"]

def test_empty_input_gives_no_pairs():
    assert prepare_text("") == []
    assert prepare_text("123 !?") == []

def test_single_letter_padded():
    assert prepare_text("a") == [Digraph("A", "I")]

def test_run_of_same_letter():
    assert pairs("AAA") == ["AI", "AI", "AI"]

def test_doubled_filler_letter_still_terminates():
    # "II" can only be split with the filler itself
    assert pairs("ii") == ["II", "II"]
    assert pairs("JJ") == ["II", "II"]

def test_j_rewritten():
    assert pairs("JUMP") == ["IU", "MP"]

def test_non_latin_letters_dropped():
    assert clean_letters("Ünïcode Привет") == "NCODE"
    assert pairs("Ünïcode") == ["NC", "OD", "EI"]

@pytest.mark.parametrize("text", ["HELLO", "a", "BALLOON", "Mississippi", "xx yy zz"])
def test_prepared_text_always_even(text):
    letters = "".join(str(p) for p in prepare_text(text))
    assert len(letters) % 2 == 0
    assert "J" not in letters

def test_pair_up_does_not_insert_fillers():
    assert pair_up("CFSEPM") == [Digraph("C", "F"), Digraph("S", "E"), Digraph("P", "M")]
    assert pair_up("LLLL") == [Digraph("L", "L"), Digraph("L", "L")]
