"""
CipherFacade: Playfair encrypt / decrypt
========================================
Composes the key square, the text normalizer and the pair substitutor:

    encrypt  : build square -> prepare digraphs -> substitute forward
    decrypt  : build square -> clean letters    -> substitute backward

Decryption does not undo filler insertion. ``HELLO`` under ``MONARCHY``
encrypts to ``CFSEPM`` and decrypts back to ``HELILO``: the ``I`` that split
the doubled L stays in.

Everything here is a plain function over immutable values. ``PlayfairCipher``
only adds settings (the default key length) and logging around them, and can
be shared freely between threads.

Role in the stack: the only entry point collaborators (HTTP layer, CLI,
tests) are expected to call.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from .config import PlayfairSettings
from .errors import EmptyKeyError, OddLengthCipherTextError, PlayfairError
from .keygen import generate_key as _generate_key
from .matrix import KeySquare, build_key_square
from .normalizer import FILLER, clean_letters, pair_up, prepare_text
from .results import CipherMetadataResult, CipherOutcome
from .substitution import Direction, PairStep, substitute_step

logger = logging.getLogger(__name__)


def _require_key(key: str) -> KeySquare:
    if not key or not key.strip():
        raise EmptyKeyError()
    return build_key_square(key)


def _cipher_pairs(cipher_text: str):
    letters = clean_letters(cipher_text)
    if len(letters) % 2:
        raise OddLengthCipherTextError(len(letters))
    return pair_up(letters)


def encrypt(text: str, key: str) -> str:
    """
    Encrypt text with the Playfair square built from key.

    Empty text returns "" without looking at the key.
    Raises EmptyKeyError for an empty or letterless key.
    """
    if not text:
        return ""
    return "".join(str(step.output) for step in trace(text, key, Direction.FORWARD))


def decrypt(cipher_text: str, key: str) -> str:
    """
    Decrypt cipher text; non-letters are ignored, fillers are kept.

    Raises EmptyKeyError for an empty key and OddLengthCipherTextError when
    the letters cannot be paired.
    """
    if not cipher_text:
        return ""
    return "".join(str(step.output) for step in trace(cipher_text, key, Direction.BACKWARD))


def trace(text: str, key: str, direction: Direction = Direction.FORWARD) -> List[PairStep]:
    """
    Per-pair breakdown of an encryption or decryption: the input digraph,
    both positions, the rule used and the output digraph.
    """
    square = _require_key(key)
    if direction is Direction.FORWARD:
        pairs = prepare_text(text)
    else:
        pairs = _cipher_pairs(text)
    steps = [substitute_step(square, a, b, direction) for a, b in pairs]
    logger.debug(f"{direction.name.lower()}: {len(steps)} pairs substituted")
    return steps


def _timed(operation: Callable[[str, str], str], text: str, key: str) -> CipherMetadataResult:
    t0 = time.perf_counter()
    result = operation(text, key)
    elapsed_ms = (time.perf_counter() - t0) * 1000
    return CipherMetadataResult(
        result=result,
        execution_time_ms=elapsed_ms,
        completion_time=datetime.now(timezone.utc),
    )


def encrypt_with_metadata(text: str, key: str) -> CipherMetadataResult:
    """encrypt(), plus elapsed milliseconds and a UTC completion time."""
    return _timed(encrypt, text, key)


def decrypt_with_metadata(cipher_text: str, key: str) -> CipherMetadataResult:
    """decrypt(), plus elapsed milliseconds and a UTC completion time."""
    return _timed(decrypt, cipher_text, key)


def _attempt(operation: Callable[[str, str], str], text: str, key: str) -> CipherOutcome:
    try:
        return CipherOutcome.success(operation(text, key))
    except PlayfairError as exc:
        return CipherOutcome.failure(exc)


def try_encrypt(text: str, key: str) -> CipherOutcome:
    """encrypt() returning a tagged outcome instead of raising on bad input."""
    return _attempt(encrypt, text, key)


def try_decrypt(cipher_text: str, key: str) -> CipherOutcome:
    """decrypt() returning a tagged outcome instead of raising on bad input."""
    return _attempt(decrypt, cipher_text, key)


def algorithm_info() -> Dict[str, Any]:
    """Static description of the cipher with a worked example."""
    example_key, example_text = "MONARCHY", "HELLO"
    return {
        "title": "Playfair cipher",
        "description": (
            "Digraph substitution cipher working on letter pairs with a 5x5 "
            "key square; I and J share a cell."
        ),
        "algorithm": {
            "step1": (
                "Key square: write the keyword's distinct letters row by row, "
                "then the remaining letters of A-Z without J."
            ),
            "step2": (
                "Text: drop non-letters, uppercase, J becomes I, split into "
                f"pairs. A doubled pair gets {FILLER} after its first letter; "
                f"an odd tail is padded with {FILLER}."
            ),
            "step3": (
                "Encrypt each pair: same row -> letters to the right, same "
                "column -> letters below (both wrapping), otherwise the "
                "opposite corners of their rectangle."
            ),
            "step4": (
                "Decrypt: the same rules shifted left and up; fillers are "
                "not removed."
            ),
        },
        "example": {
            "key": example_key,
            "plainText": example_text,
            "cipherText": encrypt(example_text, example_key),
        },
    }


class PlayfairCipher:
    """
    Stateless Playfair facade carrying engine settings.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, settings: Optional[PlayfairSettings] = None):
        self._settings = settings if settings is not None else PlayfairSettings()

    @property
    def settings(self) -> PlayfairSettings:
        return self._settings

    def encrypt(self, text: str, key: str) -> str:
        return encrypt(text, key)

    def decrypt(self, cipher_text: str, key: str) -> str:
        return decrypt(cipher_text, key)

    def encrypt_with_metadata(self, text: str, key: str) -> CipherMetadataResult:
        res = encrypt_with_metadata(text, key)
        logger.info(f"Encryption: {len(text)} chars -> {len(res.result)} letters "
                    f"in {res.execution_time_ms:.3f} ms")
        return res

    def decrypt_with_metadata(self, cipher_text: str, key: str) -> CipherMetadataResult:
        res = decrypt_with_metadata(cipher_text, key)
        logger.info(f"Decryption: {len(cipher_text)} chars -> {len(res.result)} letters "
                    f"in {res.execution_time_ms:.3f} ms")
        return res

    def try_encrypt(self, text: str, key: str) -> CipherOutcome:
        return try_encrypt(text, key)

    def try_decrypt(self, cipher_text: str, key: str) -> CipherOutcome:
        return try_decrypt(cipher_text, key)

    def trace(self, text: str, key: str,
              direction: Direction = Direction.FORWARD) -> List[PairStep]:
        return trace(text, key, direction)

    def generate_key(self, length: int = 0, seed=None) -> str:
        """Random key; length <= 0 uses settings.default_key_length."""
        return _generate_key(length, seed=seed,
                             default_length=self._settings.default_key_length)

    def __repr__(self):
        return f"PlayfairCipher(default_key_length={self._settings.default_key_length})"
