"""
Engine errors
=============
Rejected input is signalled with ``PlayfairError`` subclasses, which are
also ``ValueError`` so callers that already catch ``ValueError`` keep working.

``LetterNotInMatrixError`` is kept outside that hierarchy on purpose: it
means normalization let through a symbol the key square cannot hold, which
is a bug in the engine rather than bad user input.
"""


class PlayfairError(ValueError):
    """Base class for input the cipher refuses to process."""

    kind = "playfair_error"


class EmptyKeyError(PlayfairError):
    """Key is empty, whitespace-only, or has no letters."""

    kind = "empty_key"

    def __init__(self, message: str = "Key must contain at least one letter."):
        super().__init__(message)


class OddLengthCipherTextError(PlayfairError):
    """Cleaned cipher text cannot be split into letter pairs."""

    kind = "odd_length_cipher_text"

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Cipher text must contain an even number of letters, got {length}."
        )


class LetterNotInMatrixError(LookupError):
    """A letter was looked up that the key square does not contain."""

    def __init__(self, letter: str):
        self.letter = letter
        super().__init__(f"Letter {letter!r} is not in the key square.")
