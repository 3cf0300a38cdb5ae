"""
playfair_engine
===============
Playfair digraph substitution cipher over the 25-letter alphabet (I = J).

Components:
    matrix        — MatrixBuilder: 5x5 key square from a keyword
    normalizer    — TextNormalizer: letters to digraphs, filler I
    substitution  — PairSubstitutor: row / column / rectangle rule
    keygen        — KeyGenerator: random keywords
    cipher        — CipherFacade: encrypt / decrypt / metadata / trace

Historical cipher: readable by frequency analysis, kept for teaching and
for interoperability with the Playfair service clients.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors       import (PlayfairError, EmptyKeyError,
                           OddLengthCipherTextError, LetterNotInMatrixError)
from .normalizer   import ALPHABET, FILLER, Digraph, clean_letters, prepare_text
from .matrix       import KeySquare, Position, build_key_square
from .substitution import Direction, Rule, PairStep, substitute_pair
from .keygen       import generate_key
from .results      import CipherMetadataResult, CipherOutcome
from .config       import PlayfairSettings, get_settings
from .validation   import check_text, check_key
from .cipher       import (PlayfairCipher, encrypt, decrypt,
                           encrypt_with_metadata, decrypt_with_metadata,
                           try_encrypt, try_decrypt, trace, algorithm_info)

__all__ = [
    "PlayfairError",
    "EmptyKeyError",
    "OddLengthCipherTextError",
    "LetterNotInMatrixError",
    "ALPHABET",
    "FILLER",
    "Digraph",
    "clean_letters",
    "prepare_text",
    "KeySquare",
    "Position",
    "build_key_square",
    "Direction",
    "Rule",
    "PairStep",
    "substitute_pair",
    "generate_key",
    "CipherMetadataResult",
    "CipherOutcome",
    "PlayfairSettings",
    "get_settings",
    "check_text",
    "check_key",
    "PlayfairCipher",
    "encrypt",
    "decrypt",
    "encrypt_with_metadata",
    "decrypt_with_metadata",
    "try_encrypt",
    "try_decrypt",
    "trace",
    "algorithm_info",
]
