"""
KeyGenerator
============
Convenience keywords for the Playfair square: a run of letters drawn
uniformly from the 25-letter alphabet. Repeated letters are fine, the
square builder ignores duplicates.

The source is ``random``, not ``secrets``: a Playfair key protects nothing
that frequency analysis cannot already recover. A fresh, OS-seeded generator
is used per call unless a seed or generator is passed in.
"""

import random
from typing import Optional, Union

from .normalizer import ALPHABET

DEFAULT_KEY_LENGTH = 10


def generate_key(length: int = DEFAULT_KEY_LENGTH,
                 seed: Optional[Union[int, random.Random]] = None,
                 default_length: int = DEFAULT_KEY_LENGTH) -> str:
    """
    Return ``length`` random alphabet letters.

    A non-positive length falls back to ``default_length`` instead of
    raising. ``seed`` may be an int or a ready ``random.Random``.
    """
    if length is None or length <= 0:
        length = default_length
    if isinstance(seed, random.Random):
        rng = seed
    else:
        rng = random.Random(seed)
    return "".join(rng.choice(ALPHABET) for _ in range(length))
