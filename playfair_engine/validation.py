"""
Up-front input checks for collaborators.

The engine quietly drops anything outside A-Z. Front ends that would rather
tell the user their text contained Cyrillic or accented letters can run
these first; each returns the cleaned letters, or None when the input
should be rejected.
"""

import logging
import string
from typing import Optional

logger = logging.getLogger(__name__)

_LATIN = frozenset(string.ascii_letters)


def _latin_letters(value: Optional[str], what: str) -> Optional[str]:
    if value is None or not value.strip():
        return None
    letters = [ch for ch in value if ch.isalpha()]
    if not letters:
        return None
    if any(ch not in _LATIN for ch in letters):
        logger.warning(f"{what} must contain only Latin letters")
        return None
    return "".join(letters)


def check_text(text: Optional[str]) -> Optional[str]:
    """Letters of text, or None if blank or containing non-Latin letters."""
    return _latin_letters(text, "Text")


def check_key(key: Optional[str]) -> Optional[str]:
    """Letters of key, or None if blank or containing non-Latin letters."""
    return _latin_letters(key, "Key")
