"""Text predicates used by the search analyzer.

All functions are pure: they take a string and return a new value.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Final

_COMBINING_MARKS: Final = re.compile("[\u0300-\u036f]")
_SPECIAL_CHARACTERS: Final = re.compile(r"""[`!@#$%^&*()_+\-=\[\]{};':"\\|,.<>/?~]""")

# Letters with a stroke have no decomposition under NFD.
_STROKED_LETTERS: Final = str.maketrans({
    "\u00d0": "D",  # Ð
    "\u00f0": "d",  # ð
    "\u0110": "D",  # Đ
    "\u0111": "d",  # đ
})

DEFAULT_LINK_MARKER: Final = "http"


def remove_accent(text: str) -> str:
    """Strip diacritical marks and surrounding whitespace.

    Example::

        remove_accent("éxàmple")   # "example"
        remove_accent("Đà Nẵng")   # "Da Nang"
    """
    decomposed = unicodedata.normalize("NFD", text)
    return _COMBINING_MARKS.sub("", decomposed).translate(_STROKED_LETTERS).strip()


def has_accent(text: str) -> bool:
    """Return ``True`` when folding *text* changes it."""
    return remove_accent(text) != text


def has_special_characters(text: str) -> bool:
    """Return ``True`` when *text* contains punctuation or a symbol."""
    return _SPECIAL_CHARACTERS.search(text) is not None


def is_link(text: str, marker: str = DEFAULT_LINK_MARKER) -> bool:
    return marker in text


__all__ = [
    "DEFAULT_LINK_MARKER",
    "has_accent",
    "has_special_characters",
    "is_link",
    "remove_accent",
]
