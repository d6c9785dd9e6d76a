"""Kernel text – accent folding and character-class predicates."""
from mp_esquery.kernel.text.normalize import (
    DEFAULT_LINK_MARKER,
    has_accent,
    has_special_characters,
    is_link,
    remove_accent,
)

__all__ = [
    "DEFAULT_LINK_MARKER",
    "has_accent",
    "has_special_characters",
    "is_link",
    "remove_accent",
]
