"""
charset.py

Character classes, their fixed alphabets, and the pool builders.

A single-class builder (`build_class_pool`) does all the filtering; the
aggregate pool used for plain generation and the per-class pools used for
"ensure all types" generation are both made from it.

>>> from securepass.charset import CharsetToggles, build_pool, apply_exclusions
>>> pool = build_pool(CharsetToggles(lowercase=True, numbers=True))
>>> len(pool)
36
>>> apply_exclusions(pool, exclude_similar=True, exclude_ambiguous=False)[-8:]
'23456789'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

#Alphabets
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Glyphs easily confused with one another
SIMILAR_CHARACTERS = "il1Lo0O"
# Punctuation that tends to break quoting or copy/paste
AMBIGUOUS_CHARACTERS = "{}[]()/\\'\"`~,;.<>"


class CharClass(str, Enum):
    """The four character classes, in pool order."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    NUMBERS = "numbers"
    SYMBOLS = "symbols"


CLASS_ALPHABETS: Dict[CharClass, str] = {
    CharClass.LOWERCASE: LOWERCASE,
    CharClass.UPPERCASE: UPPERCASE,
    CharClass.NUMBERS: DIGITS,
    CharClass.SYMBOLS: SYMBOLS,
}


@dataclass(frozen=True)
class CharsetToggles:
    """Which character classes are switched on."""

    lowercase: bool = False
    uppercase: bool = False
    numbers: bool = False
    symbols: bool = False


def selected_classes(toggles) -> List[CharClass]:
    """
    Enabled classes in stable order. Accepts anything with the four toggle
    attributes (`CharsetToggles`, `GeneratorOptions`).
    """
    return [cls for cls in CharClass if getattr(toggles, cls.value)]


def has_selected_classes(toggles) -> bool:
    return bool(selected_classes(toggles))


def selected_charsets(toggles) -> List[str]:
    """The unfiltered alphabet of every enabled class."""
    return [CLASS_ALPHABETS[cls] for cls in selected_classes(toggles)]


def build_pool(toggles) -> str:
    """Concatenate the alphabets of the enabled classes."""
    return "".join(selected_charsets(toggles))


def apply_exclusions(pool: str, exclude_similar: bool, exclude_ambiguous: bool) -> str:
    """
    Drop similar and/or ambiguous characters from `pool`, keeping order.

    The result may be empty; deciding whether that is fatal is up to the caller.
    """
    excluded = set()
    if exclude_similar:
        excluded.update(SIMILAR_CHARACTERS)
    if exclude_ambiguous:
        excluded.update(AMBIGUOUS_CHARACTERS)
    if not excluded:
        return pool
    return "".join(ch for ch in pool if ch not in excluded)


def build_class_pool(
    char_class: CharClass,
    exclude_similar: bool = False,
    exclude_ambiguous: bool = False,
) -> str:
    """One class's alphabet after exclusions."""
    return apply_exclusions(CLASS_ALPHABETS[char_class], exclude_similar, exclude_ambiguous)


def build_filtered_pool(options) -> str:
    """The full pool a `GeneratorOptions` allows, exclusions applied."""
    return "".join(
        build_class_pool(cls, options.exclude_similar, options.exclude_ambiguous)
        for cls in selected_classes(options)
    )


__all__ = [
    "LOWERCASE",
    "UPPERCASE",
    "DIGITS",
    "SYMBOLS",
    "SIMILAR_CHARACTERS",
    "AMBIGUOUS_CHARACTERS",
    "CharClass",
    "CLASS_ALPHABETS",
    "CharsetToggles",
    "selected_classes",
    "has_selected_classes",
    "selected_charsets",
    "build_pool",
    "apply_exclusions",
    "build_class_pool",
    "build_filtered_pool",
]
