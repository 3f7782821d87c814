"""
strength.py

Heuristic strength scoring for a password string.

Score starts at 0 and is clamped to 0..4:
- +1 each for length >= 8, >= 12, >= 16
- +1 each for 2, 3, 4 distinct character kinds present (lower, upper, digit, other)
- -1 for repeating patterns (a recurring pair, or a run of 3+ identical chars)
- -1 for sequential patterns (3 consecutive alphabet/digit/keyboard-row chars,
  forwards or backwards)

Nothing here is random and nothing depends on how the password was made;
only on the string itself.

>>> from securepass.strength import evaluate_strength
>>> evaluate_strength("Tr0ub4dor&3x!Kq9", None).tier
<StrengthTier.VERY_STRONG: 'very-strong'>
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List
import re

_REPEATED_PAIR = re.compile(r"(..).*\1")
_REPEATED_RUN = re.compile(r"(.)\1{2,}")

SEQUENCES = (
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "0123456789",
    "qwertyuiopasdfghjklzxcvbnm",
    "QWERTYUIOPASDFGHJKLZXCVBNM",
)


def _sequence_windows(width: int = 3) -> frozenset:
    windows = set()
    for seq in SEQUENCES:
        for i in range(len(seq) - width + 1):
            window = seq[i:i + width]
            windows.add(window)
            windows.add(window[::-1])
    return frozenset(windows)


_SEQUENCE_WINDOWS = _sequence_windows()


class StrengthTier(str, Enum):
    VERY_WEAK = "very-weak"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"


_TIERS = (
    (StrengthTier.VERY_WEAK, "Very Weak"),
    (StrengthTier.WEAK, "Weak"),
    (StrengthTier.MEDIUM, "Medium"),
    (StrengthTier.STRONG, "Strong"),
    (StrengthTier.VERY_STRONG, "Very Strong"),
)

MAX_SCORE = len(_TIERS) - 1


@dataclass(frozen=True)
class StrengthResult:
    score: int
    tier: StrengthTier
    label: str
    percentage: float

    @classmethod
    def from_score(cls, score: int) -> "StrengthResult":
        tier, label = _TIERS[score]
        return cls(score=score, tier=tier, label=label, percentage=score / MAX_SCORE * 100)


#Pattern detectors
def charset_variety(password: str) -> int:
    """How many of {lowercase, uppercase, digit, other} occur in the text."""
    kinds = set()
    for ch in password:
        if "a" <= ch <= "z":
            kinds.add("lower")
        elif "A" <= ch <= "Z":
            kinds.add("upper")
        elif "0" <= ch <= "9":
            kinds.add("digit")
        else:
            kinds.add("other")
    return len(kinds)


def has_repeating_patterns(password: str) -> bool:
    return bool(_REPEATED_PAIR.search(password) or _REPEATED_RUN.search(password))


def has_sequential_patterns(password: str) -> bool:
    return any(
        password[i:i + 3] in _SEQUENCE_WINDOWS for i in range(len(password) - 2)
    )


#Scoring
def _raw_score(password: str) -> int:
    length = len(password)
    score = sum(1 for threshold in (8, 12, 16) if length >= threshold)

    variety = charset_variety(password)
    score += sum(1 for threshold in (2, 3, 4) if variety >= threshold)

    if has_repeating_patterns(password):
        score -= 1
    if has_sequential_patterns(password):
        score -= 1
    return score


def evaluate_strength(password: str, toggles=None) -> StrengthResult:
    """
    Score `password` on a 0..4 scale.

    `toggles` is accepted for interface symmetry with the generator options;
    variety is read from the password itself, so it does not change the result.
    """
    if not password:
        return StrengthResult.from_score(0)
    score = max(0, min(MAX_SCORE, _raw_score(password)))
    return StrengthResult.from_score(score)


def suggestions(password: str, toggles=None) -> List[str]:
    """Advice for a stronger password, in a fixed order. Never blocks anything."""
    out: List[str] = []
    if len(password) < 8:
        out.append("Use at least 8 characters")
    if len(password) < 12:
        out.append("Consider using 12 or more characters for extra security")
    if charset_variety(password) < 3:
        out.append("Use a mix of letters, numbers and symbols")
    if has_repeating_patterns(password):
        out.append("Avoid repeating patterns")
    if has_sequential_patterns(password):
        out.append('Avoid sequences like "abc" or "123"')
    return out


__all__ = [
    "StrengthTier",
    "StrengthResult",
    "charset_variety",
    "has_repeating_patterns",
    "has_sequential_patterns",
    "evaluate_strength",
    "suggestions",
]
