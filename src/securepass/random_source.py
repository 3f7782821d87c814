"""
random_source.py


Purpose/Aim:
1) Wraps the operating system's CSPRNG as an injectable 32-bit word source.
2) Provides unbiased integers in [0, n) using rejection sampling.
3) Picks characters and shuffles sequences on top of those integers.
4) Degrades to a non-cryptographic generator when the OS offers no entropy,
   and says so loudly (warning + log record + `is_secure_random_available()`).

Why this shape?

- Everything that needs randomness takes a `SecureRandom`, so tests can pass
  a deterministic source instead of monkeypatching globals.
- `value % n` on a raw 32-bit word is biased whenever 2^32 is not a multiple
  of n; rejecting the tail above the largest multiple removes the bias.

Quick start

>>> from securepass.random_source import secure_random_int, secure_shuffle
>>> secure_random_int(10)            # unbiased integer 0..9
>>> secure_shuffle("abcdef")         # new list, every permutation equally likely

With an explicit source:
>>> from securepass.random_source import SecureRandom, FallbackEntropySource
>>> rng = SecureRandom(FallbackEntropySource(seed=7))   # deterministic, NOT secure
>>> rng.uniform_ints(6, size=5)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, TypeVar
import operator
import os
import random
import secrets
import warnings

from loguru import logger

from .errors import EmptyPoolError, InsecureRandomWarning, InvalidArgumentError

T = TypeVar("T")

U32_RANGE = 1 << 32


#Entropy sources
class EntropySource:
    """
    Anything that can hand out uniformly distributed 32-bit unsigned words.

    Subclasses set `is_secure` to say whether the words are fit for secrets.
    """

    is_secure: bool = False

    def next_u32(self) -> int:
        raise NotImplementedError


class SystemEntropySource(EntropySource):
    """32-bit words from the operating system CSPRNG (via `secrets`)."""

    is_secure = True

    def next_u32(self) -> int:
        return secrets.randbits(32)


class FallbackEntropySource(EntropySource):
    """
    Mersenne Twister words. Only for environments without an OS entropy
    source, or for reproducible demos when seeded. Never use for real secrets.
    """

    is_secure = False

    def __init__(self, seed: Optional[int] = None) -> None:
        warnings.warn(
            "Using a non-cryptographic random generator; passwords are not secure.",
            InsecureRandomWarning,
            stacklevel=2,
        )
        logger.warning("Secure random source unavailable, falling back to random.Random")
        self._rng = random.Random(seed)

    def next_u32(self) -> int:
        return self._rng.getrandbits(32)


#Availability check
_secure_available: Optional[bool] = None


def is_secure_random_available() -> bool:
    """
    True when the OS can provide cryptographic randomness.

    Callers use this to decide whether to warn the user before generating.
    The check runs once and the answer is cached.
    """
    global _secure_available
    if _secure_available is None:
        try:
            os.urandom(4)
        except NotImplementedError:
            _secure_available = False
        else:
            _secure_available = True
    return _secure_available


def default_entropy_source() -> EntropySource:
    """The OS source when available, otherwise the (warning) fallback."""
    if is_secure_random_available():
        return SystemEntropySource()
    return FallbackEntropySource()


#Unbiased integers, choices, shuffles
@dataclass
class SecureRandom:
    """
    Unbiased random helpers over an injectable `EntropySource`.

    Parameters

    source : EntropySource, optional
        Where 32-bit words come from. Defaults to `default_entropy_source()`.

    Examples

    >>> rng = SecureRandom()
    >>> rng.uniform_int(6)
    3
    >>> rng.choice("abc")
    'b'
    >>> rng.shuffle([1, 2, 3])
    [3, 1, 2]
    """

    source: Optional[EntropySource] = None

    def __post_init__(self) -> None:
        if self.source is None:
            self.source = default_entropy_source()

    @property
    def is_secure(self) -> bool:
        return self.source.is_secure

    def uniform_int(self, max_exclusive: int) -> int:
        """
        Unbiased integer in [0, max_exclusive) via rejection sampling.

        How it works (short version)
        - limit = floor(2^32 / n) * n, the largest multiple of n <= 2^32.
        - Accept a 32-bit word only when it falls below limit.
        - On accept, return value % n; otherwise draw again (rare).
        """
        if isinstance(max_exclusive, bool):
            raise InvalidArgumentError("max_exclusive must be an integer, not a bool")
        try:
            max_exclusive = operator.index(max_exclusive)
        except TypeError:
            raise InvalidArgumentError(
                f"max_exclusive must be an integer, got {max_exclusive!r}"
            ) from None
        if max_exclusive <= 0:
            raise InvalidArgumentError(
                f"max_exclusive must be positive, got {max_exclusive}"
            )
        if max_exclusive > U32_RANGE:
            raise InvalidArgumentError("max_exclusive must not exceed 2^32")

        limit = (U32_RANGE // max_exclusive) * max_exclusive
        while True:
            value = self.source.next_u32()
            if value < limit:
                return value % max_exclusive

    def uniform_ints(self, max_exclusive: int, size: int) -> List[int]:
        """`size` many unbiased integers in [0, max_exclusive)."""
        if size < 0:
            raise InvalidArgumentError("size must be non-negative")
        return [self.uniform_int(max_exclusive) for _ in range(size)]

    def choice(self, pool: Sequence[T]) -> T:
        """One element of `pool` at a uniformly random index."""
        if len(pool) == 0:
            raise EmptyPoolError("cannot pick a character from an empty pool")
        return pool[self.uniform_int(len(pool))]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """
        Fisher-Yates shuffle. Returns a new list; `items` is left untouched.
        """
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.uniform_int(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled


#Module-level convenience singletons
_default_random: Optional[SecureRandom] = None


def default_random() -> SecureRandom:
    """
    Lazily create (and reuse) a default SecureRandom.
    """
    global _default_random
    if _default_random is None:
        _default_random = SecureRandom()
    return _default_random


def secure_random_int(max_exclusive: int) -> int:
    """Unbiased integer in [0, max_exclusive) from the default source."""
    return default_random().uniform_int(max_exclusive)


def secure_random_character(pool: str) -> str:
    """One character from a non-empty pool."""
    return default_random().choice(pool)


def secure_shuffle(items: Sequence[T]) -> List[T]:
    """Shuffled copy of `items`."""
    return default_random().shuffle(items)


__all__ = [
    "EntropySource",
    "SystemEntropySource",
    "FallbackEntropySource",
    "SecureRandom",
    "default_entropy_source",
    "default_random",
    "is_secure_random_available",
    "secure_random_int",
    "secure_random_character",
    "secure_shuffle",
]


#Tiny smoke test when run directly
if __name__ == "__main__":
    rng = SecureRandom()
    xs = rng.uniform_ints(10, size=5000)
    hist = [xs.count(k) for k in range(10)]
    print("secure:", rng.is_secure)
    print("mod-10 histogram:", hist)
