"""
estimates.py

Entropy and brute-force crack-time estimates.

Entropy here is a configuration-based upper bound: H = length * log2(|pool|),
where the pool is what the options allow (exclusions applied), not what the
given string happens to contain. Crack time assumes the attacker searches
half the keyspace on average.

>>> from securepass.estimates import entropy_bits, crack_time_seconds, format_duration
>>> from securepass.generator import GeneratorOptions
>>> bits = entropy_bits("x" * 20, GeneratorOptions())      # 20 * log2(62)
>>> round(bits, 1)
119.1
>>> format_duration(crack_time_seconds(bits))
'over 1 trillion years'
"""

from __future__ import annotations

import math

from . import charset
from .errors import InvalidArgumentError

DEFAULT_ATTEMPTS_PER_SECOND = 1e9

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_YEAR = 31536000
TRILLION = 1e12


def pool_size(options) -> int:
    """Number of characters the options allow, exclusions applied."""
    return len(charset.build_filtered_pool(options))


def estimate_entropy_bits(length: int, alphabet_size: int) -> float:
    """
    Estimate password entropy (in bits): H = length * log2(alphabet_size).

    Zero length or an empty alphabet yields 0 bits.
    """
    if length < 0:
        raise InvalidArgumentError("length must be non-negative")
    if length == 0 or alphabet_size <= 0:
        return 0.0
    return length * math.log2(alphabet_size)


def entropy_bits(password: str, options) -> float:
    """Theoretical entropy of `password` if drawn uniformly under `options`."""
    return estimate_entropy_bits(len(password), pool_size(options))


def crack_time_seconds(
    bits: float,
    attempts_per_second: float = DEFAULT_ATTEMPTS_PER_SECOND,
) -> float:
    """
    Average seconds to brute-force a keyspace of 2^bits: 2^(bits-1) / rate.

    Returns `math.inf` when the keyspace does not fit in a float.
    """
    if attempts_per_second <= 0:
        raise InvalidArgumentError("attempts_per_second must be positive")
    try:
        return math.pow(2.0, bits - 1) / attempts_per_second
    except OverflowError:
        return math.inf


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _plural(n: int, unit: str) -> str:
    return f"{n:,} {unit}" if n == 1 else f"{n:,} {unit}s"


def format_duration(seconds: float) -> str:
    """
    Human-readable duration, in the largest unit below a year, or in years.

    >>> format_duration(45)
    '45 seconds'
    >>> format_duration(7200)
    '2 hours'
    """
    if seconds < SECONDS_PER_MINUTE:
        return _plural(_round_half_up(seconds), "second")
    if seconds < SECONDS_PER_HOUR:
        return _plural(_round_half_up(seconds / SECONDS_PER_MINUTE), "minute")
    if seconds < SECONDS_PER_DAY:
        return _plural(_round_half_up(seconds / SECONDS_PER_HOUR), "hour")
    if seconds < SECONDS_PER_YEAR:
        return _plural(_round_half_up(seconds / SECONDS_PER_DAY), "day")

    years = seconds / SECONDS_PER_YEAR
    if years > TRILLION:
        return "over 1 trillion years"
    return _plural(_round_half_up(years), "year")


__all__ = [
    "DEFAULT_ATTEMPTS_PER_SECOND",
    "pool_size",
    "estimate_entropy_bits",
    "entropy_bits",
    "crack_time_seconds",
    "format_duration",
]
