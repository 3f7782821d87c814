"""
errors.py

Exception types raised by securepass.

Every error subclasses ``ValueError`` so callers that only care about
"bad input" can keep catching that, and ``PasswordGeneratorError`` so they
can tell our errors apart from everything else.
"""

from __future__ import annotations


class PasswordGeneratorError(ValueError):
    """Base class for all securepass errors."""


class ValidationError(PasswordGeneratorError):
    """Options violate a constraint (length bounds, no class selected)."""


class EmptyPoolError(PasswordGeneratorError):
    """No characters are left to draw from after exclusion filtering."""


class InsufficientLengthError(PasswordGeneratorError):
    """More mandatory class characters than the requested length allows."""


class InvalidArgumentError(PasswordGeneratorError):
    """A programming error: e.g. a non-positive bound for a random draw."""


class BatchRangeError(PasswordGeneratorError):
    """Batch count outside the supported range."""


class InsecureRandomWarning(UserWarning):
    """Emitted when randomness falls back to a non-cryptographic generator."""


__all__ = [
    "PasswordGeneratorError",
    "ValidationError",
    "EmptyPoolError",
    "InsufficientLengthError",
    "InvalidArgumentError",
    "BatchRangeError",
    "InsecureRandomWarning",
]
