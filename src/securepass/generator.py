"""
generator.py

Aim:
1) Defines the generation options (length, class toggles, exclusions).
2) Provides a PasswordGenerator that draws unbiased characters from a SecureRandom.
3) Exposes one-shot helpers: `generate` and `generate_batch`.

Note:
- Unbiased indices come from `random_source.SecureRandom.uniform_int`, which
  uses rejection sampling under the hood.
- With `ensure_all_types`, one character of every selected class is drawn
  first, the rest is filled from the union of those classes, and the whole
  thing is shuffled so the guaranteed characters are not always up front.

Quick start
>>> from securepass.generator import GeneratorOptions, generate, generate_batch
>>> generate(GeneratorOptions())
# 16 chars from [a-zA-Z0-9], at least one of each class

>>> generate_batch(3, GeneratorOptions(length=24, symbols=True))
# three independent 24-char passwords
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from . import charset
from .charset import CharsetToggles
from .estimates import estimate_entropy_bits
from .errors import BatchRangeError, EmptyPoolError, InsufficientLengthError, ValidationError
from .random_source import SecureRandom, default_random

MIN_LENGTH = 4
MAX_LENGTH = 128
MAX_BATCH = 50


#Options
@dataclass(frozen=True)
class GeneratorOptions:
    """
    Everything that shapes a generated password.

    Parameters

    length : int, default=16
        Number of characters, 4..128.
    lowercase, uppercase, numbers, symbols : bool
        Character classes to draw from. At least one must be on.
    exclude_similar : bool, default=False
        Drop look-alike glyphs (i, l, 1, L, o, 0, O).
    exclude_ambiguous : bool, default=False
        Drop brackets, quotes and other awkward punctuation.
    ensure_all_types : bool, default=True
        Guarantee at least one character from every selected class.
    """

    length: int = 16
    lowercase: bool = True
    uppercase: bool = True
    numbers: bool = True
    symbols: bool = False
    exclude_similar: bool = False
    exclude_ambiguous: bool = False
    ensure_all_types: bool = True

    @property
    def toggles(self) -> CharsetToggles:
        return CharsetToggles(
            lowercase=self.lowercase,
            uppercase=self.uppercase,
            numbers=self.numbers,
            symbols=self.symbols,
        )

    def validate(self) -> None:
        """Raise ValidationError naming the first violated constraint."""
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValidationError(f"length must be an integer, got {self.length!r}")
        if self.length < MIN_LENGTH:
            raise ValidationError(f"length must be at least {MIN_LENGTH} characters")
        if self.length > MAX_LENGTH:
            raise ValidationError(f"length must be at most {MAX_LENGTH} characters")
        if not charset.has_selected_classes(self):
            raise ValidationError("at least one character class must be selected")


#Composition
def _fill(length: int, pool: str, rng: SecureRandom) -> List[str]:
    return [rng.choice(pool) for _ in range(length)]


def _compose_with_all_types(options: GeneratorOptions, rng: SecureRandom) -> List[str]:
    required: List[str] = []
    available: List[str] = []

    for cls in charset.selected_classes(options):
        sub_pool = charset.build_class_pool(
            cls, options.exclude_similar, options.exclude_ambiguous
        )
        # A class emptied by exclusions gives no guaranteed char and no filler.
        if sub_pool:
            required.append(rng.choice(sub_pool))
            available.append(sub_pool)

    if len(required) > options.length:
        raise InsufficientLengthError(
            f"length {options.length} cannot hold {len(required)} required character classes"
        )

    filler_pool = "".join(available)
    chars = required + _fill(options.length - len(required), filler_pool, rng)
    return rng.shuffle(chars)


def generate(options: GeneratorOptions, rng: Optional[SecureRandom] = None) -> str:
    """
    Create one password according to `options`.

    How it works

    1) Validate options (nothing random happens before this passes).
    2) Build the pool of selected classes minus exclusions.
    3) Either draw every character independently from the pool, or use the
       class-coverage path (see module docstring).
    """
    options.validate()
    pool = charset.build_filtered_pool(options)
    if not pool:
        raise EmptyPoolError("no characters left after applying exclusions")

    if rng is None:
        rng = default_random()

    if options.ensure_all_types:
        chars = _compose_with_all_types(options, rng)
    else:
        chars = _fill(options.length, pool, rng)

    logger.debug(
        "Generated password: length={} pool_size={} all_types={}",
        options.length,
        len(pool),
        options.ensure_all_types,
    )
    return "".join(chars)


def generate_batch(
    count: int,
    options: GeneratorOptions,
    rng: Optional[SecureRandom] = None,
) -> List[str]:
    """Create `count` (1..50) independent passwords. Duplicates are possible."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise BatchRangeError(f"count must be an integer, got {count!r}")
    if count < 1 or count > MAX_BATCH:
        raise BatchRangeError(f"count must be between 1 and {MAX_BATCH}, got {count}")
    logger.debug("Generating batch of {} passwords", count)
    return [generate(options, rng) for _ in range(count)]


#Password generator
@dataclass
class PasswordGenerator:
    """
    Reusable generator bound to one set of options and one random source.

    Examples

    >>> gen = PasswordGenerator(GeneratorOptions(length=20, symbols=True))
    >>> gen.password()
    'q7;V...'
    >>> gen.entropy_bits()
    129.1...
    """

    options: GeneratorOptions = field(default_factory=GeneratorOptions)
    rng: Optional[SecureRandom] = None

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = default_random()
        self.options.validate()

    @property
    def is_secure(self) -> bool:
        """Whether the underlying source is cryptographically strong."""
        return self.rng.is_secure

    def entropy_bits(self) -> float:
        """Theoretical entropy of a password made with these options."""
        return estimate_entropy_bits(
            self.options.length, len(charset.build_filtered_pool(self.options))
        )

    def password(self) -> str:
        return generate(self.options, self.rng)

    def passwords(self, count: int) -> List[str]:
        return generate_batch(count, self.options, self.rng)


__all__ = [
    "MIN_LENGTH",
    "MAX_LENGTH",
    "MAX_BATCH",
    "GeneratorOptions",
    "PasswordGenerator",
    "generate",
    "generate_batch",
]


# Tiny demo when run directly
if __name__ == "__main__":
    gen = PasswordGenerator(GeneratorOptions(symbols=True))
    print("Password:", gen.password())
    print("Entropy (bits) ~", round(gen.entropy_bits(), 2))
