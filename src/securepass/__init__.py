"""
securepass: secure password generation with strength and entropy estimates.

>>> import securepass
>>> pw = securepass.generate(securepass.GeneratorOptions(length=20, symbols=True))
>>> len(pw)
20
>>> securepass.evaluate_strength("Tr0ub4dor&3x!Kq9").label
'Very Strong'
"""

from loguru import logger

from .charset import CharClass, CharsetToggles
from .errors import (
    BatchRangeError,
    EmptyPoolError,
    InsecureRandomWarning,
    InsufficientLengthError,
    InvalidArgumentError,
    PasswordGeneratorError,
    ValidationError,
)
from .estimates import crack_time_seconds, entropy_bits, format_duration
from .generator import GeneratorOptions, PasswordGenerator, generate, generate_batch
from .random_source import (
    SecureRandom,
    is_secure_random_available,
    secure_random_character,
    secure_random_int,
    secure_shuffle,
)
from .strength import StrengthResult, StrengthTier, evaluate_strength, suggestions

# Library code stays quiet unless the application opts in.
logger.disable("securepass")

__version__ = "0.1.0"

__all__ = [
    "CharClass",
    "CharsetToggles",
    "GeneratorOptions",
    "PasswordGenerator",
    "SecureRandom",
    "StrengthResult",
    "StrengthTier",
    "PasswordGeneratorError",
    "ValidationError",
    "EmptyPoolError",
    "InsufficientLengthError",
    "InvalidArgumentError",
    "BatchRangeError",
    "InsecureRandomWarning",
    "generate",
    "generate_batch",
    "evaluate_strength",
    "suggestions",
    "entropy_bits",
    "crack_time_seconds",
    "format_duration",
    "is_secure_random_available",
    "secure_random_int",
    "secure_random_character",
    "secure_shuffle",
]
