"""Generate passwords from the command line: ``python -m securepass``."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .errors import PasswordGeneratorError
from .estimates import crack_time_seconds, entropy_bits, format_duration
from .generator import MAX_LENGTH, MIN_LENGTH, GeneratorOptions, generate_batch
from .random_source import is_secure_random_available
from .strength import evaluate_strength, suggestions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="securepass", description="Secure password generator"
    )
    parser.add_argument(
        "-l", "--length", type=int, default=16,
        help=f"password length ({MIN_LENGTH}-{MAX_LENGTH}, default 16)",
    )
    parser.add_argument("-n", "--count", type=int, default=1, help="how many passwords (1-50)")
    parser.add_argument("--no-lowercase", dest="lowercase", action="store_false")
    parser.add_argument("--no-uppercase", dest="uppercase", action="store_false")
    parser.add_argument("--no-numbers", dest="numbers", action="store_false")
    parser.add_argument("-s", "--symbols", action="store_true", help="include symbols")
    parser.add_argument("--exclude-similar", action="store_true", help="drop i, l, 1, L, o, 0, O")
    parser.add_argument("--exclude-ambiguous", action="store_true", help="drop brackets, quotes, etc.")
    parser.add_argument(
        "--any-types", dest="ensure_all_types", action="store_false",
        help="do not force one character of every selected class",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="print passwords only")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def options_from_args(args: argparse.Namespace) -> GeneratorOptions:
    return GeneratorOptions(
        length=args.length,
        lowercase=args.lowercase,
        uppercase=args.uppercase,
        numbers=args.numbers,
        symbols=args.symbols,
        exclude_similar=args.exclude_similar,
        exclude_ambiguous=args.exclude_ambiguous,
        ensure_all_types=args.ensure_all_types,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("securepass")

    if not is_secure_random_available():
        print("warning: no secure random source, passwords are NOT secure", file=sys.stderr)

    options = options_from_args(args)
    try:
        passwords = generate_batch(args.count, options)
    except PasswordGeneratorError as exc:
        print(f"Could not build password: {exc}", file=sys.stderr)
        return 2

    for pw in passwords:
        if args.quiet:
            print(pw)
            continue
        result = evaluate_strength(pw, options.toggles)
        bits = entropy_bits(pw, options)
        print(pw)
        print(f"  strength: {result.label} ({result.percentage:.0f}%)")
        print(f"  entropy:  {bits:.1f} bits, ~{format_duration(crack_time_seconds(bits))} to crack")
        for tip in suggestions(pw, options.toggles):
            print(f"  tip: {tip}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
