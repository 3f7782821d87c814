"""Tests for password composition."""

import string

import pytest

from securepass import charset, generator
from securepass.charset import (
    AMBIGUOUS_CHARACTERS,
    DIGITS,
    LOWERCASE,
    SIMILAR_CHARACTERS,
    SYMBOLS,
    UPPERCASE,
    CharClass,
)
from securepass.errors import (
    BatchRangeError,
    EmptyPoolError,
    InsufficientLengthError,
    ValidationError,
)
from securepass.generator import GeneratorOptions, PasswordGenerator, generate, generate_batch


@pytest.mark.parametrize("length", [4, 5, 16, 64, 128])
@pytest.mark.parametrize("ensure_all_types", [True, False])
def test_length_is_exact(length, ensure_all_types):
    opts = GeneratorOptions(length=length, symbols=True, ensure_all_types=ensure_all_types)
    assert len(generate(opts)) == length


@pytest.mark.parametrize("length", [0, 3, 129, 500])
def test_length_out_of_bounds_fails_before_any_draw(length, zero_rng):
    with pytest.raises(ValidationError):
        generate(GeneratorOptions(length=length), zero_rng)
    assert zero_rng.source.calls == 0


@pytest.mark.parametrize("length", [16.5, "16", None, True])
def test_non_integer_length_fails_before_any_draw(length, zero_rng):
    with pytest.raises(ValidationError):
        generate(GeneratorOptions(length=length), zero_rng)
    assert zero_rng.source.calls == 0


def test_no_class_selected_fails(zero_rng):
    opts = GeneratorOptions(lowercase=False, uppercase=False, numbers=False, symbols=False)
    with pytest.raises(ValidationError, match="character class"):
        generate(opts, zero_rng)
    assert zero_rng.source.calls == 0


def test_ensure_all_types_covers_every_selected_class(all_classes):
    for _ in range(200):
        pw = generate(all_classes)
        assert any(ch in LOWERCASE for ch in pw)
        assert any(ch in UPPERCASE for ch in pw)
        assert any(ch in DIGITS for ch in pw)
        assert any(ch in SYMBOLS for ch in pw)


def test_ensure_all_types_covers_classes_at_minimum_length():
    opts = GeneratorOptions(length=4, symbols=True)
    for _ in range(100):
        pw = generate(opts)
        assert sorted(
            cls for cls in CharClass for ch in pw if ch in charset.CLASS_ALPHABETS[cls]
        ) == sorted(CharClass)


def test_default_scenario(default_options):
    allowed = set(string.ascii_letters + string.digits)
    for _ in range(50):
        pw = generate(default_options)
        assert len(pw) == 16
        assert set(pw) <= allowed
        assert any(ch.islower() for ch in pw)
        assert any(ch.isupper() for ch in pw)
        assert any(ch.isdigit() for ch in pw)


def test_simple_fill_draws_each_position_from_pool(zero_rng):
    opts = GeneratorOptions(length=8, uppercase=False, numbers=False, ensure_all_types=False)
    assert generate(opts, zero_rng) == "a" * 8


def test_all_types_path_shuffles_required_and_filler(zero_rng):
    pw = generate(GeneratorOptions(length=6), zero_rng)
    # required a, A, 0; filler index 0 of the union pool is 'a'
    assert sorted(pw) == sorted("aAaaa0")


def test_exclusions_are_respected():
    opts = GeneratorOptions(
        length=128,
        symbols=True,
        exclude_similar=True,
        exclude_ambiguous=True,
    )
    banned = set(SIMILAR_CHARACTERS) | set(AMBIGUOUS_CHARACTERS)
    for _ in range(20):
        assert not banned.intersection(generate(opts))


def test_exclusions_respected_without_class_guarantee():
    opts = GeneratorOptions(length=128, symbols=True, exclude_similar=True, ensure_all_types=False)
    for _ in range(20):
        assert not set(SIMILAR_CHARACTERS).intersection(generate(opts))


def test_empty_pool_after_exclusions(monkeypatch, zero_rng):
    monkeypatch.setitem(charset.CLASS_ALPHABETS, CharClass.NUMBERS, "01")
    opts = GeneratorOptions(lowercase=False, uppercase=False, numbers=True, exclude_similar=True)
    with pytest.raises(EmptyPoolError):
        generate(opts, zero_rng)
    assert zero_rng.source.calls == 0


def test_class_with_empty_sub_pool_is_skipped_and_not_used_as_filler(monkeypatch):
    monkeypatch.setitem(charset.CLASS_ALPHABETS, CharClass.NUMBERS, "01")
    opts = GeneratorOptions(
        length=32,
        lowercase=True,
        uppercase=False,
        numbers=True,
        exclude_similar=True,
    )
    allowed = set(LOWERCASE) - set(SIMILAR_CHARACTERS)
    for _ in range(20):
        pw = generate(opts)
        assert len(pw) == 32
        assert set(pw) <= allowed


def test_insufficient_length_for_required_classes(zero_rng):
    # Public validation never lets length drop below the class count, so go
    # straight to the composer.
    opts = GeneratorOptions(length=3, symbols=True)
    with pytest.raises(InsufficientLengthError):
        generator._compose_with_all_types(opts, zero_rng)


@pytest.mark.parametrize("count", [0, 51, -1])
def test_batch_count_out_of_range(count, default_options, zero_rng):
    with pytest.raises(BatchRangeError):
        generate_batch(count, default_options, zero_rng)
    assert zero_rng.source.calls == 0


@pytest.mark.parametrize("count", [2.5, "5", True, None])
def test_batch_count_must_be_an_integer(count, default_options, zero_rng):
    with pytest.raises(BatchRangeError):
        generate_batch(count, default_options, zero_rng)
    assert zero_rng.source.calls == 0


def test_batch_returns_requested_number(default_options):
    pws = generate_batch(5, default_options)
    assert len(pws) == 5
    assert all(len(pw) == default_options.length for pw in pws)


def test_batch_upper_bound_inclusive(default_options):
    assert len(generate_batch(50, default_options)) == 50


def test_options_are_immutable(default_options):
    with pytest.raises(AttributeError):
        default_options.length = 20


def test_options_toggles(default_options):
    t = default_options.toggles
    assert (t.lowercase, t.uppercase, t.numbers, t.symbols) == (True, True, True, False)


def test_password_generator_object(scripted):
    gen = PasswordGenerator(GeneratorOptions(length=12), rng=scripted([0]))
    assert gen.is_secure
    assert len(gen.password()) == 12
    assert len(gen.passwords(3)) == 3
    assert gen.entropy_bits() == pytest.approx(12 * 5.954196310386876)


def test_password_generator_validates_upfront():
    with pytest.raises(ValidationError):
        PasswordGenerator(GeneratorOptions(length=2))
