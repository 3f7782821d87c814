"""Tests for entropy and crack-time estimates."""

import math

import pytest

from securepass.errors import InvalidArgumentError
from securepass.estimates import (
    crack_time_seconds,
    entropy_bits,
    estimate_entropy_bits,
    format_duration,
    pool_size,
)
from securepass.generator import GeneratorOptions


def test_empty_password_has_zero_entropy(default_options):
    assert entropy_bits("", default_options) == 0


def test_entropy_uses_configured_pool_not_observed_chars(default_options):
    # "aaaa..." shows one class, but the options allow 62 characters
    assert entropy_bits("a" * 16, default_options) == pytest.approx(16 * math.log2(62))


def test_pool_size_follows_options():
    assert pool_size(GeneratorOptions()) == 62
    assert pool_size(GeneratorOptions(symbols=True)) == 88
    assert pool_size(GeneratorOptions(exclude_similar=True)) == 55
    assert pool_size(GeneratorOptions(symbols=True, exclude_ambiguous=True)) == 77


def test_entropy_with_no_classes_is_zero():
    opts = GeneratorOptions(lowercase=False, uppercase=False, numbers=False)
    assert entropy_bits("abcd", opts) == 0


def test_estimate_entropy_bits():
    assert estimate_entropy_bits(10, 2) == pytest.approx(10)
    assert estimate_entropy_bits(0, 94) == 0
    with pytest.raises(InvalidArgumentError):
        estimate_entropy_bits(-1, 10)


def test_crack_time_is_half_keyspace_over_rate():
    assert crack_time_seconds(1) == pytest.approx(1e-9)
    assert crack_time_seconds(31, attempts_per_second=1) == pytest.approx(2**30)
    assert crack_time_seconds(40, attempts_per_second=1e6) == pytest.approx(2**39 / 1e6)


def test_crack_time_overflow_is_infinite():
    assert crack_time_seconds(5000) == math.inf


def test_crack_time_rejects_non_positive_rate():
    with pytest.raises(InvalidArgumentError):
        crack_time_seconds(10, attempts_per_second=0)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0 seconds"),
        (1, "1 second"),
        (45, "45 seconds"),
        (59.4, "59 seconds"),
        (60, "1 minute"),
        (90, "2 minutes"),
        (3599, "60 minutes"),
        (3600, "1 hour"),
        (7200, "2 hours"),
        (86400 * 3, "3 days"),
        (31536000 * 5, "5 years"),
        (31536000 * 1234, "1,234 years"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_duration_caps_above_a_trillion_years():
    year = 31536000
    assert format_duration(year * 5e11) == "500,000,000,000 years"
    assert format_duration(year * 2e12) == "over 1 trillion years"
    assert format_duration(math.inf) == "over 1 trillion years"


def test_ninety_trillion_seconds_is_millions_of_years_not_capped():
    # 9e13 s is about 2.85 million years, far below the trillion-year cap
    assert format_duration(90000000000000) == "2,853,881 years"


def test_long_password_reports_trillion_years(default_options):
    bits = entropy_bits("x" * 20, default_options)
    assert format_duration(crack_time_seconds(bits)) == "over 1 trillion years"
