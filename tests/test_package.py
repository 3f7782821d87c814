"""Tests for the top-level package surface."""

import doctest

import securepass
from securepass import random_source


def test_package_docstring_examples_hold():
    failures, attempted = doctest.testmod(securepass, verbose=False)
    assert attempted > 0
    assert failures == 0


def test_default_int_helper_is_secure_random_int():
    assert "secure_random_int" in random_source.__all__
    assert not hasattr(random_source, "random_int")
    for name in random_source.__all__:
        assert hasattr(random_source, name)
