import itertools

import pytest

from securepass.generator import GeneratorOptions
from securepass.random_source import EntropySource, SecureRandom


class ScriptedEntropySource(EntropySource):
    """Replays a fixed list of 32-bit words, cycling when it runs out."""

    is_secure = True

    def __init__(self, words):
        self.words = list(words)
        self._it = itertools.cycle(self.words)
        self.calls = 0

    def next_u32(self) -> int:
        self.calls += 1
        return next(self._it)


@pytest.fixture
def scripted():
    """Factory for a SecureRandom fed by a scripted source."""

    def _make(words):
        return SecureRandom(ScriptedEntropySource(words))

    return _make


@pytest.fixture
def zero_rng(scripted):
    return scripted([0])


@pytest.fixture
def default_options():
    return GeneratorOptions(
        length=16,
        lowercase=True,
        uppercase=True,
        numbers=True,
        symbols=False,
        exclude_similar=False,
        exclude_ambiguous=False,
        ensure_all_types=True,
    )


@pytest.fixture
def all_classes():
    return GeneratorOptions(length=20, symbols=True)
