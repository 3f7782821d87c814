"""
metrics.py

Statistical audits of the random source and of generated passwords.

What this module does

- Draws many integers from a SecureRandom and histograms them.
- Counts how often each pool character shows up across a set of passwords.
- Runs a Chi-square test of either against the uniform distribution.
- Measures how often each selected class shows up across a set of passwords.

Design choices

- "Uniform" means: over every outcome in the support, i.e. [0, n) for
  `uniform_int(n)`, or every character of the pool the options allow.
- Outcomes outside the support are ignored rather than raising.

Quick start

>>> from securepass.metrics import audit_random_source, audit_passwords
>>> audit_random_source(max_exclusive=10, trials=10_000).is_uniform()
True
>>> from securepass.charset import build_filtered_pool
>>> from securepass.generator import GeneratorOptions, generate_batch
>>> opts = GeneratorOptions(length=64, ensure_all_types=False)
>>> audit_passwords(generate_batch(50, opts), build_filtered_pool(opts)).pvalue
# tiny p-values mean some characters come up too often

Dependencies

- numpy
- scipy (for chi-square p-values)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import numpy as np
from scipy.stats import chisquare

from . import charset
from .random_source import SecureRandom, default_random


#Histograms

def draw_histogram(
    rng: SecureRandom,
    max_exclusive: int,
    trials: int,
) -> Dict[int, int]:
    """
    Draw `trials` integers in [0, max_exclusive) from `rng` and count them.
    """
    if trials <= 0:
        raise ValueError("trials must be positive")
    hist: Dict[int, int] = {}
    for x in rng.uniform_ints(max_exclusive, size=trials):
        hist[x] = hist.get(x, 0) + 1
    return hist


def character_frequency(passwords: Iterable[str], pool: str) -> Dict[int, int]:
    """
    Histogram of characters across `passwords`, keyed by index into `pool`.

    Characters not in the pool are ignored; feed the result straight into
    `chi_square_uniform(..., support_size=len(pool))`.
    """
    index = {ch: i for i, ch in enumerate(pool)}
    hist: Dict[int, int] = {}
    for pw in passwords:
        for ch in pw:
            i = index.get(ch)
            if i is not None:
                hist[i] = hist.get(i, 0) + 1
    return hist


#Class coverage

@dataclass
class ClassCoverage:
    total: int
    covered: Dict[str, int]

    def fraction(self, name: str) -> float:
        return self.covered.get(name, 0) / self.total if self.total else 0.0


def class_coverage(passwords: Sequence[str], toggles) -> ClassCoverage:
    """
    For every selected class, count the passwords containing at least one of
    its characters.
    """
    covered: Dict[str, int] = {}
    for cls in charset.selected_classes(toggles):
        alphabet = set(charset.CLASS_ALPHABETS[cls])
        covered[cls.value] = sum(1 for pw in passwords if alphabet.intersection(pw))
    return ClassCoverage(total=len(passwords), covered=covered)


#Chi-square uniformity test

@dataclass
class UniformityResult:
    """Chi-square outcome plus the per-category vectors it was computed from."""

    stat: float
    df: int
    pvalue: float
    observed: List[float]
    expected: List[float]

    @property
    def residuals(self) -> List[float]:
        return [o - e for o, e in zip(self.observed, self.expected)]

    def is_uniform(self, alpha: float = 1e-6) -> bool:
        """False only when uniformity is rejected at significance `alpha`."""
        return self.pvalue > alpha


def chi_square_uniform(
    counts: Mapping[int, int],
    support_size: int,
) -> UniformityResult:
    """
    Chi-square goodness-of-fit of index-keyed `counts` against uniform
    over [0, support_size). df = support_size - 1.
    """
    if support_size < 2:
        raise ValueError("support_size must be >= 2")
    observed = np.array([counts.get(k, 0) for k in range(support_size)], dtype=float)
    total = observed.sum()
    if total <= 0:
        raise ValueError("Empty counts supplied.")

    expected = np.full(support_size, total / support_size)
    res = chisquare(f_obs=observed, f_exp=expected)
    return UniformityResult(
        stat=float(res.statistic),
        df=support_size - 1,
        pvalue=float(res.pvalue),
        observed=observed.tolist(),
        expected=expected.tolist(),
    )


#Audits

def audit_random_source(
    rng: Optional[SecureRandom] = None,
    max_exclusive: int = 10,
    trials: int = 100_000,
) -> UniformityResult:
    """Is `rng.uniform_int(max_exclusive)` indistinguishable from uniform?"""
    if rng is None:
        rng = default_random()
    return chi_square_uniform(draw_histogram(rng, max_exclusive, trials), max_exclusive)


def audit_passwords(passwords: Iterable[str], pool: str) -> UniformityResult:
    """Are the characters of `passwords` spread evenly over `pool`?"""
    return chi_square_uniform(character_frequency(passwords, pool), len(pool))


__all__ = [
    "UniformityResult",
    "ClassCoverage",
    "draw_histogram",
    "character_frequency",
    "class_coverage",
    "chi_square_uniform",
    "audit_random_source",
    "audit_passwords",
]
