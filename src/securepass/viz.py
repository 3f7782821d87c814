"""
viz.py: Matplotlib helpers for password analysis figures

Aim:
- Small, dependency-light (matplotlib only).
- Return (fig, ax) so callers can further customize or save.
- Work from generator options, passwords and strength results directly.


Quick start

>>> from securepass.viz import plot_entropy_by_length
>>> fig, ax = plot_entropy_by_length(GeneratorOptions(symbols=True))

>>> pws = generate_batch(50, opts)
>>> fig, ax = plot_character_frequency(pws, build_filtered_pool(opts))
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import matplotlib.pyplot as plt

from .estimates import crack_time_seconds, estimate_entropy_bits, format_duration, pool_size
from .generator import MAX_LENGTH, MIN_LENGTH
from .metrics import audit_passwords
from .strength import StrengthResult, StrengthTier


#Basic helpers

def _autox_labels(ax, labels: Sequence[str], rotation: int = 0) -> None:
    ax.set_xticks(range(len(labels)))
    ax.set_xticklabels(labels, rotation=rotation)


#Plots

def plot_entropy_by_length(
    options,
    lengths: Optional[Sequence[int]] = None,
    *,
    title: Optional[str] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Entropy over password length for the pool `options` allow, with the
    configured length marked and its crack time in the legend.
    """
    size = pool_size(options)
    if size < 2:
        raise ValueError("options must allow at least 2 characters")
    lengths = list(lengths) if lengths is not None else list(range(MIN_LENGTH, MAX_LENGTH + 1))
    if any(n <= 0 for n in lengths):
        raise ValueError("All lengths must be positive.")

    bits = [estimate_entropy_bits(n, size) for n in lengths]
    current = estimate_entropy_bits(options.length, size)

    fig, ax = plt.subplots()
    ax.plot(lengths, bits, label=f"pool of {size}")
    ax.plot(
        [options.length],
        [current],
        marker="o",
        linestyle="",
        label=f"length {options.length}: {format_duration(crack_time_seconds(current))}",
    )
    ax.set_xlabel("Password length")
    ax.set_ylabel("Entropy (bits)")
    ax.legend()
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


def plot_character_frequency(
    passwords: Iterable[str],
    pool: str,
    *,
    title: Optional[str] = "Character frequency (should be flat)",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Bar per pool character with the uniform expectation drawn across it.
    The chi-square p-value goes in the title.
    """
    result = audit_passwords(passwords, pool)

    fig, ax = plt.subplots(figsize=(max(6.0, len(pool) * 0.15), 4.0))
    ax.bar(range(len(pool)), result.observed)
    ax.axhline(result.expected[0], linestyle="--")
    _autox_labels(ax, list(pool))
    ax.set_ylabel("Count")
    if title:
        ax.set_title(f"{title}  (p = {result.pvalue:.3f})")
    fig.tight_layout()
    return fig, ax


def plot_pool_residuals(
    passwords: Iterable[str],
    pool: str,
    *,
    title: Optional[str] = "Residuals (observed − expected)",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    How far each pool character's count is from the uniform expectation.
    """
    result = audit_passwords(passwords, pool)

    fig, ax = plt.subplots(figsize=(max(6.0, len(pool) * 0.15), 4.0))
    ax.bar(range(len(pool)), result.residuals)
    _autox_labels(ax, list(pool))
    ax.axhline(0.0)
    ax.set_ylabel("Observed − Expected")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


def plot_strength_distribution(
    results: Iterable[StrengthResult],
    *,
    title: Optional[str] = "Strength tiers",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    How many results landed in each tier, weakest to strongest.
    """
    tiers = list(StrengthTier)
    counts = {tier: 0 for tier in tiers}
    for r in results:
        counts[r.tier] += 1

    fig, ax = plt.subplots()
    ax.bar(range(len(tiers)), [counts[t] for t in tiers])
    _autox_labels(ax, [t.value for t in tiers], rotation=30)
    ax.set_ylabel("Passwords")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig, ax


__all__ = [
    "plot_entropy_by_length",
    "plot_character_frequency",
    "plot_pool_residuals",
    "plot_strength_distribution",
]
