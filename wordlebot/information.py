"""
information.py

Information carried by a guess, computed from how it splits the plausible
answers into feedback buckets. Both metrics take a mapping from score to the
number of plausible answers producing that score; higher is better.
"""

from __future__ import annotations

from typing import Mapping

import numpy as np

from wordlebot.errors import EmptyDistributionError

MICROBITS = 1_000_000


def _counts(distribution: Mapping[object, int]) -> np.ndarray:
    counts = np.fromiter(distribution.values(), dtype=np.int64, count=len(distribution))
    counts = counts[counts > 0]
    if counts.size == 0:
        raise EmptyDistributionError("no outcomes to measure; are there any plausible answers?")
    return counts


def expected_entropy(distribution: Mapping[object, int]) -> float:
    """Expected bits gained, assuming answers are uniform over the buckets' members."""
    counts = _counts(distribution)
    probs = counts / counts.sum()
    return float(-np.sum(probs * np.log2(probs)))


def min_surprise(distribution: Mapping[object, int]) -> float:
    """Bits guaranteed even if the answer always lands in the largest bucket."""
    counts = _counts(distribution)
    return float(-np.log2(counts.max() / counts.sum()))


def to_microbits(bits: float) -> int:
    """Truncate to an integer scale so ranking never depends on float noise."""
    return int(bits * MICROBITS)
