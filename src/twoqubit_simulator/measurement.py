"""
Measurement: Probabilities and Sampling
=======================================

Turns the final amplitudes into a 4-bucket probability distribution, then
draws ``shots`` Monte Carlo samples from it.

Probabilities
-------------
Bucket ``k`` collects the two amplitudes ``(2k, 2k+1)``:

    p_k = v[2k]² + v[2k+1]²

The values are NOT forced to sum to 1.

Sampling
--------
Each trial draws ``r`` uniformly in ``[0, 0.9999)`` and walks the buckets
in the fixed order bucket0, bucket1, bucket2, bucket3, keeping a running
sum of probabilities. The first bucket whose running sum is strictly
greater than ``r`` gets the count.

If the distribution holds less than ``r`` in total, no bucket is credited
and the trial is DROPPED (``leftover="drop"``, the classic behavior). With
``leftover="renormalize"`` the distribution is divided by its total before
sampling, so every trial lands somewhere.

Trials only read the distribution, so all ``shots`` draws are evaluated as
one numpy batch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from .constants import (
    BUCKET_LABELS,
    DISPLAY_ORDER,
    LEFTOVER_POLICIES,
    N_BUCKETS,
    SAMPLE_CEILING,
)
from .exceptions import DegenerateStateError
from .normalization import normalize_state_vector
from .state_vector import AmplitudeVector


def _bucket_index(key: Union[int, str]) -> int:
    if isinstance(key, str):
        try:
            return BUCKET_LABELS.index(key)
        except ValueError:
            raise KeyError(f"Unknown bucket: {key}. Available: {list(BUCKET_LABELS)}")
    return int(key)


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class ProbabilityDistribution:
    """
    Probability of each measurement bucket.

    Attributes
    ----------
    bucket0, bucket1, bucket2, bucket3 : float
        Probabilities in canonical order. They may sum to less (or more)
        than 1 if the state was not normalized.
    """

    bucket0: float
    bucket1: float
    bucket2: float
    bucket3: float

    @classmethod
    def from_array(cls, values) -> "ProbabilityDistribution":
        values = [float(v) for v in values]
        if len(values) != N_BUCKETS:
            raise ValueError(f"Expected {N_BUCKETS} probabilities, got {len(values)}")
        return cls(*values)

    def as_array(self) -> np.ndarray:
        return np.array([self.bucket0, self.bucket1, self.bucket2, self.bucket3], dtype=float)

    @property
    def total(self) -> float:
        return float(np.sum(self.as_array()))

    def items(self) -> List[Tuple[str, float]]:
        """(label, probability) pairs in canonical sampling order."""
        return list(zip(BUCKET_LABELS, self.as_array().tolist()))

    def __getitem__(self, key: Union[int, str]) -> float:
        return float(self.as_array()[_bucket_index(key)])


@dataclass(frozen=True)
class OutcomeCounts:
    """
    Number of trials credited to each bucket.

    Attributes
    ----------
    bucket0, bucket1, bucket2, bucket3 : int
        Counts in canonical order. Their total may be below the number of
        shots when trials were dropped.
    """

    bucket0: int
    bucket1: int
    bucket2: int
    bucket3: int

    @classmethod
    def from_array(cls, values) -> "OutcomeCounts":
        values = [int(v) for v in values]
        if len(values) != N_BUCKETS:
            raise ValueError(f"Expected {N_BUCKETS} counts, got {len(values)}")
        return cls(*values)

    def as_array(self) -> np.ndarray:
        return np.array([self.bucket0, self.bucket1, self.bucket2, self.bucket3], dtype=int)

    @property
    def total(self) -> int:
        return int(np.sum(self.as_array()))

    def dropped(self, shots: int) -> int:
        """Trials that did not land in any bucket."""
        return shots - self.total

    def items(self) -> List[Tuple[str, int]]:
        return list(zip(BUCKET_LABELS, self.as_array().tolist()))

    def display_rows(self) -> List[Tuple[str, int]]:
        """(label, count) rows as printed: 00, 01, 10, 11 -> buckets 0, 2, 1, 3."""
        counts = self.as_array()
        return [(label, int(counts[idx])) for label, idx in DISPLAY_ORDER]

    def __getitem__(self, key: Union[int, str]) -> int:
        return int(self.as_array()[_bucket_index(key)])


# =============================================================================
# PROBABILITY CALCULATION
# =============================================================================

def calculate_probabilities(
    state: AmplitudeVector,
    normalization: str = "rescale",
) -> ProbabilityDistribution:
    """
    Bucket probabilities of ``state``.

    The normalizer runs first and may rescale ``state`` in place (see
    ``normalize_state_vector`` for the modes).

    Parameters
    ----------
    state : AmplitudeVector
        Final amplitudes of the run.
    normalization : str
        ``"rescale"`` or ``"legacy"``.

    Returns
    -------
    ProbabilityDistribution
        ``p_k = v[2k]² + v[2k+1]²`` for k = 0..3.
    """
    normalize_state_vector(state, mode=normalization)
    probs = np.sum(state.bucket_pairs() ** 2, axis=1)
    return ProbabilityDistribution.from_array(probs)


# =============================================================================
# SAMPLING
# =============================================================================

def sample_measurements(
    probabilities: ProbabilityDistribution,
    shots: int,
    rng: Optional[np.random.Generator] = None,
    leftover: str = "drop",
) -> OutcomeCounts:
    """
    Draw ``shots`` samples from ``probabilities``.

    Parameters
    ----------
    probabilities : ProbabilityDistribution
        Distribution to sample from.
    shots : int
        Number of independent trials (>= 0).
    rng : np.random.Generator, optional
        Source of randomness. A fresh unseeded generator if None.
    leftover : str
        ``"drop"``: trials beyond the total probability mass are dropped.
        ``"renormalize"``: the distribution is scaled to sum to 1 first.

    Returns
    -------
    OutcomeCounts
        Counts per bucket; ``total <= shots`` (``== shots`` when
        renormalizing).

    Raises
    ------
    ValueError
        Negative or non-integer ``shots``, or unknown ``leftover`` policy.
    DegenerateStateError
        ``leftover="renormalize"`` with a distribution of total 0.
    """
    if isinstance(shots, bool) or not isinstance(shots, (int, np.integer)):
        raise ValueError(f"shots must be an integer, got {shots!r}")
    if shots < 0:
        raise ValueError(f"shots must be non-negative, got {shots}")
    if leftover not in LEFTOVER_POLICIES:
        raise ValueError(f"Unknown leftover policy: {leftover}. Use one of {LEFTOVER_POLICIES}")

    if rng is None:
        rng = np.random.default_rng()

    probs = probabilities.as_array()
    if leftover == "renormalize":
        total = float(np.sum(probs))
        if total <= 0.0:
            raise DegenerateStateError(
                "Cannot renormalize a probability distribution with zero total mass"
            )
        probs = probs / total

    running = np.cumsum(probs)
    draws = rng.uniform(0.0, SAMPLE_CEILING, size=int(shots))

    # First bucket whose running sum is strictly greater than r;
    # index N_BUCKETS means no bucket was reached and the trial is dropped.
    landed = np.searchsorted(running, draws, side="right")
    counts = np.bincount(landed, minlength=N_BUCKETS + 1)[:N_BUCKETS]
    return OutcomeCounts.from_array(counts)
