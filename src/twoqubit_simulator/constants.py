"""
Model Constants for the Two-Qubit Simulator
============================================

All fixed numbers of the model live here so that the gate rules, the
normalizer and the sampler agree on them.

THE AMPLITUDE LAYOUT
--------------------

The state is held as 8 real amplitudes. They are read in PAIRS:

    bucket 0 = indices (0, 1)
    bucket 1 = indices (2, 3)
    bucket 2 = indices (4, 5)
    bucket 3 = indices (6, 7)

Each bucket is one measurement outcome, and its probability is the sum of
the squares of its two amplitudes. None of the gates in ``GATE_SET`` ever
touches indices 4-7, so starting from the ground state buckets 2 and 3
always stay empty.

DISPLAY ORDER
-------------

Results are printed with two-bit labels, but the labels do NOT follow the
natural binary order of the buckets:

    00 -> bucket 0
    01 -> bucket 2
    10 -> bucket 1
    11 -> bucket 3
"""

from typing import Tuple

# =============================================================================
# STATE VECTOR SHAPE
# =============================================================================

N_AMPLITUDES = 8
"""Number of real amplitudes in the state vector."""

N_BUCKETS = 4
"""Number of measurement outcomes (pairs of amplitudes)."""

GROUND_STATE: Tuple[float, ...] = (1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
"""Initial state of every run: all weight on index 0."""


# =============================================================================
# NORMALIZATION AND SAMPLING
# =============================================================================

NORM_TOLERANCE = 1e-5
"""
Allowed drift of the squared norm from 1 before the vector is rescaled.

The check is ``abs(sum(v**2) - 1.0) > NORM_TOLERANCE``.
"""

SAMPLE_CEILING = 0.9999
"""
Upper (exclusive) bound of the uniform draws used by the sampler.

Each trial draws ``r`` in ``[0, SAMPLE_CEILING)``. A bucket is credited once
the running sum of probabilities exceeds ``r``.
"""

DEFAULT_SHOTS = 28
"""Number of sampling trials per run unless configured otherwise."""


# =============================================================================
# GATES AND LABELS
# =============================================================================

GATE_SET: Tuple[str, ...] = ("x0", "x1", "y0", "y1", "z0", "z1", "h0", "h1", "cx", "sw")
"""Recognised gate tokens (case-sensitive)."""

BUCKET_LABELS: Tuple[str, ...] = ("bucket0", "bucket1", "bucket2", "bucket3")
"""Canonical bucket names, in sampling order."""

DISPLAY_ORDER: Tuple[Tuple[str, int], ...] = (
    ("00", 0),
    ("01", 2),
    ("10", 1),
    ("11", 3),
)
"""(label, bucket index) pairs used when printing results."""


# =============================================================================
# RUN OPTIONS
# =============================================================================

NORMALIZATION_MODES: Tuple[str, ...] = ("rescale", "legacy")
"""
Accepted normalization modes.

``"rescale"`` divides a drifted vector by its norm in place. ``"legacy"``
leaves the vector untouched, as the first console version did.
"""

LEFTOVER_POLICIES: Tuple[str, ...] = ("drop", "renormalize")
"""
What the sampler does with probability mass missing from a distribution.

``"drop"`` lets trials beyond the total mass land in no bucket.
``"renormalize"`` scales the distribution to sum to 1 before sampling.
"""
