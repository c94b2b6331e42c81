"""
State Vector Normalization
==========================

Rescales the amplitudes to unit L2 norm when the squared norm has drifted
more than ``NORM_TOLERANCE`` away from 1.

Two modes are supported:

``"rescale"`` (default)
    Every amplitude is divided by the norm, in place. A zero vector cannot
    be rescaled and raises ``DegenerateStateError``.

``"legacy"``
    Keeps the behavior of the first console version of this simulator,
    where the rescaled values were computed and then thrown away. The
    vector is never changed, and a zero vector is not an error; its
    probabilities are simply all zero.

Every gate in the rule table preserves the norm, so drift only shows up
when a run starts from custom amplitudes.
"""

from __future__ import annotations

import numpy as np

from .constants import NORM_TOLERANCE, NORMALIZATION_MODES
from .exceptions import DegenerateStateError
from .state_vector import AmplitudeVector


def needs_normalization(state: AmplitudeVector, tol: float = NORM_TOLERANCE) -> bool:
    """True if ``|Σv² - 1| > tol``."""
    return abs(state.squared_norm() - 1.0) > tol


def normalize_state_vector(state: AmplitudeVector, mode: str = "rescale") -> bool:
    """
    Bring ``state`` back to unit norm if it has drifted.

    Parameters
    ----------
    state : AmplitudeVector
        Vector to normalize (mutated in place in ``"rescale"`` mode).
    mode : str
        ``"rescale"`` or ``"legacy"``.

    Returns
    -------
    bool
        True if the amplitudes were rescaled.

    Raises
    ------
    DegenerateStateError
        In ``"rescale"`` mode, when the vector is all zeros.
    ValueError
        For an unknown mode.
    """
    if mode not in NORMALIZATION_MODES:
        raise ValueError(f"Unknown normalization mode: {mode}. Use one of {NORMALIZATION_MODES}")

    if not needs_normalization(state):
        return False

    if mode == "legacy":
        return False

    sq_norm = state.squared_norm()
    if sq_norm == 0.0:
        raise DegenerateStateError(
            "Cannot normalize an all-zero state vector (squared norm is 0)"
        )
    state.amplitudes /= np.sqrt(sq_norm)
    return True
