"""
Run Configuration
=================

``SimulationConfig`` groups the knobs of one simulation run so the runner
and the console front end take a single object instead of a long list of
arguments. Values are validated in ``__post_init__``.

Example
-------
>>> config = SimulationConfig(shots=1000, seed=7, leftover="renormalize")
>>> rng = config.make_rng()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .constants import DEFAULT_SHOTS, LEFTOVER_POLICIES, NORMALIZATION_MODES
from .state_vector import AmplitudeVector


@dataclass
class SimulationConfig:
    """
    Parameters of a single simulation run.

    Attributes
    ----------
    shots : int
        Number of sampling trials. Default 28.

    seed : int, optional
        Seed for ``numpy.random.default_rng``. None draws fresh entropy.

    normalization : str
        ``"rescale"`` (divide by the norm when it drifts, fail on a zero
        vector) or ``"legacy"`` (never change the vector).

    leftover : str
        ``"drop"`` (trials past the total probability mass are lost) or
        ``"renormalize"`` (scale probabilities to sum to 1 before sampling).

    initial_amplitudes : sequence of float, optional
        8 starting amplitudes. None starts from the ground state.

    verbose : bool
        Print a summary of the run.
    """

    shots: int = DEFAULT_SHOTS
    seed: Optional[int] = None
    normalization: str = "rescale"
    leftover: str = "drop"
    initial_amplitudes: Optional[Sequence[float]] = None
    verbose: bool = False

    def __post_init__(self):
        if isinstance(self.shots, bool) or not isinstance(self.shots, (int, np.integer)):
            raise ValueError(f"shots must be an integer, got {self.shots!r}")
        if self.shots < 0:
            raise ValueError(f"shots must be non-negative, got {self.shots}")
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, (int, np.integer)):
                raise ValueError(f"seed must be an integer, got {self.seed!r}")
            if self.seed < 0:
                raise ValueError(f"seed must be non-negative, got {self.seed}")
        if self.normalization not in NORMALIZATION_MODES:
            raise ValueError(f"Unknown normalization mode: {self.normalization}. "
                             f"Available: {list(NORMALIZATION_MODES)}")
        if self.leftover not in LEFTOVER_POLICIES:
            raise ValueError(f"Unknown leftover policy: {self.leftover}. "
                             f"Available: {list(LEFTOVER_POLICIES)}")
        if self.initial_amplitudes is not None:
            # Validates length and finiteness early.
            AmplitudeVector.from_amplitudes(self.initial_amplitudes)

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def initial_state(self) -> AmplitudeVector:
        """Fresh starting vector for one run."""
        return AmplitudeVector.from_amplitudes(self.initial_amplitudes)
