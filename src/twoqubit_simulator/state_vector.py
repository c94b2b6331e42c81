"""
Amplitude Vector
================

The simulator state: 8 real amplitudes held in a numpy array.

A fresh ``AmplitudeVector`` is created for every run and is owned by that
run alone. Gates mutate it in place; nothing else keeps a reference to it.

Example
-------
>>> state = AmplitudeVector.ground()
>>> state.squared_norm()
1.0
>>> state.bucket_pairs().shape
(4, 2)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from .constants import GROUND_STATE, N_AMPLITUDES, N_BUCKETS
from .exceptions import StateVectorError


@dataclass(eq=False)
class AmplitudeVector:
    """
    Real-valued amplitudes of the two-qubit model.

    Attributes
    ----------
    amplitudes : np.ndarray
        float64 array of shape (8,). Pairs ``(2k, 2k+1)`` form bucket ``k``.
    """

    amplitudes: np.ndarray = field(default_factory=lambda: np.array(GROUND_STATE, dtype=float))

    def __post_init__(self):
        arr = np.array(self.amplitudes, dtype=float)
        if arr.shape != (N_AMPLITUDES,):
            raise StateVectorError(
                f"State vector must have exactly {N_AMPLITUDES} amplitudes, "
                f"got shape {arr.shape}"
            )
        if not np.all(np.isfinite(arr)):
            raise StateVectorError(f"State vector has non-finite amplitudes: {arr.tolist()}")
        self.amplitudes = arr

    # === Constructors ===

    @classmethod
    def ground(cls) -> "AmplitudeVector":
        """Ground state: index 0 = 1.0, everything else 0.0."""
        return cls(np.array(GROUND_STATE, dtype=float))

    @classmethod
    def from_amplitudes(cls, values: Optional[Iterable[float]]) -> "AmplitudeVector":
        """Build a vector from 8 amplitudes, or the ground state for None."""
        if values is None:
            return cls.ground()
        return cls(np.asarray(list(values), dtype=float))

    # === Norm ===

    def squared_norm(self) -> float:
        """Sum of squares of all 8 amplitudes."""
        return float(np.sum(self.amplitudes ** 2))

    def norm(self) -> float:
        """L2 norm of the vector."""
        return float(np.sqrt(self.squared_norm()))

    # === Views ===

    def bucket_pairs(self) -> np.ndarray:
        """(4, 2) view of the amplitudes, one row per bucket."""
        return self.amplitudes.reshape(N_BUCKETS, 2)

    def as_numpy(self) -> np.ndarray:
        """Copy of the amplitudes."""
        return self.amplitudes.copy()

    def copy(self) -> "AmplitudeVector":
        return AmplitudeVector(self.amplitudes.copy())

    def __len__(self) -> int:
        return len(self.amplitudes)

    def __getitem__(self, idx):
        return self.amplitudes[idx]

    def __setitem__(self, idx, value):
        self.amplitudes[idx] = value

    def __repr__(self) -> str:
        values = ", ".join(f"{v:+.4f}" for v in self.amplitudes)
        return f"AmplitudeVector([{values}])"
