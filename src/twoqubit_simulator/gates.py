"""
Gate Rules
==========

Applies named gates to an ``AmplitudeVector`` in place.

The rule table is a reduced, real-valued model rather than textbook gate
matrices. It is reproduced exactly, quirks included:

    Token   Effect on the amplitudes v[0..7]
    -----   --------------------------------
    x0      swap v[0] <-> v[1]
    x1      swap v[1] <-> v[3]
    y0      v[0] = -v[0]
    y1      v[1] = -v[1]
    z0      v[2] = -v[2]
    z1      v[1] = -v[1]            (same as y1)
    h0      Hadamard mix of (v[0], v[2])
    h1      Hadamard mix of (v[1], v[3])
    cx      swap v[1] <-> v[3]      (same as x1)
    sw      swap v[1] <-> v[2]

The Hadamard mix on base index ``i`` writes

    v[i]   = (v[i] + v[i+2]) / √2
    v[i+2] = (v[i] - v[i+2]) / √2

so ``h1`` uses base index 1 with the same fixed offset of 2 as ``h0``.
Applying the mix twice restores the original pair.

Unknown tokens leave the vector untouched and raise an
``UnknownGateWarning``.
"""

from __future__ import annotations

import warnings
from typing import Callable, Dict, List

import numpy as np

from .state_vector import AmplitudeVector
from .exceptions import UnknownGateWarning

SQRT2 = np.sqrt(2.0)
HADAMARD_OFFSET = 2


# =============================================================================
# PRIMITIVE MUTATIONS
# =============================================================================

def swap_amplitudes(state: AmplitudeVector, i: int, j: int) -> None:
    """Swap two amplitudes in place."""
    state[i], state[j] = state[j], state[i]


def negate_amplitude(state: AmplitudeVector, i: int) -> None:
    """Flip the sign of one amplitude in place."""
    state[i] = -state[i]


def apply_hadamard(state: AmplitudeVector, idx: int) -> None:
    """
    Hadamard-style mix of the pair ``(idx, idx + 2)``.

    Parameters
    ----------
    state : AmplitudeVector
        Vector to mutate.
    idx : int
        Base index; the partner amplitude is ``idx + HADAMARD_OFFSET``.
    """
    partner = idx + HADAMARD_OFFSET
    a = (state[idx] + state[partner]) / SQRT2
    b = (state[idx] - state[partner]) / SQRT2
    state[idx] = a
    state[partner] = b


# =============================================================================
# RULE TABLE
# =============================================================================

GateRule = Callable[[AmplitudeVector], None]

GATE_RULES: Dict[str, GateRule] = {
    "x0": lambda s: swap_amplitudes(s, 0, 1),
    "x1": lambda s: swap_amplitudes(s, 1, 3),
    "y0": lambda s: negate_amplitude(s, 0),
    "y1": lambda s: negate_amplitude(s, 1),
    "z0": lambda s: negate_amplitude(s, 2),
    "z1": lambda s: negate_amplitude(s, 1),
    "h0": lambda s: apply_hadamard(s, 0),
    "h1": lambda s: apply_hadamard(s, 1),
    "cx": lambda s: swap_amplitudes(s, 1, 3),
    "sw": lambda s: swap_amplitudes(s, 1, 2),
}
"""Registry of gate token -> in-place rule."""


def is_known_gate(token: str) -> bool:
    """True if ``token`` is one of the recognised gate names."""
    return token in GATE_RULES


def apply_gate(state: AmplitudeVector, token: str) -> bool:
    """
    Apply one gate to ``state`` in place.

    Parameters
    ----------
    state : AmplitudeVector
        Vector to mutate.
    token : str
        Gate name, already stripped of whitespace.

    Returns
    -------
    bool
        True if the gate was applied, False if the token was unknown.
        Unknown tokens also emit an ``UnknownGateWarning``.
    """
    rule = GATE_RULES.get(token)
    if rule is None:
        warnings.warn(f"unknown gate '{token}'", UnknownGateWarning, stacklevel=2)
        return False
    rule(state)
    return True


# =============================================================================
# PARSING
# =============================================================================

def parse_gate_sequence(text: str) -> List[str]:
    """
    Split a console line into gate tokens.

    The line is split on commas and every whitespace character is removed
    from each token, so ``"h0, h1\\n"`` gives ``["h0", "h1"]``. Empty
    tokens are kept: an empty line or a trailing comma yields ``""``,
    which is later reported as an unknown gate.
    """
    return ["".join(token.split()) for token in text.split(",")]
