"""
Two-Qubit State Vector Simulator
================================

A small simulator of a two-qubit system held as 8 real amplitudes. A
comma-separated gate sequence is applied to the amplitudes, then repeated
Monte Carlo sampling approximates the distribution over the 4 measurement
outcomes.

MODULE STRUCTURE
----------------

Model:
    - constants: amplitude layout, tolerances, gate set, display order
    - state_vector: the AmplitudeVector container
    - gates: rule table, ``apply_gate`` and ``parse_gate_sequence``

Measurement:
    - normalization: rescaling to unit norm ("rescale" / "legacy")
    - measurement: ProbabilityDistribution, OutcomeCounts, sampling

Running:
    - configurations: SimulationConfig
    - simulation: ``run_simulation`` and SimulationResult
    - cli: console front end (``twoqubit-sim``)
    - visualization: bar chart of counts

Quick start
-----------
>>> from twoqubit_simulator import run_simulation, SimulationConfig
>>> result = run_simulation("h0,h1", SimulationConfig(shots=1000, seed=1))
>>> round(result.probabilities.bucket0, 6)
0.5
"""

from .constants import (
    N_AMPLITUDES, N_BUCKETS, GROUND_STATE,
    NORM_TOLERANCE, SAMPLE_CEILING, DEFAULT_SHOTS,
    GATE_SET, BUCKET_LABELS, DISPLAY_ORDER,
)

from .exceptions import (
    SimulatorError,
    DomainError,
    DegenerateStateError,
    StateVectorError,
    InputError,
    UnknownGateWarning,
)

from .state_vector import AmplitudeVector

from .gates import (
    GATE_RULES,
    apply_gate,
    apply_hadamard,
    is_known_gate,
    parse_gate_sequence,
)

from .normalization import normalize_state_vector, needs_normalization

from .measurement import (
    ProbabilityDistribution,
    OutcomeCounts,
    calculate_probabilities,
    sample_measurements,
)

from .configurations import SimulationConfig

from .simulation import SimulationResult, run_simulation, evolve_state

__version__ = "0.1.0"
__all__ = [
    # Constants
    "N_AMPLITUDES", "N_BUCKETS", "GROUND_STATE",
    "NORM_TOLERANCE", "SAMPLE_CEILING", "DEFAULT_SHOTS",
    "GATE_SET", "BUCKET_LABELS", "DISPLAY_ORDER",
    # Errors
    "SimulatorError", "DomainError", "DegenerateStateError",
    "StateVectorError", "InputError", "UnknownGateWarning",
    # Model
    "AmplitudeVector",
    "GATE_RULES", "apply_gate", "apply_hadamard", "is_known_gate",
    "parse_gate_sequence",
    # Measurement
    "normalize_state_vector", "needs_normalization",
    "ProbabilityDistribution", "OutcomeCounts",
    "calculate_probabilities", "sample_measurements",
    # Running
    "SimulationConfig", "SimulationResult", "run_simulation", "evolve_state",
]
