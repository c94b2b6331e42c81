"""
Gate-Sequence Runner
====================

Runs one simulation from a line of text:

1. **Parse**: split the line into gate tokens (``parse_gate_sequence``)
2. **Evolve**: apply each gate to a fresh ``AmplitudeVector``, in order.
   Gates do not commute, so order matters. Unknown tokens are warned about
   and skipped.
3. **Probabilities**: normalize if needed, then sum squared pairs
4. **Sample**: draw ``shots`` trials from the distribution

Nothing is shared between runs: each call builds its own vector and random
generator.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from .configurations import SimulationConfig
from .gates import apply_gate, parse_gate_sequence
from .measurement import (
    OutcomeCounts,
    ProbabilityDistribution,
    calculate_probabilities,
    sample_measurements,
)
from .normalization import needs_normalization
from .state_vector import AmplitudeVector

GateCallback = Callable[[str, bool], None]


@dataclass
class SimulationResult:
    """
    Outcome of one run.

    Attributes
    ----------
    gates : list of str
        Every parsed token, in input order (unknown ones included).
    unknown_gates : list of str
        Tokens that were skipped.
    state_vector : AmplitudeVector
        Final amplitudes (after normalization).
    probabilities : ProbabilityDistribution
        Bucket probabilities used for sampling.
    counts : OutcomeCounts
        Sampled counts per bucket.
    shots : int
        Number of trials drawn.
    renormalized : bool
        True if the normalizer rescaled the vector.
    applied_gates : list of str
        Tokens that were applied, in input order.
    """

    gates: List[str]
    unknown_gates: List[str]
    state_vector: AmplitudeVector
    probabilities: ProbabilityDistribution
    counts: OutcomeCounts
    shots: int
    renormalized: bool = False
    applied_gates: List[str] = field(default_factory=list)

    @property
    def dropped(self) -> int:
        """Trials that landed in no bucket."""
        return self.counts.dropped(self.shots)


def evolve_state(
    tokens: List[str],
    state: AmplitudeVector,
    on_gate: Optional[GateCallback] = None,
) -> List[str]:
    """
    Apply ``tokens`` to ``state`` in order.

    ``on_gate(token, applied)`` is called once per token, known or not.
    Returns the list of unknown tokens.
    """
    unknown = []
    for token in tokens:
        applied = apply_gate(state, token)
        if not applied:
            unknown.append(token)
        if on_gate is not None:
            on_gate(token, applied)
    return unknown


def run_simulation(
    text: str,
    config: Optional[SimulationConfig] = None,
    on_gate: Optional[GateCallback] = None,
) -> SimulationResult:
    """
    Parse ``text``, apply its gates and sample the final state.

    Parameters
    ----------
    text : str
        Comma-separated gate tokens, e.g. ``"h0, h1"``.
    config : SimulationConfig, optional
        Run parameters; defaults to ``SimulationConfig()``.
    on_gate : callable, optional
        Progress hook, called as ``on_gate(token, applied)`` per token.

    Returns
    -------
    SimulationResult

    Raises
    ------
    DegenerateStateError
        The final state (or distribution) has zero weight and the config
        asks for rescaling / renormalization.
    """
    if config is None:
        config = SimulationConfig()

    tokens = parse_gate_sequence(text)
    state = config.initial_state()
    unknown = evolve_state(tokens, state, on_gate=on_gate)

    drifted = needs_normalization(state)
    probabilities = calculate_probabilities(state, normalization=config.normalization)
    renormalized = drifted and config.normalization == "rescale"

    counts = sample_measurements(
        probabilities,
        config.shots,
        rng=config.make_rng(),
        leftover=config.leftover,
    )

    result = SimulationResult(
        gates=tokens,
        unknown_gates=unknown,
        state_vector=state,
        probabilities=probabilities,
        counts=counts,
        shots=config.shots,
        renormalized=renormalized,
        applied_gates=[t for t in tokens if t not in unknown],
    )

    if config.verbose:
        print_summary(result)

    return result


def print_summary(result: SimulationResult, file: Optional[TextIO] = None) -> None:
    """Print the amplitudes, probabilities and counts of a run to ``file`` (stdout if None)."""
    out = sys.stdout if file is None else file
    print(f"\n{'='*60}", file=out)
    print("TWO-QUBIT SIMULATION SUMMARY", file=out)
    print(f"{'='*60}", file=out)
    print(f"Gates applied:     {', '.join(result.applied_gates) or '(none)'}", file=out)
    if result.unknown_gates:
        print(f"Unknown gates:     {', '.join(repr(g) for g in result.unknown_gates)}", file=out)
    print(f"Final amplitudes:  {result.state_vector}", file=out)
    print(f"Renormalized:      {'yes' if result.renormalized else 'no'}", file=out)
    print("\n--- Buckets ---", file=out)
    for (label, p), (_, n) in zip(result.probabilities.items(), result.counts.items()):
        print(f"  {label}:  p = {p:.4f}   counts = {n}", file=out)
    print(f"Shots: {result.shots}   dropped: {result.dropped}", file=out)
    print(f"{'='*60}", file=out)
