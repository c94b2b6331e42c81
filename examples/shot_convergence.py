#!/usr/bin/env python3
"""
Shot Convergence of the Sampled Distribution
============================================

Runs one gate sequence with an increasing number of shots and plots how the
sampled frequencies approach the bucket probabilities. Both leftover
policies are shown for a start state with missing probability mass, so the
effect of dropping trials is visible.

Usage:
    python examples/shot_convergence.py [gates] [output.png]
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from twoqubit_simulator import BUCKET_LABELS, SimulationConfig, run_simulation

SHOT_COUNTS = np.array([10, 28, 100, 300, 1000, 3000, 10000])
HALF_WEIGHT = [0.5, 0.0, 0.5, 0.0, 0.0, 0.0, 0.0, 0.0]


def frequencies(gates, shots, **kwargs):
    result = run_simulation(gates, SimulationConfig(shots=int(shots), seed=0, **kwargs))
    return result.counts.as_array() / shots, result.probabilities.as_array()


def main():
    gates = sys.argv[1] if len(sys.argv) > 1 else "h0,h1"
    output = sys.argv[2] if len(sys.argv) > 2 else "shot_convergence.png"

    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5), sharey=True)
    setups = [
        ("drop (legacy norm)", dict(normalization="legacy", leftover="drop")),
        ("renormalize", dict(normalization="legacy", leftover="renormalize")),
    ]

    for ax, (name, kwargs) in zip(axes, setups):
        freqs = np.array([
            frequencies(gates, n, initial_amplitudes=HALF_WEIGHT, **kwargs)[0]
            for n in SHOT_COUNTS
        ])
        for k, label in enumerate(BUCKET_LABELS):
            ax.semilogx(SHOT_COUNTS, freqs[:, k], "o-", label=label)
        ax.axhline(0.5, color="gray", ls="--", lw=1)
        ax.axhline(0.25, color="gray", ls=":", lw=1)
        ax.set_title(f"{gates} from half-weight start: {name}")
        ax.set_xlabel("Shots")
        ax.grid(True, alpha=0.3)

    axes[0].set_ylabel("Sampled frequency")
    axes[0].legend()
    fig.tight_layout()
    fig.savefig(output, dpi=150)
    print(f"Saved {output}")


if __name__ == "__main__":
    main()
