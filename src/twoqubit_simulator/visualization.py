"""
Result Visualization
====================

Bar chart of sampled counts, in the same label order as the console table
(00, 01, 10, 11), with optional expected counts from the probabilities.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from .constants import DISPLAY_ORDER
from .measurement import OutcomeCounts, ProbabilityDistribution


def plot_outcome_counts(
    counts: OutcomeCounts,
    ax: Optional[plt.Axes] = None,
    probabilities: Optional[ProbabilityDistribution] = None,
    shots: Optional[int] = None,
    title: Optional[str] = None,
    figsize: Tuple[float, float] = (6, 4),
    color: str = "tab:blue",
) -> plt.Axes:
    """
    Plot sampled counts per outcome.

    Parameters
    ----------
    counts : OutcomeCounts
        Sampled counts.
    ax : plt.Axes, optional
        Axes to plot on. If None, creates new figure.
    probabilities : ProbabilityDistribution, optional
        If given, expected counts ``p * shots`` are drawn as markers.
    shots : int, optional
        Number of trials; defaults to ``counts.total``.
    title : str, optional
        Plot title. Auto-generated if None.
    figsize : tuple
        Figure size (width, height) in inches
    color : str
        Bar color

    Returns
    -------
    plt.Axes
        The axes with the plot
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    labels = [label for label, _ in DISPLAY_ORDER]
    order = [idx for _, idx in DISPLAY_ORDER]
    values = counts.as_array()[order]
    positions = np.arange(len(labels))

    ax.bar(positions, values, color=color, alpha=0.8, label="sampled")

    if probabilities is not None:
        n = counts.total if shots is None else shots
        expected = probabilities.as_array()[order] * n
        ax.scatter(positions, expected, color="black", marker="_", s=400,
                   zorder=3, label="expected")
        ax.legend()

    ax.set_xticks(positions)
    ax.set_xticklabels(labels)
    ax.set_xlabel("Outcome")
    ax.set_ylabel("Counts")
    if title is None:
        title = f"Measurement results ({counts.total} counts)"
    ax.set_title(title)
    ax.grid(True, axis="y", alpha=0.3)

    return ax
