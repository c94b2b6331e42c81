"""
Console Front End
=================

Reads one line of comma-separated gates, runs the simulation and prints the
results table::

    $ twoqubit-sim --seed 1
    Two-Qubit State Vector Simulator
    ...
    Enter gate seq (x0,x1,y0,y1,z0,z1,h0,h1,cx,sw):
    h0,h1
    Calculating the state vector...
    ..
    Running 28 iterations...
    Results:
    00: [13]
    01: [0]
    10: [15]
    11: [0]

Unknown gates are reported on stderr and do not change the exit code.
Exit codes: 0 success, 1 input or domain error, 2 usage error.
"""

from __future__ import annotations

import argparse
import sys
import warnings
from typing import List, Optional, TextIO

from .constants import DEFAULT_SHOTS, GATE_SET, LEFTOVER_POLICIES, NORMALIZATION_MODES
from .configurations import SimulationConfig
from .exceptions import DomainError, InputError, UnknownGateWarning
from .simulation import SimulationResult, print_summary, run_simulation

BANNER = (
    "Two-Qubit State Vector Simulator",
    "Real-amplitude model, 8 amplitudes / 4 outcomes",
    "",
)
PROMPT = f"Enter gate seq ({','.join(GATE_SET)}): "


def read_gate_line(stdin: TextIO) -> str:
    """
    Read one line from ``stdin``.

    Raises
    ------
    InputError
        On end of input or a read failure.
    """
    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Failed to read gate sequence: {exc}") from exc
    if line == "":
        raise InputError("No gate sequence given (end of input)")
    return line


_default_showwarning = warnings.showwarning


def show_gate_warning(message, category, filename, lineno, file=None, line=None):
    """Print unknown-gate warnings as a bare ``unknown gate '<token>'`` line."""
    if issubclass(category, UnknownGateWarning):
        print(str(message), file=sys.stderr if file is None else file)
        return
    _default_showwarning(message, category, filename, lineno, file, line)


def print_results(result: SimulationResult, stdout: TextIO) -> None:
    print("Results:", file=stdout)
    for label, count in result.counts.display_rows():
        print(f"{label}: [{count}]", file=stdout)


def parse_amplitudes(text: str) -> List[float]:
    try:
        return [float(v) for v in text.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid amplitude list: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-qubit state vector simulator")
    parser.add_argument("--gates", default=None,
                       help="Gate sequence, e.g. 'h0,h1' (default: prompt on stdin)")
    parser.add_argument("--shots", type=int, default=DEFAULT_SHOTS,
                       help=f"Number of sampling trials (default: {DEFAULT_SHOTS})")
    parser.add_argument("--seed", type=int, default=None,
                       help="Random seed for reproducible sampling")
    parser.add_argument("--amplitudes", type=parse_amplitudes, default=None,
                       help="8 comma-separated starting amplitudes (default: ground state)")
    parser.add_argument("--normalization", default="rescale", choices=NORMALIZATION_MODES,
                       help="State normalization mode (default: rescale)")
    parser.add_argument("--leftover", default="drop", choices=LEFTOVER_POLICIES,
                       help="What to do with probability mass below 1 (default: drop)")
    parser.add_argument("--plot", default=None, metavar="PATH",
                       help="Save a bar chart of the counts to PATH")
    parser.add_argument("--verbose", action="store_true",
                       help="Print amplitudes and probabilities")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run the console simulator; returns the process exit code."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SimulationConfig(
            shots=args.shots,
            seed=args.seed,
            initial_amplitudes=args.amplitudes,
            normalization=args.normalization,
            leftover=args.leftover,
        )
    except ValueError as exc:
        parser.error(str(exc))

    for line in BANNER:
        print(line, file=stdout)
    print(PROMPT, file=stdout)

    dots_open = False
    try:
        text = args.gates if args.gates is not None else read_gate_line(stdin)

        print("Calculating the state vector...", file=stdout)
        dots_open = True

        def progress(token: str, applied: bool) -> None:
            stdout.write(".")
            stdout.flush()

        # One short diagnostic per unknown token, even for repeated tokens.
        with warnings.catch_warnings():
            warnings.simplefilter("always", UnknownGateWarning)
            warnings.showwarning = show_gate_warning
            result = run_simulation(text, config=config, on_gate=progress)
        print("", file=stdout)
        dots_open = False
        print(f"Running {config.shots} iterations...", file=stdout)
    except (InputError, DomainError) as exc:
        if dots_open:
            print("", file=stdout)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print_results(result, stdout)
    if args.verbose:
        print_summary(result, file=stdout)

    if args.plot:
        import matplotlib.pyplot as plt
        from .visualization import plot_outcome_counts

        ax = plot_outcome_counts(result.counts, probabilities=result.probabilities,
                                 shots=result.shots)
        ax.figure.savefig(args.plot, dpi=150, bbox_inches="tight")
        plt.close(ax.figure)
        print(f"Saved plot to {args.plot}", file=stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
