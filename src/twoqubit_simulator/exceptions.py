"""
Error Types
===========

Fatal errors derive from ``SimulatorError``. Unknown gate tokens are not
errors: they are reported with ``UnknownGateWarning`` and the run goes on.
"""


class SimulatorError(Exception):
    """Base class for all fatal simulator errors."""


class DomainError(SimulatorError, ValueError):
    """A numerical operation was asked to work outside its domain."""


class DegenerateStateError(DomainError):
    """The state (or distribution) has zero total weight and cannot be rescaled."""


class StateVectorError(SimulatorError, ValueError):
    """Amplitudes do not form a valid 8-entry finite real vector."""


class InputError(SimulatorError):
    """The gate sequence could not be read from the console."""


class UnknownGateWarning(UserWarning):
    """A gate token is not in the gate set; it was skipped."""
