"""
Exception hierarchy for mznbridge.

Configuration and I/O problems are hard failures raised before the solver
runs. Solver outcomes that cannot be read as SAT or UNSAT get their own
error kinds so callers can tell them apart from a plain `False`.
"""

from typing import Optional


class MznBridgeError(Exception):
    """Base class for all mznbridge errors."""
    pass


class ModelError(MznBridgeError, ValueError):
    """Raised when a Variable, Constraint or Model is malformed."""
    pass


class DuplicateNameError(ModelError):
    """Raised when two variables in one model share a name."""
    pass


class ConfigurationError(MznBridgeError):
    """Raised when the MiniZinc executable path is not configured."""
    pass


class SolverNotFoundError(ConfigurationError):
    """Raised when the configured executable cannot be started."""
    pass


class ModelWriteError(MznBridgeError):
    """Raised when the generated MiniZinc file cannot be written."""
    pass


class SolverProcessError(MznBridgeError):
    """
    Raised when the solver process fails (non-zero exit or timeout).

    Properties:
        returncode: Exit status, or None if the process timed out
        stderr: Captured standard error of the solver
    """

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class InconclusiveResultError(MznBridgeError):
    """
    Raised when solver output is neither a JSON solution nor an UNSAT marker.

    Properties:
        first_line: First line of the output artifact ("" if it was empty)
    """

    def __init__(self, message: str, first_line: str = ""):
        super().__init__(message)
        self.first_line = first_line
