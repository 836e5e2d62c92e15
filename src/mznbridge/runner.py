"""
Process invoker for the minizinc executable.

Builds the command line and runs it synchronously:

    <minizinc> tmp.mzn -o tmp.out --solver <name> --output-mode json

The model and output file names are fixed, but they are resolved inside a
working directory supplied by the caller. `solver_workspace()` gives each
call its own temporary directory so repeated or concurrent solves never
share files.
"""

import logging
import os
import subprocess
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional

from mznbridge.errors import SolverNotFoundError, SolverProcessError

logger = logging.getLogger(__name__)

MODEL_FILENAME = "tmp.mzn"
OUTPUT_FILENAME = "tmp.out"


@dataclass
class InvocationResult:
    """Outcome of one solver process run."""
    returncode: int
    output_path: str
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def build_command(executable: str, model_file: str, output_file: str, solver_name: str) -> List[str]:
    return [
        executable,
        model_file,
        "-o", output_file,
        "--solver", solver_name,
        "--output-mode", "json",
    ]


@contextmanager
def solver_workspace(prefix: str = "mznbridge-") -> Iterator[str]:
    """Create a unique temporary working directory, removed on exit."""
    with tempfile.TemporaryDirectory(prefix=prefix) as workdir:
        logger.debug("Created solver workspace %s", workdir)
        yield workdir


def invoke(
    executable: str,
    solver_name: str,
    workdir: str,
    timeout: Optional[float] = None,
) -> InvocationResult:
    """
    Run minizinc on `workdir/tmp.mzn`, writing `workdir/tmp.out`.

    Args:
        executable: Path to the minizinc executable
        solver_name: Backend passed to --solver
        workdir: Directory holding the model file
        timeout: Seconds before the process is killed (None blocks forever)

    Returns:
        InvocationResult with the exit status and output artifact path.
        A non-zero exit status is reported, not raised.

    Raises:
        SolverNotFoundError: If the executable cannot be started
        SolverProcessError: If the timeout expires
    """
    model_path = os.path.join(workdir, MODEL_FILENAME)
    output_path = os.path.join(workdir, OUTPUT_FILENAME)
    cmd = build_command(executable, model_path, output_path, solver_name)
    logger.debug("Running: %s", " ".join(cmd))

    try:
        proc = subprocess.run(
            cmd,
            cwd=workdir,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise SolverNotFoundError(f"MiniZinc executable not found: {executable}") from e
    except PermissionError as e:
        raise SolverNotFoundError(f"MiniZinc executable is not runnable: {executable}") from e
    except subprocess.TimeoutExpired as e:
        raise SolverProcessError(
            f"Solver {solver_name} did not finish within {timeout} seconds",
            returncode=None,
        ) from e

    if proc.returncode != 0:
        logger.warning("Solver %s exited with status %d", solver_name, proc.returncode)

    return InvocationResult(
        returncode=proc.returncode,
        output_path=output_path,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )
