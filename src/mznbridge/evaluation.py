"""
Model evaluation: model -> MiniZinc text -> minizinc process -> values.

This is the caller-facing entry point. It modifies decision Variable
objects, setting `value` on each one the solver reports, and returns
True/False depending on whether MiniZinc found a satisfying solution.

Outcomes that are neither SAT nor UNSAT raise instead of returning a
bool, so "unsatisfiable" and "solver failed" are never confused.
"""

import logging
import os
from typing import Optional, Sequence

from mznbridge.backends import save_model_file
from mznbridge.config import SolverConfig
from mznbridge.errors import InconclusiveResultError, ModelWriteError, SolverProcessError
from mznbridge.model import Model, Solver, Variable
from mznbridge.results import SolveStatus, interpret_output, read_first_line
from mznbridge.runner import MODEL_FILENAME, invoke, solver_workspace

logger = logging.getLogger(__name__)


def evaluate(model: Model, solver: Solver, config: Optional[SolverConfig] = None) -> bool:
    """
    Solve a model with an external minizinc executable.

    Args:
        model: Model to solve
        solver: Backend descriptor (e.g. Solver(name="gecode"))
        config: Executable location; resolved from the environment if None

    Returns:
        True if the model is satisfiable (decision values are assigned),
        False if the solver reported it unsatisfiable

    Raises:
        ConfigurationError: No executable configured (nothing is run)
        ModelWriteError: The .mzn file could not be written
        SolverNotFoundError: The executable could not be started
        SolverProcessError: Non-zero exit status or timeout
        InconclusiveResultError: Output was neither a solution nor UNSAT

    Example:
        x = Variable(type="int", kind="decision", domain=(0, 10), name="x")
        y = Variable(type="int", kind="decision", domain=(0, 5), name="y")
        model = Model(decision=[x, y], constraints=[Constraint("<", [x, y])])
        evaluate(model, Solver(name="gecode"), SolverConfig(executable="minizinc"))
    """
    if config is None:
        config = SolverConfig.from_env_or_file()
    executable = config.require_executable()

    with solver_workspace() as workdir:
        model_path = os.path.join(workdir, MODEL_FILENAME)
        try:
            save_model_file(model, model_path)
        except OSError as e:
            raise ModelWriteError(f"Cannot write MiniZinc code to {model_path}: {e}") from e

        result = invoke(executable, solver.name, workdir, timeout=config.timeout)
        if not result.ok:
            raise SolverProcessError(
                f"Solver {solver.name} exited with status {result.returncode}: {result.stderr.strip()}",
                returncode=result.returncode,
                stderr=result.stderr,
            )

        status = interpret_output(result.output_path, model.decision)
        if status == SolveStatus.UNKNOWN:
            first_line = read_first_line(result.output_path)
            logger.warning("Inconclusive solver output: %r", first_line)
            raise InconclusiveResultError(
                f"Solver {solver.name} produced neither a solution nor UNSAT",
                first_line=first_line,
            )

    logger.info("Solver %s: %s", solver.name, status.value)
    return status == SolveStatus.SATISFIED


def format_variables(variables: Sequence[Variable]) -> str:
    """Render `name = value` lines for a list of variables."""
    return "\n".join(f"{v.name} = {v.value}" for v in variables)
