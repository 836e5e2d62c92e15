"""
mznbridge: in-memory constraint models solved by an external MiniZinc.

Pipeline:
    Model objects -> MiniZinc text -> minizinc process -> values
    written back into the decision Variable objects.

ARCHITECTURAL GUARANTEE:
------------------------
    - model.py knows nothing about MiniZinc syntax
    - backends/ only produce text
    - runner.py only runs processes
    - results.py is the only code that mutates Variable values

The caller-facing surface is `evaluate(model, solver, config)` and the
pure `serialize(...)` / `render_model(...)` generators.
"""

from mznbridge.backends import render_model, serialize
from mznbridge.config import SolverConfig
from mznbridge.evaluation import evaluate, format_variables
from mznbridge.model import Constraint, Model, Objective, Solver, Variable

__version__ = "0.1.0"

__all__ = [
    "Constraint",
    "Model",
    "Objective",
    "Solver",
    "SolverConfig",
    "Variable",
    "evaluate",
    "format_variables",
    "render_model",
    "serialize",
]
