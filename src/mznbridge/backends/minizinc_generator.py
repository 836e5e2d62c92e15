"""
MiniZinc source generator.

Converts model objects into MiniZinc text. Emission order is fixed:

    1. Parameter declarations      int: nc = 3;
    2. Decision variable ranges    var 1..3: wa;
    3. Constraints                 constraint wa != nt;

`serialize` emits exactly those three sections. `render_model` appends the
solve item so the result can be handed to the minizinc executable.
"""

import json
import logging
from typing import Any, List, Optional, Sequence

from mznbridge.model import (
    Constraint,
    Model,
    Objective,
    Variable,
    VariableType,
)

logger = logging.getLogger(__name__)


def format_value(value: Any, var_type: VariableType) -> str:
    """
    Render a scalar as a MiniZinc literal.

    Numbers are written without rounding (floats use repr, which is the
    shortest text that round-trips). Bools are lowercase. Strings are
    double-quoted.
    """
    if var_type == VariableType.BOOL or isinstance(value, bool):
        return "true" if value else "false"
    if var_type == VariableType.STRING:
        return json.dumps(str(value), ensure_ascii=False)
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _parameter_line(var: Variable) -> str:
    return f"{var.type.value}: {var.name} = {format_value(var.value, var.type)};"


def _decision_line(var: Variable) -> str:
    lo, hi = var.domain
    return f"var {format_value(lo, var.type)}..{format_value(hi, var.type)}: {var.name};"


def _constraint_line(constr: Constraint) -> str:
    return f"constraint {constr.left.name} {constr.operator.value} {constr.right.name};"


def serialize(
    parameter: Optional[Sequence[Variable]],
    decision: Optional[Sequence[Variable]],
    constraints: Optional[Sequence[Constraint]],
) -> str:
    """
    Generate MiniZinc declarations and constraints.

    Args:
        parameter: Parameter variables (None or empty emits nothing)
        decision: Decision variables (None or empty emits nothing)
        constraints: Constraints (None or empty emits nothing)

    Returns:
        Newline-terminated MiniZinc text, no solve item

    IMPORTANT:
        Names are emitted as-is. A name that collides with a MiniZinc
        keyword produces code the solver will reject.
    """
    lines: List[str] = []
    lines.extend(_parameter_line(v) for v in parameter or [])
    lines.extend(_decision_line(v) for v in decision or [])
    lines.extend(_constraint_line(c) for c in constraints or [])
    return "".join(f"{line}\n" for line in lines)


def solve_item(model: Model) -> str:
    """Return the MiniZinc solve item for the model's objective."""
    if model.objective == Objective.SATISFY:
        return "solve satisfy;"
    return f"solve {model.objective.value} {model.objective_variable.name};"


def render_model(model: Model) -> str:
    """
    Generate a complete MiniZinc program for a model.

    Args:
        model: Model to translate

    Returns:
        serialize() output followed by the solve item
    """
    code = serialize(model.parameter, model.decision, model.constraints)
    code += solve_item(model) + "\n"
    logger.debug("Generated MiniZinc code:\n%s", code)
    return code


def save_model_file(model: Model, filename: str) -> None:
    """
    Generate MiniZinc and save to file.

    Args:
        model: Model to translate
        filename: Output file path (.mzn extension recommended)
    """
    code = render_model(model)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(code)


__all__ = ["format_value", "serialize", "solve_item", "render_model", "save_model_file"]
