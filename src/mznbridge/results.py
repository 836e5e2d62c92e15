"""
Result interpreter for minizinc output artifacts.

Two paths, tried in order:

    1. Structured: the text before the first separator line
       ("----------" or "==========") parses as a JSON object mapping
       decision variable names to values. The solve is SATISFIED and the
       values are written into the matching Variable objects.

    2. Fallback: the first line of the file contains "UNSAT"
       (e.g. "=====UNSATISFIABLE====="). The solve is UNSATISFIABLE and
       no variable is touched.

Anything else is UNKNOWN. A missing or empty file is never an error here;
it falls through both paths and ends up UNKNOWN.
"""

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from mznbridge.model import Variable

logger = logging.getLogger(__name__)

UNSAT_MARKER = "UNSAT"
_SEPARATOR_PREFIXES = ("----------", "==========")


class SolveStatus(Enum):
    """Verdict read from solver output."""
    SATISFIED = "satisfied"
    UNSATISFIABLE = "unsatisfiable"
    UNKNOWN = "unknown"


def _read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except (FileNotFoundError, IsADirectoryError):
        return ""


def parse_solution(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse the first JSON solution in solver output.

    Returns:
        Mapping of name -> value, or None if the text holds no JSON object
    """
    body = []
    for line in text.splitlines():
        if line.strip().startswith(_SEPARATOR_PREFIXES):
            break
        body.append(line)

    candidate = "\n".join(body).strip()
    if not candidate:
        return None
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    return data


def read_first_line(path: str) -> str:
    """Return the first line of a file, or "" if it is missing or empty."""
    text = _read_text(path)
    if not text:
        return ""
    return text.splitlines()[0]


def assign_values(solution: Dict[str, Any], decision: Sequence[Variable]) -> List[str]:
    """
    Write solved values into the matching decision variables.

    Args:
        solution: Mapping of variable name -> solved value
        decision: Decision variables of the model

    Returns:
        Keys of `solution` that matched no variable
    """
    by_name: Dict[str, Variable] = {}
    for var in decision:
        # First variable with a given name wins
        by_name.setdefault(var.name, var)

    unmatched = []
    for name, value in solution.items():
        var = by_name.get(name)
        if var is None:
            unmatched.append(name)
            continue
        var.value = value

    if unmatched:
        logger.debug("Ignoring result keys with no matching variable: %s", ", ".join(unmatched))
    return unmatched


def interpret_output(output_path: str, decision: Sequence[Variable]) -> SolveStatus:
    """
    Read a solver output artifact and bind values on success.

    Args:
        output_path: File written by `minizinc -o`
        decision: Decision variables to assign on SATISFIED

    Returns:
        SolveStatus verdict
    """
    solution = parse_solution(_read_text(output_path))
    if solution is not None:
        assign_values(solution, decision)
        return SolveStatus.SATISFIED

    if UNSAT_MARKER in read_first_line(output_path):
        return SolveStatus.UNSATISFIABLE

    return SolveStatus.UNKNOWN
