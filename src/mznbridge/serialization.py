"""
Serialization helpers for mznbridge models.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Constraints and the objective reference variables by name. Solved values
of decision variables are not stored.

Dict layout:
    parameter:   [{name, type, value}, ...]
    decision:    [{name, type, domain: [lo, hi]}, ...]
    constraints: [{operator, variables: [left, right]}, ...]
    objective:   satisfy | maximize | minimize
    objective_variable: name or null
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from mznbridge.errors import ModelError
from mznbridge.model import (
    Constraint,
    Model,
    Variable,
    VariableKind,
)


def variable_to_dict(v: Variable) -> Dict[str, Any]:
    d: Dict[str, Any] = {"name": v.name, "type": v.type.value}
    if v.kind == VariableKind.DECISION:
        d["domain"] = list(v.domain)
    else:
        d["value"] = v.value
    return d


def variable_from_dict(d: Dict[str, Any], kind: VariableKind) -> Variable:
    return Variable(
        type=d["type"],
        kind=kind,
        value=d.get("value"),
        domain=d.get("domain"),
        name=d["name"],
    )


def constraint_to_dict(c: Constraint) -> Dict[str, Any]:
    return {"operator": c.operator.value, "variables": [v.name for v in c.variables]}


def constraint_from_dict(d: Dict[str, Any], by_name: Dict[str, Variable]) -> Constraint:
    operands: List[Variable] = []
    for name in d.get("variables", []):
        if name not in by_name:
            raise ModelError(f"Constraint references unknown variable {name!r}")
        operands.append(by_name[name])
    return Constraint(operator=d["operator"], variables=operands)


def model_to_dict(m: Model) -> Dict[str, Any]:
    return {
        "parameter": [variable_to_dict(v) for v in m.parameter],
        "decision": [variable_to_dict(v) for v in m.decision],
        "constraints": [constraint_to_dict(c) for c in m.constraints],
        "objective": m.objective.value,
        "objective_variable": m.objective_variable.name if m.objective_variable else None,
    }


def model_from_dict(d: Dict[str, Any]) -> Model:
    if not isinstance(d, dict):
        raise ModelError(f"Model data must be a mapping, got {type(d).__name__}")
    try:
        return _model_from_dict(d)
    except (KeyError, TypeError, AttributeError) as e:
        raise ModelError(f"Malformed model data: {e!r}") from e


def _model_from_dict(d: Dict[str, Any]) -> Model:
    parameter = [variable_from_dict(v, VariableKind.PARAMETER) for v in d.get("parameter") or []]
    decision = [variable_from_dict(v, VariableKind.DECISION) for v in d.get("decision") or []]

    # Model() reports duplicates; here the last definition of a name would win
    by_name = {v.name: v for v in parameter + decision}
    constraints = [constraint_from_dict(c, by_name) for c in d.get("constraints") or []]

    objective_name = d.get("objective_variable")
    if objective_name is not None and objective_name not in by_name:
        raise ModelError(f"Objective references unknown variable {objective_name!r}")

    return Model(
        decision=decision,
        parameter=parameter,
        constraints=constraints,
        objective=d.get("objective", "satisfy"),
        objective_variable=by_name.get(objective_name) if objective_name else None,
    )


def model_to_json(m: Model) -> str:
    return json.dumps(model_to_dict(m), sort_keys=True)


def model_from_json(s: str) -> Model:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise ModelError(f"Invalid JSON model: {e}") from e
    return model_from_dict(d)


def model_to_yaml(m: Model) -> str:
    return yaml.safe_dump(model_to_dict(m), sort_keys=False)


def model_from_yaml(s: str) -> Model:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ModelError(f"Invalid YAML model: {e}") from e
    return model_from_dict(d)


def load_model_file(path: str) -> Model:
    """Load a model from a .json, .yaml or .yml file."""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    if path.endswith(".json"):
        return model_from_json(text)
    return model_from_yaml(text)
