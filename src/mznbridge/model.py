"""
Core Model Objects

Defines the in-memory objects that are translated into MiniZinc:
    - Variables (parameters and decision variables)
    - Constraints (binary relations between two variables)
    - Models (root container with an objective)
    - Solvers (backend descriptor passed to the minizinc executable)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about MiniZinc syntax (that lives in backends)
        - Validate themselves at construction time only
        - Are shared by reference; the Model owns none of them
        - Are mutated in one place only: the result interpreter writes
          decision variable values after a successful solve
"""

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .errors import DuplicateNameError, ModelError


_name_counter = itertools.count(1)


class VariableKind(Enum):
    """Role of a variable in a model."""
    PARAMETER = "parameter"  # Fixed, caller-supplied input
    DECISION = "decision"    # Unknown determined by the solver


class VariableType(Enum):
    """Scalar types supported for variables."""
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"


class RelationalOperator(Enum):
    """
    Binary relational operators usable in a Constraint.

    Values are the literal MiniZinc spelling.
    """
    EQUALS = "="
    NOT_EQUALS = "!="
    LESS_THAN = "<"
    LESS_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_EQUAL = ">="


class Objective(Enum):
    """Solve goal of a model."""
    SATISFY = "satisfy"
    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"


def _coerce(enum_cls, value, what: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ModelError(f"Unknown {what} {value!r} (expected one of: {allowed})")


@dataclass(eq=False)
class Variable:
    """
    A typed model variable.

    Properties:
        type:
            Scalar type (VariableType or its string value, e.g. "int")

        kind:
            VariableKind.PARAMETER or VariableKind.DECISION

        value:
            For parameters: the fixed input value (required).
            For decision variables: must be None at construction. Set by
            the result interpreter once a solve succeeds.

        domain:
            For decision variables: inclusive range (lo, hi).
            Ignored for parameters.

        name:
            Identifier used in the generated MiniZinc code. Generated as
            "var<N>" when omitted. Must be unique within a Model.

    Example:
        nc = Variable(type="int", kind="parameter", value=3, name="nc")
        wa = Variable(type="int", kind="decision", domain=(1, 3), name="wa")

    IMPORTANT:
        Variables compare by identity. Two variables with the same name
        are still different objects; a Model rejects that situation.
    """

    type: Union[VariableType, str]
    kind: Union[VariableKind, str]
    value: Any = None
    domain: Optional[Tuple[Any, Any]] = None
    name: Optional[str] = None

    def __post_init__(self):
        self.type = _coerce(VariableType, self.type, "variable type")
        self.kind = _coerce(VariableKind, self.kind, "variable kind")

        if self.name is None:
            self.name = f"var{next(_name_counter)}"
        elif not isinstance(self.name, str) or not self.name:
            raise ModelError(f"Variable name must be a non-empty string, got {self.name!r}")

        if self.kind == VariableKind.PARAMETER:
            if self.value is None:
                raise ModelError(f"Parameter {self.name} requires a value")
        else:
            if self.value is not None:
                raise ModelError(f"Decision variable {self.name} cannot be given a value before solving")
            if not isinstance(self.domain, (list, tuple)) or len(self.domain) != 2:
                raise ModelError(
                    f"Decision variable {self.name} requires a two-element domain, got {self.domain!r}"
                )
            lo, hi = self.domain
            try:
                empty = lo > hi
            except TypeError:
                raise ModelError(f"Decision variable {self.name} has incomparable bounds {lo!r}..{hi!r}")
            if empty:
                raise ModelError(f"Decision variable {self.name} has an empty domain {lo}..{hi}")
            self.domain = (lo, hi)

    @property
    def is_decision(self) -> bool:
        return self.kind == VariableKind.DECISION

    def get_name(self) -> str:
        return self.name


@dataclass(eq=False)
class Constraint:
    """
    A binary relation between two variables.

    Properties:
        operator:
            RelationalOperator (or its MiniZinc spelling, e.g. "!=")

        variables:
            Exactly two Variables. Order is preserved in the generated
            code: left operand first.

    Example:
        Constraint(operator="!=", variables=[wa, nt])
        emits "constraint wa != nt;"

    IMPORTANT:
        Operand types are not checked for comparability.
        The solver rejects ill-typed constraints.
    """

    operator: Union[RelationalOperator, str]
    variables: List[Variable] = field(default_factory=list)

    def __post_init__(self):
        self.operator = _coerce(RelationalOperator, self.operator, "constraint operator")
        self.variables = list(self.variables)
        if len(self.variables) != 2:
            raise ModelError(
                f"Constraint {self.operator.value} takes exactly two variables, got {len(self.variables)}"
            )
        for var in self.variables:
            if not isinstance(var, Variable):
                raise ModelError(f"Constraint operands must be Variable objects, got {type(var).__name__}")

    @property
    def left(self) -> Variable:
        return self.variables[0]

    @property
    def right(self) -> Variable:
        return self.variables[1]


@dataclass(eq=False)
class Model:
    """
    Root container for a constraint model.

    Everything written to the .mzn file MUST be derivable from this
    object alone.

    Properties:
        decision:
            Decision variables, in emission order

        parameter:
            Parameter variables, in emission order

        constraints:
            Binary constraints, in emission order

        objective:
            Objective enum (or "satisfy" / "maximize" / "minimize")

        objective_variable:
            Variable to optimize. Required for maximize/minimize,
            must be None for satisfy.

    INVARIANTS (checked at construction):
        - Every variable in `decision` is a decision variable
        - Every variable in `parameter` is a parameter
        - Variable names are unique across the whole model
        - Constraint operands belong to the model
        - Optimization objectives name a variable of the model
    """

    decision: List[Variable] = field(default_factory=list)
    parameter: List[Variable] = field(default_factory=list)
    constraints: List[Constraint] = field(default_factory=list)
    objective: Union[Objective, str] = Objective.SATISFY
    objective_variable: Optional[Variable] = None

    def __post_init__(self):
        self.decision = list(self.decision or [])
        self.parameter = list(self.parameter or [])
        self.constraints = list(self.constraints or [])
        self.objective = _coerce(Objective, self.objective, "objective")

        for var in self.decision:
            if var.kind != VariableKind.DECISION:
                raise ModelError(f"{var.name} is listed as a decision variable but is a {var.kind.value}")
        for var in self.parameter:
            if var.kind != VariableKind.PARAMETER:
                raise ModelError(f"{var.name} is listed as a parameter but is a {var.kind.value}")

        by_name: Dict[str, Variable] = {}
        for var in self.variables:
            if var.name in by_name:
                raise DuplicateNameError(f"Variable name {var.name!r} is used more than once")
            by_name[var.name] = var

        members = {id(v) for v in self.variables}
        for constr in self.constraints:
            for var in constr.variables:
                if id(var) not in members:
                    raise ModelError(
                        f"Constraint operand {var.name} is not part of the model"
                    )

        if self.objective == Objective.SATISFY:
            if self.objective_variable is not None:
                raise ModelError("A satisfy objective does not take an objective variable")
        else:
            if self.objective_variable is None:
                raise ModelError(f"Objective {self.objective.value} requires an objective variable")
            if id(self.objective_variable) not in members:
                raise ModelError(
                    f"Objective variable {self.objective_variable.name} is not part of the model"
                )

    @property
    def variables(self) -> List[Variable]:
        """All variables: parameters first, then decision variables."""
        return self.parameter + self.decision

    def get_variable(self, name: str) -> Optional[Variable]:
        """
        Retrieve a variable by name.

        Args:
            name: Variable name

        Returns:
            Variable object or None if not found
        """
        for var in self.variables:
            if var.name == name:
                return var
        return None


@dataclass
class Solver:
    """
    Describes the MiniZinc backend to run.

    Properties:
        name:
            Solver id understood by `minizinc --solver` (e.g. "gecode",
            "chuffed", "cbc")

        config:
            Reserved for backend options. Not passed to the solver yet.
    """

    name: str
    config: Dict[str, Any] = field(default_factory=dict)
