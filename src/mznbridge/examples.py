"""
Example model builder: map colouring of the Australian states.

Seven states, `nc` colours, and a `!=` constraint between every pair of
neighbouring states. The classic MiniZinc tutorial model.
"""
from typing import List, Tuple

from mznbridge.model import Constraint, Model, Objective, Variable


AUSTRALIA_STATES = ["wa", "nt", "sa", "q", "nsw", "v", "t"]

AUSTRALIA_BORDERS: List[Tuple[str, str]] = [
    ("wa", "nt"),
    ("wa", "sa"),
    ("nt", "sa"),
    ("nt", "q"),
    ("sa", "q"),
    ("sa", "nsw"),
    ("sa", "v"),
    ("q", "nsw"),
    ("nsw", "v"),
]


def build_australia_model(colours: int = 3) -> Model:
    nc = Variable(type="int", kind="parameter", value=colours, name="nc")

    # Domain is written literally; the declaration does not reference nc
    states = {
        name: Variable(type="int", kind="decision", domain=(1, colours), name=name)
        for name in AUSTRALIA_STATES
    }

    constraints = [
        Constraint(operator="!=", variables=[states[a], states[b]])
        for a, b in AUSTRALIA_BORDERS
    ]

    return Model(
        decision=[states[name] for name in AUSTRALIA_STATES],
        parameter=[nc],
        constraints=constraints,
        objective=Objective.SATISFY,
    )
