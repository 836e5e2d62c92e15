"""
Tests for the MiniZinc source generator.

Emission order is a contract with the minizinc text format, so these
tests pin exact lines, not just substrings.
"""

import pytest
from mznbridge.model import Variable, Constraint, Model
from mznbridge.model import VariableType
from mznbridge.backends.minizinc_generator import (
    format_value,
    serialize,
    render_model,
    save_model_file,
)


def _decision(name, lo=0, hi=10, var_type="int"):
    return Variable(type=var_type, kind="decision", domain=(lo, hi), name=name)


class TestSerializeSections:
    """Test the three sections and their order."""

    def test_parameter_line(self):
        nc = Variable(type="int", kind="parameter", value=3, name="nc")
        assert serialize([nc], [], []) == "int: nc = 3;\n"

    def test_decision_line(self):
        x = _decision("x", 1, 3)
        assert serialize([], [x], []) == "var 1..3: x;\n"

    def test_constraint_line_keeps_operand_order(self):
        x = _decision("x")
        y = _decision("y")
        text = serialize([], [x, y], [Constraint("<", [y, x])])
        assert text.splitlines()[-1] == "constraint y < x;"

    def test_sections_in_fixed_order(self):
        """Parameters, then decisions, then constraints."""
        nc = Variable(type="int", kind="parameter", value=3, name="nc")
        x = _decision("x", 1, 3)
        y = _decision("y", 1, 3)
        text = serialize([nc], [x, y], [Constraint("!=", [x, y])])
        assert text == (
            "int: nc = 3;\n"
            "var 1..3: x;\n"
            "var 1..3: y;\n"
            "constraint x != y;\n"
        )

    def test_input_order_preserved(self):
        """Lines within a section follow list order, not name order."""
        names = ["zeta", "alpha", "mid"]
        decision = [_decision(n) for n in names]
        lines = serialize([], decision, []).splitlines()
        assert [line.split(": ")[1].rstrip(";") for line in lines] == names

    def test_deterministic(self):
        x = _decision("x")
        y = _decision("y")
        constraints = [Constraint(">=", [x, y])]
        assert serialize([], [x, y], constraints) == serialize([], [x, y], constraints)

    def test_empty_sections(self):
        """Empty or None lists emit nothing."""
        x = _decision("x")
        assert serialize([], [x], []) == "var 0..10: x;\n"
        assert serialize(None, [x], None) == "var 0..10: x;\n"
        assert serialize([], [], []) == ""


class TestValueFormatting:
    """Test literal rendering."""

    @pytest.mark.parametrize("lo,hi,expected", [
        (0, 10, "var 0..10: x;"),
        (-5, 5, "var -5..5: x;"),
        (1000000007, 1000000009, "var 1000000007..1000000009: x;"),
    ])
    def test_int_domain_exact(self, lo, hi, expected):
        assert serialize([], [_decision("x", lo, hi)], []) == expected + "\n"

    def test_float_domain_not_rounded(self):
        x = _decision("x", 0.1, 2.675, var_type="float")
        assert serialize([], [x], []) == "var 0.1..2.675: x;\n"

    def test_bool_parameter(self):
        flag = Variable(type="bool", kind="parameter", value=True, name="flag")
        assert serialize([flag], [], []) == "bool: flag = true;\n"

    def test_string_parameter_quoted(self):
        label = Variable(type="string", kind="parameter", value='say "hi"', name="label")
        assert serialize([label], [], []) == 'string: label = "say \\"hi\\"";\n'

    def test_non_ascii_string_kept_literal(self):
        """Non-ASCII text is written as-is, not as \\u escapes."""
        assert format_value("café", VariableType.STRING) == '"café"'

    def test_float_parameter(self):
        assert format_value(0.5, VariableType.FLOAT) == "0.5"
        assert format_value(False, VariableType.BOOL) == "false"


class TestRenderModel:
    """Test full program generation with the solve item."""

    def test_satisfy(self):
        x = _decision("x")
        code = render_model(Model(decision=[x]))
        assert code == "var 0..10: x;\nsolve satisfy;\n"

    def test_maximize(self):
        x = _decision("x")
        code = render_model(Model(decision=[x], objective="maximize", objective_variable=x))
        assert code.splitlines()[-1] == "solve maximize x;"

    def test_minimize(self):
        x = _decision("x")
        code = render_model(Model(decision=[x], objective="minimize", objective_variable=x))
        assert code.splitlines()[-1] == "solve minimize x;"

    def test_save_model_file(self, tmp_path):
        x = _decision("x")
        path = tmp_path / "model.mzn"
        save_model_file(Model(decision=[x]), str(path))
        assert path.read_text() == "var 0..10: x;\nsolve satisfy;\n"
