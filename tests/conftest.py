"""
Shared fixtures.

`fake_solver` writes a small executable that behaves like minizinc from
the outside: it reads the `-o` argument, writes canned output there,
records its argv, and exits with the requested status.
"""
import json
import stat
import sys

import pytest


FAKE_SOLVER_TEMPLATE = '''#!{python}
import json
import sys

args = sys.argv[1:]
with open({record!r}, "w") as f:
    json.dump(args, f)
with open(args[0]) as f:
    model_text = f.read()
with open({record!r} + ".mzn", "w") as f:
    f.write(model_text)
out = args[args.index("-o") + 1]
if {output!r} is not None:
    with open(out, "w") as f:
        f.write({output!r})
sys.stderr.write({stderr!r})
sys.exit({code})
'''


@pytest.fixture
def fake_solver(tmp_path):
    """Factory: fake_solver(output, code=0, stderr="") -> (path, record_path)."""

    def make(output, code=0, stderr=""):
        script = tmp_path / "fake_minizinc"
        record = tmp_path / "argv.json"
        script.write_text(FAKE_SOLVER_TEMPLATE.format(
            python=sys.executable,
            record=str(record),
            output=output,
            stderr=stderr,
            code=code,
        ))
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script), record

    return make


def read_record(record):
    """Return (argv, model_text) captured by the fake solver."""
    with open(record) as f:
        argv = json.load(f)
    with open(str(record) + ".mzn") as f:
        model_text = f.read()
    return argv, model_text
