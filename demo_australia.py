#!/usr/bin/env python3
"""
Demo: Colour the map of Australia with MiniZinc.

Prints the generated MiniZinc code, then solves it if a minizinc
executable is configured (MINIZINC_PATH, or minizinc on PATH).
"""

from mznbridge.backends import render_model
from mznbridge.config import SolverConfig
from mznbridge.errors import ConfigurationError
from mznbridge.evaluation import evaluate, format_variables
from mznbridge.examples import build_australia_model
from mznbridge.logging_config import setup_logging
from mznbridge.model import Solver


def main():
    setup_logging()
    model = build_australia_model(colours=3)

    print("=" * 80)
    print("AUSTRALIA MAP COLOURING")
    print("=" * 80)
    print(render_model(model))

    config = SolverConfig.from_env_or_file()
    try:
        satisfiable = evaluate(model, Solver(name="gecode"), config)
    except ConfigurationError as e:
        print(f"Skipping solve: {e}")
        return

    print("-" * 80)
    if satisfiable:
        print("SAT")
        print(format_variables(model.decision))
    else:
        print("UNSAT")
    print("=" * 80)


if __name__ == "__main__":
    main()
