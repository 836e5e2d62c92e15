"""
Command line entry point.

    mznbridge model.yaml --solver gecode
    mznbridge model.yaml --emit

Exit status: 0 satisfiable (or --emit), 1 unsatisfiable, 2 error.
"""
import argparse
import logging
import sys
from typing import List, Optional

from mznbridge.backends import render_model
from mznbridge.config import SolverConfig
from mznbridge.errors import MznBridgeError
from mznbridge.evaluation import evaluate, format_variables
from mznbridge.logging_config import setup_logging
from mznbridge.model import Solver
from mznbridge.serialization import load_model_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Solve a YAML/JSON model with MiniZinc')
    parser.add_argument('model', help='Path to model file (.yaml, .yml or .json)')
    parser.add_argument('--solver', default='gecode', help='MiniZinc solver id (default: gecode)')
    parser.add_argument('--minizinc', help='Path to the minizinc executable')
    parser.add_argument('--timeout', type=float, help='Seconds to wait for the solver')
    parser.add_argument('--emit', action='store_true', help='Print the generated MiniZinc code and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        model = load_model_file(args.model)
        if args.emit:
            print(render_model(model), end='')
            return 0

        if args.minizinc:
            config = SolverConfig(executable=args.minizinc, timeout=args.timeout)
        else:
            config = SolverConfig.from_env_or_file()
            if args.timeout is not None:
                config.timeout = args.timeout

        satisfiable = evaluate(model, Solver(name=args.solver), config)
    except (MznBridgeError, OSError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 2

    if not satisfiable:
        print('UNSAT')
        return 1

    print('SAT')
    print(format_variables(model.decision))
    return 0


if __name__ == '__main__':
    sys.exit(main())
