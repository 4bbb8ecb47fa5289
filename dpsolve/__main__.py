"""
CLI entry point. Run as: python -m dpsolve [FILE ...]

Reads DIMACS CNF from each FILE (stdin if none) and prints true
(satisfiable) or false (unsatisfiable).
"""

import argparse
import json
import sys

from .core.state import Status
from .core.engine import run_dp
from .dimacs import DimacsError, parse_dimacs, read_dimacs
from .inference.select import HEURISTICS, get_order_fn
from .visualization import print_state, print_history


def main(argv=None):
    parser = argparse.ArgumentParser(description="Davis-Putnam SAT solver")
    parser.add_argument("files", nargs="*", help="DIMACS CNF files (default: stdin)")
    parser.add_argument(
        "--heuristic",
        choices=list(HEURISTICS.keys()),
        default="max_occurrence",
        help="Variable elimination order",
    )
    parser.add_argument("--max-rounds", type=int, default=None,
                        help="Give up after this many rounds")
    parser.add_argument("--trace", action="store_true", help="Print every round")
    parser.add_argument("--json",  action="store_true", help="One JSON report per input")
    args = parser.parse_args(argv)

    order_fn = get_order_fn(args.heuristic)
    sources = args.files or ["-"]
    exit_code = 0

    for path in sources:
        try:
            if path == "-":
                problem = parse_dimacs(sys.stdin.read())
            else:
                problem = read_dimacs(path)
        except (DimacsError, OSError) as e:
            print(f"{path}: {e}", file=sys.stderr)
            return 2

        state = problem.to_state()
        if args.trace:
            print_state(state)
        try:
            state = run_dp(state, max_rounds=args.max_rounds,
                           order_fn=order_fn, verbose=args.trace)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            return 130

        if state.status is Status.SOLVING:
            result = "unknown"
            exit_code = 1
        else:
            result = "true" if state.status is Status.SAT else "false"

        if args.trace:
            print_state(state)
            print_history(state)

        if args.json:
            report = state.to_dict()
            print(json.dumps({
                "file": path,
                "result": result,
                "rounds": state.round,
                "halt_reason": state.halt_reason,
                "history": report["history"],
            }))
        elif len(sources) > 1:
            print(f"{path}: {result}")
        else:
            print(result)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
