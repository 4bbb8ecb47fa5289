"""
dpsolve: a Davis-Putnam SAT solver.

Decides satisfiability of a CNF formula by eliminating variables with
resolution rather than by branching, interleaved with tautology
removal, unit propagation and pure-literal elimination.

Usage:
    python -m dpsolve problem.cnf
    python -m dpsolve --trace --heuristic min_resolvents a.cnf b.cnf
    cat problem.cnf | python -m dpsolve

    >>> from dpsolve import solve
    >>> solve([[1, 2], [-1], [-2]])
    False
"""

from .core.state import Clause, Status, DPState
from .core.engine import dp_step, run_dp, solve, RoundLimitExceeded
from .inference.simplify import remove_tautologies, propagate_units, eliminate_pure_literals
from .inference.resolve import Outcome, resolve, eliminate
from .inference.select import (
    HEURISTICS, occurrence_counts,
    max_occurrence_order, min_occurrence_order, min_resolvent_order,
)
from .dimacs import DimacsError, DimacsProblem, parse_dimacs, read_dimacs

__all__ = [
    "Clause", "Status", "DPState",
    "dp_step", "run_dp", "solve", "RoundLimitExceeded",
    "remove_tautologies", "propagate_units", "eliminate_pure_literals",
    "Outcome", "resolve", "eliminate",
    "HEURISTICS", "occurrence_counts",
    "max_occurrence_order", "min_occurrence_order", "min_resolvent_order",
    "DimacsError", "DimacsProblem", "parse_dimacs", "read_dimacs",
]
