"""
DIMACS CNF input.

    c a comment
    p cnf <atoms> <clauses>
    1 -2 0
    2 3 0

Clauses are whitespace-separated literals terminated by 0; a clause
may span lines and a line may hold several clauses. Comment lines may
appear anywhere. A line starting with % ends the input (SATLIB files
carry one).
"""

from dataclasses import dataclass, field

from .core.state import Clause, DPState


class DimacsError(ValueError):
    """Malformed DIMACS input."""

    def __init__(self, message: str, line: int = 0):
        self.line = line
        super().__init__(f"line {line}: {message}" if line else message)


@dataclass
class DimacsProblem:
    atom_count: int
    clause_count: int
    clauses: list = field(default_factory=list)
    literals: set = field(default_factory=set)

    def to_state(self) -> DPState:
        return DPState.from_clauses(self.clauses)


def _parse_problem_line(line: str, lineno: int):
    parts = line.split()
    if len(parts) != 4 or parts[1] != "cnf":
        raise DimacsError(f"expected 'p cnf <atoms> <clauses>', got {line.strip()!r}", lineno)
    try:
        atoms, clauses = int(parts[2]), int(parts[3])
    except ValueError:
        raise DimacsError(f"non-integer counts in problem line {line.strip()!r}", lineno)
    if atoms < 0 or clauses < 0:
        raise DimacsError("negative counts in problem line", lineno)
    return atoms, clauses


def parse_dimacs(text: str) -> DimacsProblem:
    """Parse DIMACS CNF text. Raises DimacsError on malformed input."""
    problem = None
    current = []
    lineno = 0

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("c"):
            continue
        if stripped.startswith("%"):
            break
        if stripped.startswith("p"):
            if problem is not None:
                raise DimacsError("duplicate problem line", lineno)
            problem = DimacsProblem(*_parse_problem_line(stripped, lineno))
            continue
        if problem is None:
            raise DimacsError("clause before problem line", lineno)

        for token in stripped.split():
            try:
                lit = int(token)
            except ValueError:
                raise DimacsError(f"not a literal: {token!r}", lineno)
            if lit == 0:
                if len(problem.clauses) >= problem.clause_count:
                    raise DimacsError(
                        f"more than the declared {problem.clause_count} clauses", lineno)
                problem.clauses.append(Clause(frozenset(current)))
                current = []
                continue
            if abs(lit) > problem.atom_count:
                raise DimacsError(
                    f"atom {abs(lit)} exceeds declared count {problem.atom_count}", lineno)
            current.append(lit)
            problem.literals.add(lit)

    if problem is None:
        raise DimacsError("missing problem line")
    if current:
        raise DimacsError("last clause is not terminated by 0", lineno)
    if len(problem.clauses) != problem.clause_count:
        raise DimacsError(
            f"declared {problem.clause_count} clauses, found {len(problem.clauses)}", lineno)
    return problem


def read_dimacs(path: str) -> DimacsProblem:
    with open(path) as f:
        return parse_dimacs(f.read())
