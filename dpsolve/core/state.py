"""
Core data structures: Clause, Status, DPState.

These are the atoms of the whole system. Nothing in here depends on
the simplification rules, resolution, or variable selection.

Literals are nonzero ints, DIMACS style:
    3   ->  x3
    -3  -> ~x3
    The atom of a literal is abs(literal). 0 is never a literal.

A Clause is a frozenset of literals (disjunction).
The empty clause [] is a contradiction -> formula unsatisfiable.
A formula is a set of Clauses (conjunction).
"""

from dataclasses import dataclass, field
from enum import Enum


def literal_key(lit: int):
    """Order literals by atom, negative before positive."""
    return (abs(lit), lit > 0)


@dataclass
class Clause:
    """
    A disjunction of literals.

    Equality and hashing only look at the literals, so two clauses
    derived along different routes are the same clause.
    """
    literals: frozenset
    source: tuple = ()
    step: int = 0

    @classmethod
    def of(cls, *literals, source: tuple = (), step: int = 0) -> 'Clause':
        return cls(frozenset(literals), source, step)

    @property
    def name(self):
        return "[" + " ".join(str(l) for l in sorted(self.literals, key=literal_key)) + "]"

    @property
    def is_empty(self):
        return len(self.literals) == 0

    @property
    def is_unit(self):
        return len(self.literals) == 1

    @property
    def is_tautology(self):
        return any(-lit in self.literals for lit in self.literals)

    @property
    def atoms(self):
        return {abs(lit) for lit in self.literals}

    def __hash__(self):
        return hash(self.literals)

    def __eq__(self, other):
        return isinstance(other, Clause) and self.literals == other.literals

    def __repr__(self):
        return f"Clause({self.name})"


class Status(Enum):
    SOLVING = "solving"
    SAT = "sat"
    UNSAT = "unsat"


@dataclass
class DPState:
    """
    Full state of one Davis-Putnam solve.

    formula:         the current clause set, mutated in place
    literals:        literal universe; shrinks as atoms disappear
    false_literals:  literals forced false by unit propagation
    history:         one dict per outer round
    """
    formula: set = field(default_factory=set)
    literals: set = field(default_factory=set)
    false_literals: set = field(default_factory=set)
    history: list = field(default_factory=list)
    round: int = 0
    status: Status = Status.SOLVING
    halt_reason: str = ""

    @classmethod
    def from_clauses(cls, clauses) -> 'DPState':
        """
        Build a state from Clause objects or plain iterables of ints.

        The literal universe starts as every literal that occurs.
        """
        state = cls()
        for c in clauses:
            if not isinstance(c, Clause):
                c = Clause(frozenset(c))
            if 0 in c.literals:
                raise ValueError(f"literal 0 is not allowed in a clause: {sorted(c.literals)}")
            state.formula.add(c)
            state.literals |= c.literals
        return state

    @property
    def halted(self):
        return self.status is not Status.SOLVING

    @property
    def has_empty_clause(self):
        return any(c.is_empty for c in self.formula)

    def halt(self, status: Status, reason: str):
        self.status = status
        self.halt_reason = reason

    def occurring_literals(self) -> set:
        """Every literal that occurs in some clause of the current formula."""
        found = set()
        for c in self.formula:
            found |= c.literals
        return found

    def prune_literals(self):
        """Drop universe literals that no longer occur in the formula."""
        self.literals &= self.occurring_literals()

    def remove_clauses(self, clauses):
        self.formula.difference_update(clauses)

    def sorted_formula(self) -> list:
        """Clauses ordered by size, then literal by literal."""
        return sorted(self.formula,
                      key=lambda c: (len(c.literals), sorted(map(literal_key, c.literals))))

    def to_dict(self):
        def by_literal(lits):
            return sorted(lits, key=literal_key)

        return {
            "formula": [by_literal(c.literals) for c in self.sorted_formula()],
            "literals": by_literal(self.literals),
            "false_literals": by_literal(self.false_literals),
            "history": self.history,
            "round": self.round,
            "status": self.status.value,
            "halt_reason": self.halt_reason,
        }
