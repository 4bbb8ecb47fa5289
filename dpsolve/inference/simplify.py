"""
Simplification: the three satisfiability-preserving reductions.

    remove_tautologies       drop clauses containing both l and ~l
    propagate_units          force unit literals, to a fixpoint
    eliminate_pure_literals  drop clauses of one-polarity atoms

Only unit propagation can discover a conflict. None of them can by
themselves declare the formula satisfiable; that is the driver's call.
"""

from ..core.state import Clause, DPState, literal_key


def remove_tautologies(state: DPState) -> int:
    """Remove every tautological clause. Returns how many were removed."""
    doomed = [c for c in state.formula if c.is_tautology]
    state.remove_clauses(doomed)
    return len(doomed)


def apply_false_literals(state: DPState) -> bool:
    """
    Rewrite the formula against the false-literal set.

    A clause holding the complement of a false literal is satisfied and
    removed. Otherwise its false literals are dropped. Returns True if
    some clause ends up empty (conflict); the formula is then left
    partially rewritten, which is fine since the solve is over.
    """
    false = state.false_literals
    for c in list(state.formula):
        if any(-lit in false for lit in c.literals):
            state.formula.discard(c)
            continue
        kept = c.literals - false
        if not kept:
            return True
        if kept != c.literals:
            state.formula.discard(c)
            state.formula.add(Clause(kept, source=(c.name,), step=state.round))
    return False


def propagate_units(state: DPState) -> bool:
    """
    Unit propagation, driven to a fixpoint.

    Every unit clause [l] records ~l in state.false_literals; if l itself
    is already false the formula is contradictory. The formula is then
    rewritten, which may expose new unit clauses, and the loop repeats
    until no unit clause is left.

    Literals already in the false set (e.g. recorded by the resolution
    engine for a unit resolvent) are applied on the first pass.

    Returns True on conflict.
    """
    while True:
        if apply_false_literals(state):
            return True
        units = [c for c in state.formula if c.is_unit]
        if not units:
            break
        for unit in sorted(units, key=lambda c: literal_key(next(iter(c.literals)))):
            (lit,) = unit.literals
            if lit in state.false_literals:
                return True
            state.false_literals.add(-lit)
    state.prune_literals()
    return False


def is_pure(lit: int, occurring: set) -> bool:
    return lit in occurring and -lit not in occurring


def eliminate_pure_literals(state: DPState) -> int:
    """
    One pass of pure-literal elimination over the literal universe.

    Purity is rechecked against the current formula after every removal,
    since dropping clauses can make further literals pure. Not iterated
    to a fixpoint; the driver calls it again each round.

    Returns the number of clauses removed.
    """
    removed = 0
    occurring = state.occurring_literals()
    for lit in sorted(state.literals, key=literal_key):
        if not is_pure(lit, occurring):
            continue
        doomed = [c for c in state.formula if lit in c.literals]
        state.remove_clauses(doomed)
        removed += len(doomed)
        occurring = state.occurring_literals()
    state.prune_literals()
    return removed
