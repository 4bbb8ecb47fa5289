"""
Variable elimination by resolution: the Davis-Putnam step.

To eliminate atom p, every clause (A | p) is resolved against every
clause (B | ~p), giving (A | B). The resolvents replace all clauses
that mentioned p. The result is satisfiable iff the input was.

eliminate() reports what happened through an Outcome instead of
recursing, so the driver decides when to re-simplify.
"""

from enum import Enum

from ..core.state import Clause, DPState


class Outcome(Enum):
    UNSAT = "unsat"            # empty resolvent derived
    PROPAGATED = "propagated"  # unit resolvent recorded, simplify before going on
    ELIMINATED = "eliminated"  # atom is gone from the formula
    SKIPPED = "skipped"        # atom lacks one of its polarities


def resolve(c1: Clause, c2: Clause, atom: int) -> Clause:
    """
    Resolvent of c1 and c2 on atom.

    Both polarities of atom are dropped from both sides; everything
    else is kept.
    """
    pivot = {atom, -atom}
    return Clause(
        literals=(c1.literals | c2.literals) - pivot,
        source=(c1.name, c2.name),
    )


def partition(state: DPState, atom: int):
    """Clauses holding atom positively, and clauses holding it negatively."""
    pos = sorted((c for c in state.formula if atom in c.literals), key=lambda c: c.name)
    neg = sorted((c for c in state.formula if -atom in c.literals), key=lambda c: c.name)
    return pos, neg


def eliminate(state: DPState, atom: int) -> Outcome:
    """
    Try to eliminate atom from state.formula.

    Every (positive, negative) pair is resolved:
        empty resolvent       -> UNSAT, stop at once
        tautological          -> discarded
        unit resolvent [l]    -> ~l goes into the false set, PROPAGATED
        anything else         -> added to the formula

    Resolvents added before an early return stay in the formula; they
    are consequences of it. Only when every pair went through are the
    parent clauses removed and the atom dropped from the literal
    universe and the false set.

    The formula must hold no tautologies: a clause with both p and ~p
    would land in both partitions and resolve with itself.
    """
    pos, neg = partition(state, atom)
    if not pos or not neg:
        return Outcome.SKIPPED

    for c1 in pos:
        for c2 in neg:
            resolvent = resolve(c1, c2, atom)
            resolvent.step = state.round
            if resolvent.is_empty:
                return Outcome.UNSAT
            if resolvent.is_tautology:
                continue
            if resolvent.is_unit:
                (lit,) = resolvent.literals
                if lit in state.false_literals:
                    return Outcome.UNSAT
                state.false_literals.add(-lit)
                return Outcome.PROPAGATED
            state.formula.add(resolvent)

    state.remove_clauses(pos)
    state.remove_clauses(neg)
    state.literals -= {atom, -atom}
    state.false_literals -= {atom, -atom}
    return Outcome.ELIMINATED
