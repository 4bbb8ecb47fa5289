"""
The Davis-Putnam main loop.

One round: remove tautologies, propagate units, eliminate pure literals,
then offer atoms to the resolution engine in the order chosen by the
selection heuristic. A unit resolvent sends the round back to unit
propagation. The loop ends when the formula is empty (SAT), an empty
clause appears (UNSAT), or no atom can be eliminated (SAT).

Every round removes at least one atom from the literal universe or
halts, so the loop terminates. It can still take exponential time;
max_rounds is the caller's budget.
"""

from typing import Callable, Optional

from .state import DPState, Status
from ..inference.simplify import remove_tautologies, propagate_units, eliminate_pure_literals
from ..inference.resolve import Outcome, eliminate
from ..inference.select import max_occurrence_order, get_order_fn


class RoundLimitExceeded(RuntimeError):
    """The solve was still undecided after max_rounds rounds."""


def _sizes(state: DPState) -> str:
    return f"{len(state.literals)} literals, {len(state.formula)} clauses"


def dp_step(
    state: DPState,
    order_fn: Callable = max_occurrence_order,
    verbose: bool = True,
) -> DPState:
    """
    Execute one round of the Davis-Putnam loop.

    Args:
        state:     current DPState, mutated in place
        order_fn:  order_fn(formula) -> list of atoms to try, in order
        verbose:   print progress
    """
    if state.halted:
        return state

    state.round += 1
    entry = {
        "round": state.round,
        "tautologies": 0,
        "pure": 0,
        "eliminated": [],
        "restarts": 0,
    }
    state.history.append(entry)
    if verbose:
        print(f"\n--- Round {state.round}: {_sizes(state)} ---")

    entry["tautologies"] = remove_tautologies(state)
    if verbose:
        print(f"  [tautologies] removed {entry['tautologies']} -> {_sizes(state)}")

    while True:
        if propagate_units(state):
            state.halt(Status.UNSAT, "conflict during unit propagation")
            break
        if verbose:
            print(f"  [units] {len(state.false_literals)} false literals -> {_sizes(state)}")

        entry["pure"] += eliminate_pure_literals(state)
        if verbose:
            print(f"  [pure] {_sizes(state)}")

        if not state.formula:
            state.halt(Status.SAT, "formula empty")
            break
        if state.has_empty_clause:
            state.halt(Status.UNSAT, "empty clause")
            break

        progress = False
        restart = False
        for atom in order_fn(state.formula):
            outcome = eliminate(state, atom)
            if outcome is Outcome.SKIPPED:
                continue
            if outcome is Outcome.UNSAT:
                state.halt(Status.UNSAT, f"resolution conflict on atom {atom}")
                break
            progress = True
            if outcome is Outcome.PROPAGATED:
                restart = True
                entry["restarts"] += 1
                if verbose:
                    print(f"  [propagated] unit resolvent on atom {atom}")
                break
            entry["eliminated"].append(atom)
            if verbose:
                print(f"  [eliminated] atom {atom} -> {_sizes(state)}")

        if state.halted:
            break
        if restart:
            continue
        if not progress:
            state.halt(Status.SAT, "no atom can be eliminated")
        break

    entry["literals"] = len(state.literals)
    entry["clauses"] = len(state.formula)
    if verbose and state.halted:
        print(f"  [halt] {state.status.value}: {state.halt_reason}")
    return state


def run_dp(
    state: DPState,
    max_rounds: Optional[int] = None,
    order_fn: Callable = max_occurrence_order,
    verbose: bool = True,
) -> DPState:
    """
    Run rounds until the state halts or max_rounds rounds have run.

    Hitting the limit leaves state.status at SOLVING with halt_reason set.
    """
    rounds = 0
    while not state.halted:
        if max_rounds is not None and rounds >= max_rounds:
            state.halt_reason = "round limit reached"
            break
        state = dp_step(state, order_fn=order_fn, verbose=verbose)
        rounds += 1
    return state


def solve(
    clauses,
    max_rounds: Optional[int] = None,
    heuristic: str = "max_occurrence",
    verbose: bool = False,
) -> bool:
    """
    Decide satisfiability of a CNF formula.

    Args:
        clauses:    iterable of Clause or of iterables of nonzero ints
        max_rounds: give up after this many rounds (None: no limit)
        heuristic:  name in dpsolve.inference.select.HEURISTICS
        verbose:    print progress

    Returns True if satisfiable, False if not.
    Raises RoundLimitExceeded if max_rounds ran out first.
    """
    order_fn = get_order_fn(heuristic)
    state = DPState.from_clauses(clauses)
    state = run_dp(state, max_rounds=max_rounds, order_fn=order_fn, verbose=verbose)
    if not state.halted:
        raise RoundLimitExceeded(
            f"undecided after {state.round} rounds ({_sizes(state)})")
    return state.status is Status.SAT
