"""
Reporting utilities for traces.
"""

from .core.state import DPState, literal_key


def print_state(state: DPState):
    """Print a summary of the current solver state."""
    print(f"\n{'='*60}")
    print(f"Round: {state.round}  Status: {state.status.value}"
          + (f" ({state.halt_reason})" if state.halt_reason else ""))
    false = " ".join(str(l) for l in sorted(state.false_literals, key=literal_key))
    print(f"False literals ({len(state.false_literals)}): {false}")
    print(f"Literal universe: {len(state.literals)}")
    print(f"Formula ({len(state.formula)}):")
    for c in state.sorted_formula():
        src = f" (from {' + '.join(c.source)})" if c.source else ""
        print(f"  {c.name}{src}")
    print(f"{'='*60}")


def print_history(state: DPState):
    """Print one line per round."""
    print(f"\n{'='*60}")
    print("Round history:")
    print(f"{'='*60}")
    for entry in state.history:
        eliminated = ", ".join(str(a) for a in entry["eliminated"]) or "(none)"
        print(f"  Round {entry['round']}: -{entry['tautologies']} tautologies, "
              f"-{entry['pure']} pure, eliminated {eliminated}, "
              f"{entry['restarts']} restarts -> "
              f"{entry.get('literals', '?')} literals, {entry.get('clauses', '?')} clauses")
