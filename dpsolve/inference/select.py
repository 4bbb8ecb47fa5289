"""
Variable selection: the order in which atoms are offered for elimination.

Each order function takes the current formula and returns a list of
atoms. Ties are always broken by atom value so that runs are
reproducible.

Registry:
    HEURISTICS[name] = {"order_fn": formula -> list[int], "description": str}
"""

from collections import Counter


def occurrence_counts(formula) -> Counter:
    """Number of clauses each atom occurs in, either polarity."""
    counts = Counter()
    for c in formula:
        counts.update(c.atoms)
    return counts


def max_occurrence_order(formula) -> list:
    """Most frequent atoms first. The default."""
    counts = occurrence_counts(formula)
    return sorted(counts, key=lambda atom: (-counts[atom], atom))


def min_occurrence_order(formula) -> list:
    counts = occurrence_counts(formula)
    return sorted(counts, key=lambda atom: (counts[atom], atom))


def min_resolvent_order(formula) -> list:
    """
    Atoms with the fewest candidate resolvents (|pos| * |neg|) first.

    Atoms that occur with a single polarity cost nothing and come first;
    the engine skips them anyway.
    """
    pos, neg = Counter(), Counter()
    for c in formula:
        for lit in c.literals:
            if lit > 0:
                pos[lit] += 1
            else:
                neg[-lit] += 1
    atoms = set(pos) | set(neg)
    return sorted(atoms, key=lambda atom: (pos[atom] * neg[atom], atom))


HEURISTICS = {
    "max_occurrence": {
        "order_fn":    max_occurrence_order,
        "description": "Eliminate the most frequent atoms first",
    },
    "min_occurrence": {
        "order_fn":    min_occurrence_order,
        "description": "Eliminate the least frequent atoms first",
    },
    "min_resolvents": {
        "order_fn":    min_resolvent_order,
        "description": "Eliminate atoms producing the fewest resolvents first",
    },
}


def get_order_fn(name: str):
    if name not in HEURISTICS:
        raise ValueError(f"Unknown heuristic: {name}. "
                         f"Choose from {', '.join(HEURISTICS)}")
    return HEURISTICS[name]["order_fn"]
