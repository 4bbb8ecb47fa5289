from .simplify import (
    remove_tautologies, apply_false_literals,
    propagate_units, eliminate_pure_literals,
)
from .resolve import Outcome, resolve, partition, eliminate
from .select import (
    HEURISTICS, get_order_fn, occurrence_counts,
    max_occurrence_order, min_occurrence_order, min_resolvent_order,
)

__all__ = [
    "remove_tautologies", "apply_false_literals",
    "propagate_units", "eliminate_pure_literals",
    "Outcome", "resolve", "partition", "eliminate",
    "HEURISTICS", "get_order_fn", "occurrence_counts",
    "max_occurrence_order", "min_occurrence_order", "min_resolvent_order",
]
