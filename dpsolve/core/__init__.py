from .state import Clause, Status, DPState, literal_key
from .engine import dp_step, run_dp, solve, RoundLimitExceeded

__all__ = [
    "Clause", "Status", "DPState", "literal_key",
    "dp_step", "run_dp", "solve", "RoundLimitExceeded",
]
