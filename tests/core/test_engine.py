"""
Property-based and unit tests for the Davis-Putnam loop.

Core invariants:
    - solve() agrees with a truth-table check, for every heuristic
    - The literal universe never grows from one round to the next, and
      shrinks in every round that eliminates an atom
    - Trivial cases (empty formula, empty clause, p and ~p) halt in round 1
      without any elimination
    - run_dp respects max_rounds; solve raises RoundLimitExceeded
"""

from itertools import product

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dpsolve.core.state import Clause, DPState, Status
from dpsolve.core.engine import dp_step, run_dp, solve, RoundLimitExceeded
from dpsolve.inference.select import HEURISTICS, min_occurrence_order


# ── Helpers ──────────────────────────────────────────────────────────────────

def brute_force_sat(clauses) -> bool:
    """Try every assignment. Only for tiny formulas."""
    clauses = [c.literals if isinstance(c, Clause) else frozenset(c) for c in clauses]
    atoms = sorted({abs(lit) for c in clauses for lit in c})
    for bits in product([False, True], repeat=len(atoms)):
        value = dict(zip(atoms, bits))
        if all(any(value[abs(lit)] == (lit > 0) for lit in c) for c in clauses):
            return True
    return False


def run(*clauses, **kwargs) -> DPState:
    return run_dp(DPState.from_clauses(clauses), verbose=False, **kwargs)


SCENARIO_SAT = ([-1, -2, 3], [-1, 2], [1, -3])

# Every sign pattern over three atoms
ALL_PATTERNS = [[s1 * 1, s2 * 2, s3 * 3]
                for s1, s2, s3 in product([1, -1], repeat=3)]


# ── Generators ────────────────────────────────────────────────────────────────

literals = st.builds(lambda atom, positive: atom if positive else -atom,
                     st.integers(1, 5), st.booleans())

cnf = st.lists(st.frozensets(literals, min_size=1, max_size=3), max_size=10)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestScenarios:
    def test_small_satisfiable(self):
        assert solve(SCENARIO_SAT) is True

    def test_complementary_units(self):
        state = run([1], [-1])
        assert state.status is Status.UNSAT
        assert state.round == 1
        assert state.history[0]["eliminated"] == []
        assert "unit propagation" in state.halt_reason

    def test_pure_literals_empty_the_formula(self):
        state = run([1, 2])
        assert state.status is Status.SAT
        assert state.history[0]["pure"] == 1
        assert state.formula == set()

    def test_empty_formula(self):
        assert solve([]) is True
        state = run()
        assert state.round == 1
        assert state.halt_reason == "formula empty"

    def test_empty_clause(self):
        state = run([])
        assert state.status is Status.UNSAT
        assert state.round == 1
        assert state.history[0]["eliminated"] == []

    def test_all_sign_patterns_unsat(self):
        assert solve(ALL_PATTERNS) is False

    def test_one_pattern_missing_is_sat(self):
        assert solve(ALL_PATTERNS[1:]) is True

    def test_tautologies_only(self):
        state = run([1, -1], [2, -2, 3])
        assert state.status is Status.SAT
        assert state.history[0]["tautologies"] == 2

    def test_pigeonhole_three_into_two(self):
        # pigeon i in hole j: atom 2*i + j - 2 (i = 1..3, j = 1..2)
        def p(i, j):
            return 2 * (i - 1) + j
        clauses = [[p(i, 1), p(i, 2)] for i in range(1, 4)]
        for j in (1, 2):
            for a in range(1, 4):
                for b in range(a + 1, 4):
                    clauses.append([-p(a, j), -p(b, j)])
        for name in HEURISTICS:
            assert solve(clauses, heuristic=name) is False


class TestDPStep:
    def test_first_round_eliminates_most_frequent_atom(self):
        state = DPState.from_clauses(SCENARIO_SAT)
        state = dp_step(state, verbose=False)
        assert not state.halted
        assert state.history[0]["eliminated"] == [1]
        assert state.formula == {Clause.of(2, -3)}
        state = dp_step(state, verbose=False)
        assert state.status is Status.SAT

    def test_history_records_sizes(self):
        state = DPState.from_clauses(SCENARIO_SAT)
        state = dp_step(state, verbose=False)
        entry = state.history[0]
        assert entry["round"] == 1
        assert entry["clauses"] == len(state.formula)
        assert entry["literals"] == len(state.literals)

    def test_propagation_restart_within_round(self):
        # Eliminating 1 yields the unit [2]; the round restarts at propagation
        state = DPState.from_clauses([[1, 2], [-1, 2], [-2, 3, 4], [-3, -4, -2]])
        state = dp_step(state, order_fn=lambda formula: [1, 2, 3, 4], verbose=False)
        assert state.history[0]["restarts"] >= 1
        assert -2 in state.false_literals or state.halted

    def test_halted_state_untouched(self):
        state = run([1], [-1])
        rounds = state.round
        state = dp_step(state, verbose=False)
        assert state.round == rounds

    def test_custom_order_fn(self):
        state = run(*SCENARIO_SAT, order_fn=min_occurrence_order)
        assert state.status is Status.SAT

    def test_verbose_output(self, capsys):
        dp_step(DPState.from_clauses(SCENARIO_SAT), verbose=True)
        out = capsys.readouterr().out
        assert "Round 1" in out
        assert "[eliminated] atom 1" in out


class TestBudget:
    def test_round_limit_leaves_state_solving(self):
        state = run(*SCENARIO_SAT, max_rounds=1)
        assert state.status is Status.SOLVING
        assert state.halt_reason == "round limit reached"

    def test_zero_rounds(self):
        with pytest.raises(RoundLimitExceeded):
            solve([[1, 2]], max_rounds=0)

    def test_solve_raises_when_undecided(self):
        with pytest.raises(RoundLimitExceeded, match="undecided after 1 rounds"):
            solve(SCENARIO_SAT, max_rounds=1)

    def test_enough_rounds(self):
        assert solve(SCENARIO_SAT, max_rounds=2) is True

    def test_unknown_heuristic(self):
        with pytest.raises(ValueError, match="Unknown heuristic"):
            solve(SCENARIO_SAT, heuristic="nope")


# ── Property-based tests ──────────────────────────────────────────────────────

class TestSolveProperties:

    @settings(deadline=None, max_examples=200)
    @given(cnf)
    def test_agrees_with_truth_table(self, clauses):
        expected = brute_force_sat(clauses)
        for name in HEURISTICS:
            assert solve(clauses, heuristic=name) == expected

    @settings(deadline=None)
    @given(cnf)
    def test_universe_shrinks(self, clauses):
        state = DPState.from_clauses(clauses)
        size = len(state.literals)
        while not state.halted:
            state = dp_step(state, verbose=False)
            new_size = len(state.literals)
            assert new_size <= size
            if state.history[-1]["eliminated"]:
                assert new_size < size
            size = new_size

    @settings(deadline=None)
    @given(cnf)
    def test_terminates_within_atom_count_rounds(self, clauses):
        atoms = {abs(lit) for c in clauses for lit in c}
        state = run(*clauses, max_rounds=len(atoms) + 1)
        assert state.halted
