"""
Unit and property-based tests for the reduction rules.

Core claims:
    - dominates is strict: identical coverage never dominates
    - reduce_subsets leaves no dominated subset behind
    - reduce_elements leaves every remaining element covered twice or more
    - simplify reaches a fixed point and reports uniqueness correctly
    - reductions never touch the Cover they were snapshotted from
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from setcover.core.cover import Cover
from setcover.core.reduce import dominates, reduce_subsets, reduce_elements, simplify
from setcover.instances.basic import BASIC_TABLES, make_table_cover
from setcover.instances.seven_segment import make_seven_segment_cover


# ── Helpers ──────────────────────────────────────────────────────────────────

def table_state(table: dict):
    return make_table_cover(table).snapshot()


def residual(state) -> dict:
    return {s: set(es) for s, es in state.incidence.subsets.items()}


@st.composite
def cover_tables(draw, max_subsets=6, max_elements=6):
    names = draw(st.lists(
        st.text(alphabet="ABCDEFGH", min_size=1, max_size=2),
        min_size=0, max_size=max_subsets, unique=True,
    ))
    table = {}
    for name in names:
        table[name] = draw(st.lists(
            st.integers(0, max_elements - 1), min_size=1, max_size=max_elements,
        ))
    return table


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestDominates:
    def test_single_subset(self):
        state = table_state(BASIC_TABLES["tautology"])
        assert not dominates(state.incidence, True, True)

    def test_disjoint(self):
        state = table_state(BASIC_TABLES["disjoint"])
        assert not dominates(state.incidence, "A", "B")
        assert not dominates(state.incidence, "B", "A")

    def test_strict_superset(self):
        state = table_state(BASIC_TABLES["domination"])
        assert dominates(state.incidence, "B", "A")
        assert not dominates(state.incidence, "A", "B")

    def test_identical_coverage_is_not_domination(self):
        state = table_state(BASIC_TABLES["tie"])
        assert not dominates(state.incidence, "A", "B")
        assert not dominates(state.incidence, "B", "A")

    def test_full_table(self):
        state = table_state({
            "A": [2],
            "B": [2, 6],
            "C": [2, 6],
            "D": [1, 2, 4],
            "E": [3, 5, 7],
            "F": [0, 1, 2, 4, 7],
        })
        want = {("B", "A"), ("C", "A"), ("D", "A"), ("F", "A"), ("F", "D")}
        for a in "ABCDEF":
            for b in "ABCDEF":
                assert dominates(state.incidence, a, b) == ((a, b) in want), (a, b)


class TestReduceSubsets:
    def test_nothing_to_remove(self):
        state = table_state(BASIC_TABLES["disjoint"])
        assert not reduce_subsets(state)
        assert residual(state) == {"A": {"x"}, "B": {"y"}}

    def test_removes_dominated(self):
        state = table_state(BASIC_TABLES["domination"])
        assert reduce_subsets(state)
        assert residual(state) == {"B": {"x", "y", "z"}}
        assert state.incidence.elements == {"x": {"B"}, "y": {"B"}, "z": {"B"}}

    def test_keeps_ties(self):
        state = table_state(BASIC_TABLES["tie"])
        assert not reduce_subsets(state)
        assert set(residual(state)) == {"A", "B"}

    def test_history_records_dominator(self):
        state = table_state(BASIC_TABLES["domination"])
        reduce_subsets(state)
        assert state.history == [
            {"step": 1, "rule": "dominated", "subset": "A", "by": "B"},
        ]

    def test_seven_segment_a(self):
        state = make_seven_segment_cover("a").snapshot()
        assert reduce_subsets(state)
        assert "11-0" not in state.incidence.subsets
        assert len(state.incidence.subsets) == 7

    def test_seven_segment_b_has_no_domination(self):
        state = make_seven_segment_cover("b").snapshot()
        assert not reduce_subsets(state)
        assert len(state.incidence.subsets) == 6


class TestReduceElements:
    def test_empty(self):
        state = Cover().snapshot()
        assert not reduce_elements(state)
        assert state.essential == []

    def test_tautology(self):
        state = table_state(BASIC_TABLES["tautology"])
        assert reduce_elements(state)
        assert state.essential == [True]
        assert not state.incidence

    def test_one_subset_two_elements(self):
        state = table_state({"A": ["x", "y"]})
        assert reduce_elements(state)
        assert state.essential == ["A"]
        assert state.is_covered

    def test_disjoint_both_essential(self):
        state = table_state(BASIC_TABLES["disjoint"])
        assert reduce_elements(state)
        assert set(state.essential) == {"A", "B"}

    def test_tie_has_no_essential(self):
        state = table_state(BASIC_TABLES["tie"])
        assert not reduce_elements(state)
        assert state.essential == []
        assert residual(state) == {"A": {"x"}, "B": {"x"}}

    def test_seven_segment_a(self):
        state = make_seven_segment_cover("a").snapshot()
        assert reduce_elements(state)
        assert set(state.essential) == {"0-1-", "01-1", "-0-0", "-11-", "100-"}
        assert residual(state) == {"1--0": {12}, "11-0": {12}}

    def test_seven_segment_b(self):
        state = make_seven_segment_cover("b").snapshot()
        assert reduce_elements(state)
        assert set(state.essential) == {"0-00", "0-11", "-0-0", "1-01"}
        assert residual(state) == {"00--": {1}, "-00-": {1}}

    def test_seven_segment_c(self):
        state = make_seven_segment_cover("c").snapshot()
        assert reduce_elements(state)
        assert set(state.essential) == {"01--", "--01", "10--"}
        assert residual(state) == {
            "0-0-": {0}, "0--1": {3}, "-00-": {0}, "-0-1": {3},
        }

    def test_seven_segment_d_drops_emptied_subsets(self):
        state = make_seven_segment_cover("d").snapshot()
        assert reduce_elements(state)
        assert set(state.essential) == {"-101", "-110", "1-0-"}
        assert residual(state) == {
            "00-0": {0, 2},
            "001-": {2, 3},
            "0-10": {2},
            "-000": {0},
            "-011": {3, 11},
            "10-1": {11},
        }

    def test_history_records_covered_elements(self):
        state = table_state({"A": ["x", "y"], "B": ["y"]})
        reduce_elements(state)
        (entry,) = state.history
        assert entry["rule"] == "essential"
        assert entry["subset"] == "A"
        assert entry["element"] == "x"
        assert set(entry["covered"]) == {"x", "y"}


class TestSimplify:
    def test_empty_is_unique(self):
        state = Cover().snapshot()
        assert simplify(state)
        assert state.unique is True
        assert state.essential == []

    def test_tie_is_not_unique(self):
        state = table_state(BASIC_TABLES["tie"])
        assert not simplify(state)
        assert state.unique is False

    def test_domination_then_essential(self):
        state = table_state(BASIC_TABLES["domination"])
        assert simplify(state)
        assert state.essential == ["B"]
        rules = [entry["rule"] for entry in state.history]
        assert rules == ["dominated", "essential"]

    def test_cyclic_stalls(self):
        state = table_state(BASIC_TABLES["cyclic"])
        assert not simplify(state)
        assert state.history == []
        assert len(state.incidence.subsets) == 6

    @pytest.mark.parametrize("segment,unique,essential", [
        ("a", True, {"0-1-", "01-1", "-0-0", "-11-", "100-", "1--0"}),
        ("b", False, {"0-00", "0-11", "-0-0", "1-01"}),
        ("c", False, {"01--", "--01", "10--"}),
        ("d", True, {"-101", "-110", "00-0", "-011", "1-0-"}),
        ("g", False, {"-01-", "10--"}),
    ])
    def test_seven_segment(self, segment, unique, essential):
        state = make_seven_segment_cover(segment).snapshot()
        assert simplify(state) == unique
        assert set(state.essential) == essential

    def test_seven_segment_d_residual_cascade(self):
        # Essentials shrink 0-10, -000 and 10-1 into dominated singletons,
        # whose removal exposes 00-0 and -011 as essential.
        state = make_seven_segment_cover("d").snapshot()
        simplify(state)
        dropped = {e["subset"] for e in state.history if e["rule"] == "dominated"}
        assert {"0-10", "-000", "10-1", "1-01"} <= dropped

    def test_snapshot_leaves_cover_untouched(self):
        cover = make_seven_segment_cover("a")
        before = cover.incidence.copy()
        simplify(cover.snapshot())
        assert cover.incidence == before


# ── Property-based tests ─────────────────────────────────────────────────────

class TestReduceProperties:

    @given(cover_tables())
    def test_no_domination_after_reduce_subsets(self, table):
        state = table_state(table)
        reduce_subsets(state)
        remaining = list(state.incidence.subsets)
        for a in remaining:
            for b in remaining:
                assert a == b or not dominates(state.incidence, a, b)

    @given(cover_tables())
    def test_reduce_subsets_never_uncovers(self, table):
        state = table_state(table)
        before = set(state.incidence.elements)
        reduce_subsets(state)
        assert set(state.incidence.elements) == before

    @given(cover_tables())
    def test_no_single_coverer_after_reduce_elements(self, table):
        state = table_state(table)
        reduce_elements(state)
        for e in state.incidence.elements:
            assert state.incidence.element_degree(e) >= 2

    @given(cover_tables())
    def test_essential_subsets_and_residual_cover_everything(self, table):
        cover = make_table_cover(table)
        state = cover.snapshot()
        simplify(state)
        covered = set(state.incidence.elements)
        for s in state.essential:
            covered |= cover.incidence.subsets[s]
        assert covered == set(cover.elements())

    @given(cover_tables())
    def test_simplify_reaches_fixed_point(self, table):
        state = table_state(table)
        simplify(state)
        assert not reduce_elements(state)
        assert not reduce_subsets(state)

    @given(cover_tables())
    def test_essential_subsets_are_distinct(self, table):
        state = table_state(table)
        simplify(state)
        assert len(state.essential) == len(set(state.essential))
