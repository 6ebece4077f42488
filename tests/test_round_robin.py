"""Tests for the round-robin trial and minimal-column search."""

import pytest

from lanepack import Interval, minimal_columns, round_robin_trial


def ivl(id, start, end):
    return Interval(id=id, start=start, end=end)


SCENARIO = [
    ivl("a", 1, 10),
    ivl("b", 5, 15),
    ivl("c", 10, 20),
    ivl("d", 12, 20),
    ivl("e", 16, 17),
]


class TestRoundRobinTrial:
    def test_rotates_across_columns(self):
        """Disjoint intervals still spread over every column."""
        items = [ivl("x", 0, 1), ivl("y", 1, 2), ivl("z", 2, 3)]
        assert round_robin_trial(items, 2) == [["x", "z"], ["y"]]
        assert round_robin_trial(items, 1) == [["x", "y", "z"]]

    def test_pointer_advances_past_rejected_columns(self):
        """A rejected candidate still moves the pointer for later intervals."""
        items = [
            ivl("a", 0, 10),
            ivl("b", 0, 3),
            ivl("c", 3, 4),
            ivl("d", 4, 5),
            ivl("e", 5, 6),
        ]
        assert round_robin_trial(items, 3) == [["a"], ["b", "d"], ["c", "e"]]

    def test_empty_column_accepts_anything(self):
        items = [ivl("a", 0, 10), ivl("b", 0, 10)]
        assert round_robin_trial(items, 2) == [["a"], ["b"]]

    def test_failure_returns_none(self):
        items = [ivl("a", 0, 10), ivl("b", 5, 15)]
        assert round_robin_trial(items, 1) is None

    def test_scenario_needs_three_columns(self):
        assert round_robin_trial(SCENARIO, 2) is None
        assert round_robin_trial(SCENARIO, 3) == [["a", "d"], ["b", "e"], ["c"]]

    def test_uses_input_order(self):
        """Intervals are not sorted before placement."""
        items = [ivl("late", 5, 10), ivl("early", 0, 5)]
        assert round_robin_trial(items, 1) is None

    def test_returns_exactly_n_columns(self):
        assert round_robin_trial([ivl("a", 0, 1)], 3) == [["a"], [], []]
        assert round_robin_trial([], 2) == [[], []]

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_column_count_raises(self, n):
        with pytest.raises(ValueError):
            round_robin_trial(SCENARIO, n)

    def test_does_not_mutate_input(self):
        items = list(SCENARIO)
        round_robin_trial(items, 3)
        assert items == SCENARIO


class TestMinimalColumns:
    def test_scenario(self):
        assert minimal_columns(SCENARIO) == [["a", "d"], ["b", "e"], ["c"]]

    def test_empty(self):
        assert minimal_columns([]) == []

    def test_single(self):
        assert minimal_columns([ivl("x", 0, 5)]) == [["x"]]

    def test_touching_fit_in_one_column(self):
        assert minimal_columns([ivl("a", 0, 5), ivl("b", 5, 10)]) == [["a", "b"]]

    def test_out_of_order_input_may_need_more_columns(self):
        """Input order matters: a later-starting first interval blocks column 0."""
        items = [ivl("late", 5, 10), ivl("early", 0, 5)]
        assert minimal_columns(items) == [["late"], ["early"]]

    def test_all_overlapping_falls_back_to_one_per_column(self):
        items = [ivl(i, 0, 10) for i in range(4)]
        assert minimal_columns(items) == [[0], [1], [2], [3]]

    def test_negative_duration_still_terminates(self):
        items = [ivl("bad", 10, 0), ivl("ok", 0, 10)]
        result = minimal_columns(items)
        assert sorted(i for column in result for i in column) == ["bad", "ok"]
