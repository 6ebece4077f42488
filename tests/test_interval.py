"""Tests for the Interval value type."""

from dataclasses import FrozenInstanceError

import pytest

from lanepack import Interval


def test_fields_are_keyword_only():
    with pytest.raises(TypeError):
        Interval("a", 0, 1)  # pyright: ignore[reportCallIssue]


def test_frozen():
    item = Interval(id="a", start=0, end=1)
    with pytest.raises(FrozenInstanceError):
        item.start = 5  # pyright: ignore[reportAttributeAccessIssue]


def test_negative_duration_is_constructible():
    item = Interval(id="a", start=5, end=1)
    assert item.duration == -4


def test_zero_length():
    assert Interval(id="z", start=3, end=3).duration == 0


def test_str():
    assert str(Interval(id="a", start=0, end=10)) == "Interval('a': 0→10)"


def test_ids_can_be_any_hashable():
    assert Interval(id=("room", 1), start=0, end=1) == Interval(id=("room", 1), start=0, end=1)
