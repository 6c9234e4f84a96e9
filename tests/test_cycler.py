"""Tests for the Cycler."""

from __future__ import annotations

from itertools import islice

import pytest

from blinktimer.cycler import Cycler


class TestConstruction:
    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            Cycler()

    def test_items_are_copied(self) -> None:
        source = ["a", "b"]
        c = Cycler(*source)
        source.append("c")
        assert c.items == ("a", "b")
        assert len(c) == 2


class TestNext:
    def test_first_call_returns_first_item(self) -> None:
        assert Cycler("x", "y", "z").next() == "x"

    @pytest.mark.parametrize("items", [(1,), ("a", "b"), (3, 1, 4, 1, 5), tuple(range(7))])
    def test_one_period_returns_items_in_order(self, items: tuple) -> None:
        c = Cycler(*items)
        assert tuple(c.next() for _ in items) == items

    @pytest.mark.parametrize("items", [(1,), ("a", "b", "c"), tuple(range(5))])
    def test_periodic(self, items: tuple) -> None:
        c = Cycler(*items)
        first = [c.next() for _ in range(len(items))]
        second = [c.next() for _ in range(len(items))]
        assert first == second

    def test_blink_alternates(self) -> None:
        blink = Cycler(":", " ")
        values = [blink() for _ in range(10)]
        assert values == [":", " "] * 5
        assert all(a != b for a, b in zip(values, values[1:]))

    def test_callable_and_iterator_share_state(self) -> None:
        c = Cycler(1, 2, 3)
        assert c() == 1
        assert next(c) == 2
        assert c.next() == 3
        assert list(islice(c, 4)) == [1, 2, 3, 1]
