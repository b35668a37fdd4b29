#!/usr/bin/env python3
# pylint: disable=missing-class-docstring,no-self-use
from __future__ import annotations

__package__ = __package__ or "tests.naming"  # pylint:disable=redefined-builtin

import unittest

from jadnames import Holder


def take(holder: Holder, n: int) -> list[str]:
    return [holder.next_name() for _ in range(n)]


class TestHolder(unittest.TestCase):
    def test_single_name_skip_zero(self):
        assert take(Holder(0, True, ["s"]), 3) == ["s", "s1", "s2"]

    def test_single_name_without_skip_zero(self):
        assert take(Holder(0, False, ["d"]), 3) == ["d0", "d1", "d2"]

    def test_single_name_starting_at_one(self):
        # skip_zero only concerns index 0
        assert take(Holder(1, True, ["file"]), 2) == ["file1", "file2"]

    def test_cycling(self):
        h = Holder(0, True, ["i", "j", "k", "l"])
        assert take(h, 9) == ["i", "j", "k", "l", "i1", "j1", "k1", "l1", "i2"]
        assert h.index == 9

    def test_cycling_without_skip_zero(self):
        assert take(Holder(0, False, ["x", "y"]), 4) == ["x0", "y0", "x1", "y1"]

    def test_peek_does_not_advance(self):
        h = Holder(0, True, ["s"])
        assert h.peek() == "s"
        assert h.peek() == "s"
        assert h.index == 0

    def test_copy_is_independent(self):
        h = Holder(2, True, ["i", "j", "k", "l"])
        c = h.copy()
        assert c == h
        c.next_name()
        c.names.append("m")
        assert h.index == 2
        assert h.names == ["i", "j", "k", "l"]

    def test_no_candidates(self):
        with self.assertRaises(ValueError):
            Holder(0, True, [])

    def test_negative_index(self):
        with self.assertRaises(ValueError):
            Holder(-1, True, ["s"])


if __name__ == "__main__":
    unittest.main()
