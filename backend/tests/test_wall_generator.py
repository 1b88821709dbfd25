"""
Tests for the wall generator — weighted draws, ceiling, fallback.

All tests are offline and seeded; no settings file is needed.
"""
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import random

import pytest

from app.walls.generator import fallback_wall, generate_wall, weighted_number
from app.walls.rules import WallRules
from app.walls.wall import Wall, in_field_order


class FixedRng:
    """randrange always returns the same offset into the weight table."""

    def __init__(self, r):
        self.r = r

    def randrange(self, stop):
        return min(self.r, stop - 1)


# ─────────────────────────────────────────────────────────────────────────────
# weighted_number
# ─────────────────────────────────────────────────────────────────────────────

class TestWeightedNumber:
    def test_first_slot_is_zero(self):
        assert weighted_number(FixedRng(0), 20) == 0

    def test_next_four_slots_are_one(self):
        for r in (1, 2, 3, 4):
            assert weighted_number(FixedRng(r), 20) == 1

    def test_slot_five_is_two(self):
        assert weighted_number(FixedRng(5), 20) == 2

    def test_last_slot_is_ceiling(self):
        # total weight 1 + 4*20 = 81 → r=80 is the last slot
        assert weighted_number(FixedRng(80), 20) == 20

    def test_range_stays_inside_ceiling(self):
        rng = random.Random(1)
        for _ in range(500):
            assert 0 <= weighted_number(rng, 7) <= 7

    def test_zero_is_rare(self):
        rng = random.Random(42)
        counts = [0] * 21
        for _ in range(2100):
            counts[weighted_number(rng, 20)] += 1
        average_non_zero = sum(counts[1:]) / 20
        assert counts[0] < 0.7 * average_non_zero

    def test_custom_weights(self):
        rules = WallRules(zero_weight=2, non_zero_weight=1)
        assert weighted_number(FixedRng(1), 5, rules) == 0
        assert weighted_number(FixedRng(2), 5, rules) == 1
        assert weighted_number(FixedRng(6), 5, rules) == 5


# ─────────────────────────────────────────────────────────────────────────────
# generate_wall
# ─────────────────────────────────────────────────────────────────────────────

class TestGenerateWall:
    @pytest.mark.parametrize("ceiling", [4, 10, 20, 100, 1000])
    def test_relations_and_range_hold(self, ceiling):
        rng = random.Random(ceiling)
        for _ in range(200):
            wall = generate_wall(ceiling, 100, rng=rng)
            assert wall.d == wall.a + wall.b
            assert wall.e == wall.b + wall.c
            assert wall.f == wall.d + wall.e
            assert all(0 <= v <= ceiling for v in wall.as_dict().values())

    def test_attempt_count_past_limit_returns_fallback(self):
        wall = generate_wall(20, 100, attempt_count=101)
        assert wall.as_dict() == {"a": 1, "b": 1, "c": 1, "d": 2, "e": 2, "f": 4}

    def test_always_rejected_draw_falls_back(self):
        # every base value equals the ceiling, so D = 2 * ceiling is always too big
        wall = generate_wall(5, 10, rng=FixedRng(10 ** 6))
        assert wall == fallback_wall()

    def test_zero_attempts_still_draws_once(self):
        wall = generate_wall(20, 0, rng=FixedRng(1))
        assert wall == Wall.from_base(1, 1, 1)

    def test_custom_fallback(self):
        rules = WallRules(fallback={"a": 0, "b": 0, "c": 0, "d": 0, "e": 0, "f": 0})
        wall = generate_wall(5, 3, attempt_count=4, rules=rules)
        assert wall.as_dict() == dict.fromkeys("abcdef", 0)

    def test_fallback_is_consistent(self):
        assert fallback_wall().is_consistent()

    def test_seeded_generation_is_repeatable(self):
        assert generate_wall(20, rng=random.Random(9)) == generate_wall(20, rng=random.Random(9))


class TestWall:
    def test_from_base(self):
        wall = Wall.from_base(5, 7, 3)
        assert wall.as_dict() == {"a": 5, "b": 7, "c": 3, "d": 12, "e": 10, "f": 22}

    def test_inconsistent_wall_detected(self):
        assert not Wall(1, 1, 1, 3, 2, 5).is_consistent()

    def test_in_field_order(self):
        assert in_field_order(("f", "a", "d")) == ["a", "d", "f"]
        assert in_field_order({"e", "b", "c"}) == ["b", "c", "e"]

    def test_visible_masks_hidden(self):
        visible = Wall.from_base(5, 7, 3).visible(("a", "d", "f"))
        assert visible == {"a": None, "b": 7, "c": 3, "d": None, "e": 10, "f": None}
