"""
Tests for the auto-check policy: when to validate while digits are typed,
and the cancelable last-input-wins timer.
"""
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import asyncio

from app.walls.autocheck import (
    AutoCheckAction,
    ValidationTimer,
    can_field_have_more_digits,
    decide,
    is_valid_partial_wall,
    max_digits,
    sanitize_entry,
    validation_delay_ms,
)
from app.walls.wall import Wall

WALL = Wall.from_base(5, 7, 3)          # 5 7 3 | 12 10 | 22
HIDDEN = ("a", "d", "f")
SMALL_WALL = Wall.from_base(2, 3, 1)    # 2 3 1 | 5 4 | 9


class TestHelpers:
    def test_sanitize_keeps_digits(self):
        assert sanitize_entry("1a2", 3) == "12"

    def test_sanitize_truncates(self):
        assert sanitize_entry("12345", 2) == "12"

    def test_sanitize_none(self):
        assert sanitize_entry(None, 2) == ""

    def test_max_digits(self):
        assert max_digits(9) == 1
        assert max_digits(20) == 2
        assert max_digits(1000) == 4

    def test_delay_scales_with_missing_digits(self):
        assert validation_delay_ms(1, 2) == 1000
        assert validation_delay_ms(1, 3) == 2000

    def test_delay_is_capped(self):
        assert validation_delay_ms(1, 4) == 2500

    def test_no_delay_when_complete(self):
        assert validation_delay_ms(2, 2) == 0


class TestIsValidPartialWall:
    def test_unknown_cells_are_ignored(self):
        values = {"a": 1, "b": 2, "c": None, "d": 3, "e": None, "f": None}
        assert is_valid_partial_wall(values, 20)

    def test_broken_relation(self):
        values = {"a": 1, "b": 2, "c": None, "d": 4, "e": None, "f": None}
        assert not is_valid_partial_wall(values, 20)

    def test_value_above_ceiling(self):
        values = {"a": 25, "b": None, "c": None, "d": None, "e": None, "f": None}
        assert not is_valid_partial_wall(values, 20)

    def test_negative_value(self):
        values = {"a": -1, "b": None, "c": None, "d": None, "e": None, "f": None}
        assert not is_valid_partial_wall(values, 20)


class TestCanFieldHaveMoreDigits:
    def test_forced_two_digit_value(self):
        entries = {"a": "5", "d": "12", "f": "2"}
        assert can_field_have_more_digits(WALL, HIDDEN, entries, "f", 1, 30)

    def test_forced_single_digit_value(self):
        entries = {"a": "2", "d": "5", "f": "9"}
        assert not can_field_have_more_digits(SMALL_WALL, HIDDEN, entries, "d", 1, 20)

    def test_at_max_digits(self):
        assert not can_field_have_more_digits(WALL, HIDDEN, {}, "a", 2, 20)


class TestDecide:
    def test_waits_for_empty_fields(self):
        decision = decide(WALL, HIDDEN, {"a": "5", "d": "", "f": ""}, "a", 30)
        assert decision.action is AutoCheckAction.NONE

    def test_validates_at_max_digits(self):
        decision = decide(WALL, HIDDEN, {"a": "5", "d": "12", "f": "22"}, "f", 30)
        assert decision.action is AutoCheckAction.NOW

    def test_validates_when_field_cannot_grow(self):
        entries = {"a": "2", "d": "5", "f": "9"}
        decision = decide(SMALL_WALL, HIDDEN, entries, "d", 20)
        assert decision.action is AutoCheckAction.NOW

    def test_waits_for_second_digit(self):
        decision = decide(WALL, HIDDEN, {"a": "5", "d": "1", "f": "22"}, "d", 30)
        assert decision.action is AutoCheckAction.WAIT
        assert decision.delay_ms == 1000

    def test_custom_timing(self):
        decision = decide(
            WALL, HIDDEN, {"a": "5", "d": "1", "f": "22"}, "d", 300,
            per_digit_ms=400, max_delay_ms=600,
        )
        assert decision.action is AutoCheckAction.WAIT
        assert decision.delay_ms == 600


class TestValidationTimer:
    def test_last_input_wins(self):
        calls = []

        async def scenario():
            timer = ValidationTimer()
            timer.schedule(50, calls.append, "first")
            timer.schedule(10, calls.append, "second")
            await asyncio.sleep(0.1)
            return timer.pending

        pending = asyncio.run(scenario())
        assert calls == ["second"]
        assert pending is False

    def test_cancel_drops_pending_call(self):
        calls = []

        async def scenario():
            timer = ValidationTimer()
            timer.schedule(10, calls.append, "x")
            assert timer.pending
            cancelled = timer.cancel()
            await asyncio.sleep(0.05)
            return cancelled

        assert asyncio.run(scenario()) is True
        assert calls == []

    def test_cancel_without_pending(self):
        assert ValidationTimer().cancel() is False
