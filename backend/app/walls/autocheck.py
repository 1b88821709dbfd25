"""
Auto-check policy — decides when a round can be validated while the player
is still typing.

Players type multi-digit numbers one digit at a time, so "every hidden field
is non-empty" is not enough: "1" may be the start of "12". The policy below
validates right away once the edited field cannot grow any further, and
otherwise waits a short, digit-dependent delay. Timing belongs to the
presentation layer; the values here are defaults only.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from enum import Enum

from .validator import parse_answer
from .wall import RELATIONS, Wall

logger = logging.getLogger("numberwalls.autocheck")

_NON_DIGIT_RE = re.compile(r"[^0-9]")

# Upper bound on candidate values probed per keystroke.
_MAX_PROBES = 50


class AutoCheckAction(str, Enum):
    NONE = "none"
    NOW = "now"
    WAIT = "wait"


@dataclass(frozen=True)
class AutoCheckDecision:
    action: AutoCheckAction
    delay_ms: int = 0


def sanitize_entry(raw: str, max_length: int) -> str:
    """Keep digits only and cut to ``max_length`` characters."""
    return _NON_DIGIT_RE.sub("", raw or "")[:max_length]


def max_digits(ceiling: int) -> int:
    return len(str(ceiling))


def is_valid_partial_wall(values: dict, ceiling: int, min_number: int = 0) -> bool:
    """Relations with all three operands known hold, and known values are in range."""
    for x, y, z in RELATIONS:
        if values.get(x) is None or values.get(y) is None or values.get(z) is None:
            continue
        if values[x] + values[y] != values[z]:
            return False
    return all(
        v is None or min_number <= v <= ceiling
        for v in values.values()
    )


def _known_values(wall: Wall, hidden, entries: dict, field: str) -> dict:
    values = {}
    for key, original in wall.as_dict().items():
        if key not in hidden:
            values[key] = original
        elif key == field:
            values[key] = None
        else:
            values[key] = parse_answer(entries.get(key))
    return values


def _forced_value(field: str, values: dict) -> int | None:
    """Value the edited field must take according to a fully known relation."""
    for x, y, z in RELATIONS:
        if field == z and values[x] is not None and values[y] is not None:
            return values[x] + values[y]
        if field == x and values[y] is not None and values[z] is not None:
            return values[z] - values[y]
        if field == y and values[x] is not None and values[z] is not None:
            return values[z] - values[x]
    return None


def can_field_have_more_digits(
    wall: Wall,
    hidden,
    entries: dict,
    field: str,
    current_length: int,
    ceiling: int,
) -> bool:
    """Whether another digit in ``field`` could still lead to a valid wall."""
    if current_length >= max_digits(ceiling):
        return False

    values = _known_values(wall, hidden, entries, field)
    floor = 10 ** current_length

    required = _forced_value(field, values)
    if required is not None and floor <= required <= ceiling:
        return True

    probes = min(_MAX_PROBES, ceiling - floor + 1)
    if probes <= 0:
        return False
    step = max(1, (ceiling - floor) // probes)
    for candidate in range(floor, ceiling + 1, step):
        values[field] = candidate
        if is_valid_partial_wall(values, ceiling):
            return True
    return False


def validation_delay_ms(
    current_length: int,
    digits: int,
    per_digit_ms: int = 1000,
    max_delay_ms: int = 2500,
) -> int:
    remaining = digits - current_length
    if remaining <= 0:
        return 0
    return min(remaining * per_digit_ms, max_delay_ms)


def decide(
    wall: Wall,
    hidden,
    entries: dict,
    field: str,
    ceiling: int,
    per_digit_ms: int = 1000,
    max_delay_ms: int = 2500,
) -> AutoCheckDecision:
    """
    Decide what to do after ``field`` was edited.

    NONE  some hidden field is still empty.
    NOW   the edited field is complete (max digits, or no longer value fits).
    WAIT  a further digit is plausible; validate after ``delay_ms``.
    """
    if any(not (entries.get(h) or "").strip() for h in hidden):
        return AutoCheckDecision(AutoCheckAction.NONE)

    current_length = len((entries.get(field) or "").strip())
    digits = max_digits(ceiling)
    if current_length >= digits:
        return AutoCheckDecision(AutoCheckAction.NOW)

    if not can_field_have_more_digits(wall, hidden, entries, field, current_length, ceiling):
        return AutoCheckDecision(AutoCheckAction.NOW)

    return AutoCheckDecision(
        AutoCheckAction.WAIT,
        validation_delay_ms(current_length, digits, per_digit_ms, max_delay_ms),
    )


class ValidationTimer:
    """
    Cancelable delayed call for auto-checking. Scheduling again replaces the
    pending call (last input wins).
    """

    def __init__(self):
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None and not self._handle.cancelled()

    def schedule(self, delay_ms: int, callback, *args) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(delay_ms / 1000, self._fire, callback, args)

    def cancel(self) -> bool:
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        logger.debug("[autocheck] pending validation cancelled")
        return True

    def _fire(self, callback, args) -> None:
        self._handle = None
        callback(*args)
