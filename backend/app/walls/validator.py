"""
Answer validator — checks a player's entries for the hidden cells.

Two checks are offered:

  validate_answers
    True when the wall rebuilt from the visible values plus the player's
    entries satisfies A+B=D, B+C=E and D+E=F. The entries do not have to
    match the generated values: some hidden sets (e.g. a, d, f) leave the
    wall under-determined and every consistent filling is a right answer.

  validate_individual_answers
    Per-cell verdicts for highlighting. Unusable entries are False and the
    other entries stay True, since the wall cannot be checked as a whole.
    With every entry usable: a consistent wall marks every hidden cell
    True, otherwise each cell is compared with its generated value so the
    player can see which entries are off.

Malformed input never raises; it is reported as False.
"""

import logging
import re

from .wall import Wall, relations_hold

logger = logging.getLogger("numberwalls.validator")

_INT_RE = re.compile(r"^[+-]?\d+$")


def parse_answer(raw, min_number: int = 0) -> int | None:
    """Parse one entry. Returns None when it is not an integer >= min_number."""
    if raw is None:
        return None
    text = str(raw).strip()
    if not _INT_RE.match(text):
        return None
    value = int(text)
    if value < min_number:
        return None
    return value


def _overlay(wall: Wall, hidden, submission: dict, min_number: int) -> tuple[dict, dict]:
    """Return (rebuilt values, parsed entries); unusable entries map to None."""
    values = wall.as_dict()
    parsed: dict[str, int | None] = {}
    for field in hidden:
        parsed[field] = parse_answer((submission or {}).get(field), min_number)
        if parsed[field] is not None:
            values[field] = parsed[field]
    return values, parsed


def validate_answers(wall: Wall, hidden, submission: dict, min_number: int = 0) -> bool:
    values, parsed = _overlay(wall, hidden, submission, min_number)
    if any(v is None for v in parsed.values()):
        return False
    return relations_hold(values)


def validate_individual_answers(
    wall: Wall,
    hidden,
    submission: dict,
    min_number: int = 0,
) -> dict[str, bool]:
    values, parsed = _overlay(wall, hidden, submission, min_number)

    # Without a full set of numbers the wall can't be checked as a whole;
    # only the unusable entries are flagged.
    if any(v is None for v in parsed.values()):
        return {field: parsed[field] is not None for field in hidden}

    if relations_hold(values):
        return {field: True for field in hidden}

    original = wall.as_dict()
    results = {field: parsed[field] == original[field] for field in hidden}
    logger.debug("[validator] inconsistent submission, per-cell=%s", results)
    return results
