"""
ceiling.py — validation of the player-chosen "numbers up to" limit.

Rejected input keeps the previous ceiling; the caller shows the message.
"""
from app.walls.errors import CeilingError

CEILING_MESSAGES = {
    "empty": "Bitte gib eine Zahl ein",
    "invalid": "Bitte gib eine gültige Zahl ein",
    "too_low": "Minimum ist {minimum}",
    "too_high": "Maximum ist {maximum}",
}


def parse_ceiling(raw, minimum: int = 20, maximum: int = 1000) -> int:
    """
    Examples:
        "50"   → 50
        " 20 " → 20
        ""     → CeilingError(reason="empty")
        "abc"  → CeilingError(reason="invalid")
        "5"    → CeilingError(reason="too_low")
        "5000" → CeilingError(reason="too_high")
    """
    text = "" if raw is None else str(raw).strip()
    if not text:
        raise CeilingError("empty", CEILING_MESSAGES["empty"])

    try:
        value = int(text)
    except ValueError:
        raise CeilingError("invalid", CEILING_MESSAGES["invalid"]) from None

    if value < minimum:
        raise CeilingError("too_low", CEILING_MESSAGES["too_low"].format(minimum=minimum))
    if value > maximum:
        raise CeilingError("too_high", CEILING_MESSAGES["too_high"].format(maximum=maximum))
    return value
