"""Rule tables for wall generation, hidden-cell selection and feedback.

Passed explicitly into the generator, selector and round engine so each can
be tested with its own table.
"""

from dataclasses import dataclass, field

from .wall import FIELDS


@dataclass(frozen=True)
class WallRules:
    min_number: int = 0
    zero_weight: int = 1
    non_zero_weight: int = 4
    max_attempts: int = 100
    fallback: dict = field(default_factory=lambda: {
        "a": 1, "b": 1, "c": 1, "d": 2, "e": 2, "f": 4,
    })

    def total_weight(self, ceiling: int) -> int:
        return self.zero_weight + self.non_zero_weight * ceiling


@dataclass(frozen=True)
class FieldRules:
    all_fields: tuple[str, ...] = FIELDS
    hidden_count: int = 3
    # Never hidden together: too easy to read off, or too loosely constrained.
    forbidden_combinations: tuple[frozenset, ...] = (
        frozenset({"b", "d", "e"}),
        frozenset({"a", "d", "f"}),
        frozenset({"c", "e", "f"}),
    )
    safe_fallback: tuple[str, ...] = ("a", "b", "c")
    max_attempts: int = 100


@dataclass(frozen=True)
class FeedbackPools:
    correct_messages: tuple[str, ...] = (
        "Gut", "Super", "Toll", "Prima", "Klasse", "Genau", "Spitze",
        "Wunderbar", "Fantastisch", "Ausgezeichnet", "Cool", "Stark",
        "Mega", "Stimmt genau", "Bingo", "Das ist es", "Bravo", "Juhu", "Yay",
    )
    incorrect_messages: tuple[str, ...] = (
        "Nee", "Achwas", "Stimmt nicht", "Nicht ganz", "Schau genauer hin",
        "Auweia", "Huch", "Oje", "Nö", "Schade", "Quatsch", "Nix da",
        "Oha", "Ups", "So nicht", "Anders",
    )
    correct_animations: tuple[str, ...] = (
        "message-bounce-in",
        "message-zoom-celebration",
        "message-slide-sparkle",
        "message-pulse-glow",
        "message-flip-tada",
    )
    incorrect_animations: tuple[str, ...] = (
        "message-shake-fade",
        "message-wobble-in",
        "message-slide-gentle",
        "message-pulse-soft",
    )
    welcome_message: str = "Los geht's!"


DEFAULT_WALL_RULES = WallRules()
DEFAULT_FIELD_RULES = FieldRules()
DEFAULT_FEEDBACK_POOLS = FeedbackPools()
