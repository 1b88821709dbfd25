"""Hidden-cell selector — picks which three cells the player must fill."""

import logging
import random

from .rules import DEFAULT_FIELD_RULES, FieldRules

logger = logging.getLogger("numberwalls.selector")


def is_forbidden_combination(fields, forbidden_combinations) -> bool:
    """Order-independent match of ``fields`` against the forbidden table."""
    selected = frozenset(fields)
    return any(selected == frozenset(f) for f in forbidden_combinations)


def select_hidden_fields(
    max_attempts: int | None = None,
    rng: random.Random | None = None,
    rules: FieldRules = DEFAULT_FIELD_RULES,
) -> tuple[str, ...]:
    """
    Shuffle the labels and keep the first ``hidden_count`` until the pick
    avoids every forbidden combination.

    Returns a sorted tuple. Falls back to ``rules.safe_fallback`` after
    ``max_attempts`` shuffles.
    """
    if max_attempts is None:
        max_attempts = rules.max_attempts
    rng = rng or random.Random()

    labels = list(rules.all_fields)
    for _ in range(max_attempts):
        rng.shuffle(labels)
        candidate = tuple(sorted(labels[: rules.hidden_count]))
        if not is_forbidden_combination(candidate, rules.forbidden_combinations):
            return candidate

    logger.warning(
        "[selector] no allowed hidden set after %d attempts, using %s",
        max_attempts, rules.safe_fallback,
    )
    return tuple(sorted(rules.safe_fallback))
