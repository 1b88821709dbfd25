"""Wall generator — weighted draws of A, B, C with bounded regeneration.

A, B and C are drawn independently; D, E and F follow from the sums.
Any draw whose derived cells exceed the ceiling is thrown away and redrawn.
After ``max_attempts`` rejected draws the fixed fallback wall is returned,
so a caller always receives a valid wall.
"""

import logging
import random

from .rules import DEFAULT_WALL_RULES, WallRules
from .wall import Wall

logger = logging.getLogger("numberwalls.generator")


def weighted_number(
    rng: random.Random,
    ceiling: int,
    rules: WallRules = DEFAULT_WALL_RULES,
) -> int:
    """
    Draw an integer in [0, ceiling] with zero made rare.

    With the default weights 0 has weight 1 and every value in 1..ceiling
    has weight 4, e.g. for ceiling=20: P(0) = 1/81, P(k) = 4/81.
    """
    r = rng.randrange(rules.total_weight(ceiling))
    if r < rules.zero_weight:
        return rules.min_number
    return 1 + (r - rules.zero_weight) // rules.non_zero_weight


def fallback_wall(rules: WallRules = DEFAULT_WALL_RULES) -> Wall:
    return Wall.from_dict(rules.fallback)


def generate_wall(
    ceiling: int = 20,
    max_attempts: int | None = None,
    attempt_count: int = 0,
    rng: random.Random | None = None,
    rules: WallRules = DEFAULT_WALL_RULES,
) -> Wall:
    """
    Generate a consistent wall whose six values all lie in [0, ceiling].

    Args:
        ceiling:       Upper bound for every cell.
        max_attempts:  Rejected draws tolerated before falling back
                       (defaults to rules.max_attempts).
        attempt_count: Attempts already spent; a value above max_attempts
                       yields the fallback wall straight away.
        rng:           Random source, injectable for deterministic tests.
        rules:         Weights, minimum and fallback table.
    """
    if max_attempts is None:
        max_attempts = rules.max_attempts
    rng = rng or random.Random()

    while attempt_count <= max_attempts:
        wall = Wall.from_base(
            weighted_number(rng, ceiling, rules),
            weighted_number(rng, ceiling, rules),
            weighted_number(rng, ceiling, rules),
        )
        if max(wall.d, wall.e, wall.f) <= ceiling:
            logger.debug(
                "[generator] wall %s after %d rejected draw(s)",
                wall.as_dict(), attempt_count,
            )
            return wall
        attempt_count += 1

    logger.warning(
        "[generator] no wall under ceiling=%d after %d attempts, using fallback",
        ceiling, max_attempts,
    )
    return fallback_wall(rules)
