"""Pick a random message and animation for a round outcome."""

import random

from .rules import DEFAULT_FEEDBACK_POOLS, FeedbackPools


def pick_message(
    is_correct: bool,
    rng: random.Random | None = None,
    pools: FeedbackPools = DEFAULT_FEEDBACK_POOLS,
) -> str:
    rng = rng or random.Random()
    return rng.choice(pools.correct_messages if is_correct else pools.incorrect_messages)


def pick_animation(
    is_correct: bool,
    rng: random.Random | None = None,
    pools: FeedbackPools = DEFAULT_FEEDBACK_POOLS,
) -> str:
    rng = rng or random.Random()
    return rng.choice(pools.correct_animations if is_correct else pools.incorrect_animations)
