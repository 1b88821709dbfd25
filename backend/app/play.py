#!/usr/bin/env python3
"""
Number Walls in the terminal.

Shows a wall with three hidden cells (marked "?"), asks for each missing
number and prints the verdicts, a feedback message and the running score.

Usage:
    numberwalls --max 50 --rounds 5
    python -m app.play --seed 7
"""

import argparse
import logging
import random
import sys

from app.core.config import get_settings
from app.services.round_engine import NumberWallGame
from app.walls.errors import CeilingError
from app.walls.rules import DEFAULT_FEEDBACK_POOLS
from app.walls.wall import in_field_order


def render_wall(visible: dict, width: int) -> str:
    """Three-row pyramid: f on top, d e in the middle, a b c at the base."""
    def cell(key):
        value = visible.get(key)
        text = "?" if value is None else str(value)
        return f"[{key}:{text.rjust(width)}]"

    gap = "  "
    shift = " " * ((width + 4 + len(gap)) // 2)
    rows = [
        shift * 2 + cell("f"),
        shift + cell("d") + gap + cell("e"),
        cell("a") + gap + cell("b") + gap + cell("c"),
    ]
    return "\n".join(rows)


def play_round(game: NumberWallGame, input_fn=input, out=sys.stdout) -> bool:
    view = game.start_round()
    print(f"\nRunde {view.round_number} (Zahlen bis {view.ceiling})", file=out)
    print(render_wall(view.visible, view.max_digits), file=out)

    submission = {}
    for field in in_field_order(view.hidden):
        raw = input_fn(f"{field} = ")
        submission[field] = (raw or "").strip()

    result = game.check_answers(submission)
    marks = "  ".join(
        f"{f}:{'ok' if result.field_results[f] else 'x'}"
        for f in in_field_order(view.hidden)
    )
    print(f"{result.message}!  {marks}", file=out)
    if not result.is_correct:
        solution = ", ".join(f"{k}={v}" for k, v in sorted(result.solution.items()))
        print(f"Lösung: {solution}", file=out)
    print(f"Richtig: {result.score.right}  Falsch: {result.score.wrong}", file=out)
    return result.is_correct


def main(argv=None, input_fn=input, out=sys.stdout) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description=f"Play {settings.app_name} in the terminal")
    parser.add_argument("--max", dest="ceiling", default=None,
                        help=f"Largest number in the wall ({settings.min_custom_ceiling}-"
                             f"{settings.max_custom_ceiling}, default {settings.default_ceiling})")
    parser.add_argument("--rounds", type=int, default=0,
                        help="Number of rounds to play (0 = until Ctrl-D)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    game = NumberWallGame(settings=settings, rng=random.Random(args.seed))
    if args.ceiling is not None:
        try:
            game.set_ceiling(args.ceiling)
        except CeilingError as exc:
            print(f"Error: {exc.message}", file=sys.stderr)
            return 2

    print(DEFAULT_FEEDBACK_POOLS.welcome_message, file=out)
    played = 0
    try:
        while args.rounds <= 0 or played < args.rounds:
            play_round(game, input_fn=input_fn, out=out)
            played += 1
    except (EOFError, KeyboardInterrupt):
        print("", file=out)

    score = game.get_score()
    print(f"Ergebnis: {score.right} richtig, {score.wrong} falsch", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
