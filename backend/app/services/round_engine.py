"""
Round engine — one player's session of number wall rounds.

Holds the active wall, its hidden cells and the running score, and moves
each round through:

    IDLE → GENERATED → HIDDEN_CHOSEN → AWAITING_INPUT → VALIDATED → GENERATED …

Round replacement and round completion (verdict + score increment) each run
under one lock, so a reader never sees a new wall paired with the previous
round's hidden cells, or a validated round whose score is not yet counted.
"""
from __future__ import annotations

import logging
import random
import threading
import time
from enum import Enum
from typing import Optional

from app.core.config import Settings, get_settings
from app.models.wall import CheckResult, RoundView, ScoreDTO
from app.services.score_store import InMemoryScoreStore, Score, ScoreStore
from app.services.telemetry import emit_event
from app.utils.ceiling import parse_ceiling
from app.walls import autocheck
from app.walls.errors import CeilingError, RoundStateError
from app.walls.feedback import pick_animation, pick_message
from app.walls.generator import generate_wall
from app.walls.rules import (
    DEFAULT_FEEDBACK_POOLS,
    DEFAULT_FIELD_RULES,
    DEFAULT_WALL_RULES,
    FeedbackPools,
    FieldRules,
    WallRules,
)
from app.walls.selector import select_hidden_fields
from app.walls.validator import validate_answers, validate_individual_answers
from app.walls.wall import Wall

logger = logging.getLogger("numberwalls.round_engine")


class RoundState(str, Enum):
    IDLE = "idle"
    GENERATED = "generated"
    HIDDEN_CHOSEN = "hidden_chosen"
    AWAITING_INPUT = "awaiting_input"
    VALIDATED = "validated"


class NumberWallGame:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        score_store: Optional[ScoreStore] = None,
        wall_rules: WallRules = DEFAULT_WALL_RULES,
        field_rules: FieldRules = DEFAULT_FIELD_RULES,
        pools: FeedbackPools = DEFAULT_FEEDBACK_POOLS,
    ):
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.score_store = score_store or InMemoryScoreStore()
        self.wall_rules = wall_rules
        self.field_rules = field_rules
        self.pools = pools

        self.ceiling = self.settings.default_ceiling
        self.state = RoundState.IDLE
        self.wall: Optional[Wall] = None
        self.hidden: tuple[str, ...] = ()
        self.round_number = 0
        self._started_at = 0.0
        self._lock = threading.Lock()

    def _transition(self, new_state: RoundState) -> None:
        logger.debug("[round_engine] %s -> %s", self.state.value, new_state.value)
        self.state = new_state

    # ── round lifecycle ───────────────────────────────────────────────────

    def start_round(self) -> RoundView:
        """Generate a wall, choose the hidden cells and wait for input."""
        with self._lock:
            self.wall = generate_wall(
                self.ceiling,
                self.settings.max_generation_attempts,
                rng=self.rng,
                rules=self.wall_rules,
            )
            self._transition(RoundState.GENERATED)

            self.hidden = select_hidden_fields(
                self.settings.max_field_selection_attempts,
                rng=self.rng,
                rules=self.field_rules,
            )
            self._transition(RoundState.HIDDEN_CHOSEN)

            self.round_number += 1
            self._started_at = time.monotonic()
            self._transition(RoundState.AWAITING_INPUT)

            emit_event("round_started", ceiling=self.ceiling, hidden=list(self.hidden))
            return RoundView(
                round_number=self.round_number,
                ceiling=self.ceiling,
                max_digits=autocheck.max_digits(self.ceiling),
                visible=self.wall.visible(self.hidden),
                hidden=list(self.hidden),
            )

    def check_answers(self, submission: dict) -> CheckResult:
        """
        Validate the player's entries, count the round once and pick feedback.

        Raises RoundStateError unless a round is awaiting input.
        """
        with self._lock:
            if self.state is not RoundState.AWAITING_INPUT:
                raise RoundStateError("check answers", self.state)

            min_number = self.wall_rules.min_number
            is_correct = validate_answers(self.wall, self.hidden, submission, min_number)
            field_results = validate_individual_answers(
                self.wall, self.hidden, submission, min_number
            )

            if is_correct:
                score = self.score_store.increment_right()
            else:
                score = self.score_store.increment_wrong()
            self._transition(RoundState.VALIDATED)

            latency_ms = int((time.monotonic() - self._started_at) * 1000)
            emit_event(
                "round_checked",
                ceiling=self.ceiling,
                hidden=list(self.hidden),
                ok=is_correct,
                right=score.right,
                wrong=score.wrong,
                latency_ms=latency_ms,
            )

            original = self.wall.as_dict()
            return CheckResult(
                is_correct=is_correct,
                field_results=field_results,
                message=pick_message(is_correct, self.rng, self.pools),
                animation=pick_animation(is_correct, self.rng, self.pools),
                score=ScoreDTO(**score.to_dict()),
                solution={f: original[f] for f in self.hidden},
                display_ms=self.settings.feedback_display_ms,
            )

    def auto_check(self, entries: dict, field: str) -> autocheck.AutoCheckDecision:
        """Auto-check decision after ``field`` was edited in the current round."""
        with self._lock:
            if self.state is not RoundState.AWAITING_INPUT:
                return autocheck.AutoCheckDecision(autocheck.AutoCheckAction.NONE)
            wall, hidden, ceiling = self.wall, self.hidden, self.ceiling
        return autocheck.decide(
            wall,
            hidden,
            entries,
            field,
            ceiling,
            per_digit_ms=self.settings.digit_input_timeout_ms,
            max_delay_ms=self.settings.max_input_timeout_ms,
        )

    # ── settings ──────────────────────────────────────────────────────────

    def set_ceiling(self, raw) -> int:
        """
        Apply a custom maximum from the next round on.

        Raises CeilingError and keeps the current ceiling on bad input.
        """
        try:
            value = parse_ceiling(
                raw,
                minimum=self.settings.min_custom_ceiling,
                maximum=self.settings.max_custom_ceiling,
            )
        except CeilingError as exc:
            logger.info("[round_engine] rejected ceiling %r: %s", raw, exc.reason)
            raise
        with self._lock:
            self.ceiling = value
        return value

    # ── score ─────────────────────────────────────────────────────────────

    def increment_right(self) -> Score:
        return self.score_store.increment_right()

    def increment_wrong(self) -> Score:
        return self.score_store.increment_wrong()

    def get_score(self) -> Score:
        return self.score_store.get()

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "state": self.state.value,
                "round_number": self.round_number,
                "ceiling": self.ceiling,
                "wall": self.wall.as_dict() if self.wall else None,
                "hidden": list(self.hidden),
                "score": self.score_store.get().to_dict(),
            }
