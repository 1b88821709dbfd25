from pydantic import BaseModel
from typing import Optional


class ScoreDTO(BaseModel):
    right: int = 0
    wrong: int = 0


class RoundView(BaseModel):
    """What the presentation layer shows at the start of a round."""
    round_number: int
    ceiling: int
    max_digits: int
    visible: dict[str, Optional[int]]
    hidden: list[str]


class CheckResult(BaseModel):
    is_correct: bool
    field_results: dict[str, bool] = {}
    message: str
    animation: str
    score: ScoreDTO
    solution: dict[str, int] = {}
    display_ms: int = 0
