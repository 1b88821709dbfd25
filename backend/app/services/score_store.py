from dataclasses import dataclass, asdict
import threading


@dataclass
class Score:
    right: int = 0
    wrong: int = 0

    @property
    def total(self) -> int:
        return self.right + self.wrong

    def to_dict(self):
        return asdict(self)


class ScoreStore:
    def get(self) -> Score:
        raise NotImplementedError

    def increment_right(self) -> Score:
        raise NotImplementedError

    def increment_wrong(self) -> Score:
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError


class InMemoryScoreStore(ScoreStore):
    """Session score; gone when the process exits."""

    def __init__(self):
        self._score = Score()
        self._lock = threading.Lock()

    def get(self) -> Score:
        with self._lock:
            return Score(self._score.right, self._score.wrong)

    def increment_right(self) -> Score:
        with self._lock:
            self._score.right += 1
            return Score(self._score.right, self._score.wrong)

    def increment_wrong(self) -> Score:
        with self._lock:
            self._score.wrong += 1
            return Score(self._score.right, self._score.wrong)

    def reset(self) -> None:
        with self._lock:
            self._score = Score()
