# helper_arcade/games/core/session_state.py
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional
import logging
import math
import threading

from .difficulty import MIN_LEVEL, level_description
from .generator import Puzzle

logger = logging.getLogger(__name__)


def accuracy_percent(correct: int, total: int) -> int:
    """Whole-number percentage, halves rounded up; 0 before any attempt."""
    if total <= 0:
        return 0
    return int(math.floor(correct / total * 100 + 0.5))


@dataclass(frozen=True)
class AttemptRecord:
    answer: int
    correct: bool
    expected: int
    level: int
    timestamp: datetime

    def to_payload(self) -> Dict[str, Any]:
        return {
            "answer": self.answer,
            "correct": self.correct,
            "expected": self.expected,
            "level": self.level,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class SessionStats:
    total_attempts: int = 0
    correct_answers: int = 0
    level: int = MIN_LEVEL
    consecutive_correct: int = 0
    attempts: List[AttemptRecord] = field(default_factory=list)

    @property
    def wrong_answers(self) -> int:
        return self.total_attempts - self.correct_answers

    @property
    def accuracy(self) -> int:
        return accuracy_percent(self.correct_answers, self.total_attempts)

    def snapshot(self) -> "SessionStats":
        # records are frozen, a shallow list copy is enough
        return replace(self, attempts=list(self.attempts))

    def to_payload(self) -> Dict[str, Any]:
        return {
            "totalAttempts": self.total_attempts,
            "correctAnswers": self.correct_answers,
            "wrongAnswers": self.wrong_answers,
            "accuracy": self.accuracy,
            "level": self.level,
            "levelDescription": level_description(self.level),
            "consecutiveCorrect": self.consecutive_correct,
        }

    def history_payload(self) -> Dict[str, Any]:
        return {
            "totalAttempts": self.total_attempts,
            "correctAnswers": self.correct_answers,
            "level": self.level,
            "attempts": [a.to_payload() for a in self.attempts],
        }


class SessionState:
    """
    The one game session of a running app: current puzzle + cumulative stats.
    Writers take `locked()`; the lock is re-entrant so helpers can nest.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._puzzle: Optional[Puzzle] = None
        self._stats = SessionStats()

    @contextmanager
    def locked(self) -> Iterator["SessionState"]:
        with self._lock:
            yield self

    @property
    def stats(self) -> SessionStats:
        """Live stats object; mutate only while holding `locked()`."""
        return self._stats

    def get_current_puzzle(self) -> Optional[Puzzle]:
        with self._lock:
            return self._puzzle

    def set_current_puzzle(self, puzzle: Optional[Puzzle]) -> None:
        with self._lock:
            if self._puzzle is not None and puzzle is not None:
                logger.debug("Puzzle %s superseded by %s", self._puzzle.id, puzzle.id)
            self._puzzle = puzzle

    def get_stats(self) -> SessionStats:
        with self._lock:
            return self._stats.snapshot()

    def reset_all(self) -> SessionStats:
        with self._lock:
            self._stats = SessionStats()
            self._puzzle = None
            logger.info("Session state reset")
            return self._stats.snapshot()
