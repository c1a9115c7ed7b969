# helper_arcade/games/core/progression.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional
import logging

from .coerce_utils import coerce_answer
from .difficulty import MAX_LEVEL
from .errors import NoActivePuzzle
from .session_state import AttemptRecord, SessionState

logger = logging.getLogger(__name__)

LEVEL_UP_STREAK = 3


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Outcome:
    is_correct: bool
    correct_answer: int
    total_attempts: int
    correct_answers: int
    accuracy: int
    level: int
    consecutive_correct: int
    leveled_up: bool

    def to_payload(self) -> Dict[str, Any]:
        return {
            "isCorrect": self.is_correct,
            "correctAnswer": self.correct_answer,
            "totalAttempts": self.total_attempts,
            "correctAnswers": self.correct_answers,
            "accuracy": self.accuracy,
            "level": self.level,
            "consecutiveCorrect": self.consecutive_correct,
            "leveledUp": self.leveled_up,
        }


class ProgressionEngine:
    """
    Scores answers against the current puzzle and moves the level.

    Three correct answers in a row level up and use up the streak. At the
    level cap the streak is still used up, only the level stays put.
    """

    def __init__(
        self,
        state: SessionState,
        max_level: int = MAX_LEVEL,
        streak_to_level_up: int = LEVEL_UP_STREAK,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.state = state
        self.max_level = max_level
        self.streak_to_level_up = streak_to_level_up
        self.clock = clock or _utcnow

    def submit(self, answer: Any) -> Outcome:
        value = coerce_answer(answer)

        with self.state.locked():
            puzzle = self.state.get_current_puzzle()
            if puzzle is None:
                raise NoActivePuzzle()

            stats = self.state.stats
            is_correct = value == puzzle.correct_answer
            leveled_up = False
            stats.total_attempts += 1

            if is_correct:
                stats.correct_answers += 1
                stats.consecutive_correct += 1
                if stats.consecutive_correct >= self.streak_to_level_up:
                    if stats.level < self.max_level:
                        stats.level += 1
                        leveled_up = True
                        logger.info("Level up: %s -> %s", stats.level - 1, stats.level)
                    stats.consecutive_correct = 0
            else:
                stats.consecutive_correct = 0

            stats.attempts.append(AttemptRecord(
                answer=value,
                correct=is_correct,
                expected=puzzle.correct_answer,
                level=puzzle.level,
                timestamp=self.clock(),
            ))

            outcome = Outcome(
                is_correct=is_correct,
                correct_answer=puzzle.correct_answer,
                total_attempts=stats.total_attempts,
                correct_answers=stats.correct_answers,
                accuracy=stats.accuracy,
                level=stats.level,
                consecutive_correct=stats.consecutive_correct,
                leveled_up=leveled_up,
            )

        logger.debug(
            "Submit puzzle=%s answer=%s expected=%s correct=%s streak=%s",
            puzzle.id, value, puzzle.correct_answer, is_correct, outcome.consecutive_correct,
        )
        return outcome
