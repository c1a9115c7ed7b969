# helper_arcade/games/core/game_core.py
from __future__ import annotations
from random import Random
from typing import Any, Dict, Mapping, Optional
import logging

from .difficulty import level_description
from .generator import Puzzle, PuzzleGenerator
from .progression import ProgressionEngine
from .session_state import SessionState

logger = logging.getLogger(__name__)


class PuzzleGame:
    """
    Wires one session state to its generator and progression engine.
    Lives inside current_app.extensions['puzzle_game'].
    """

    def __init__(
        self,
        state: Optional[SessionState] = None,
        generator: Optional[PuzzleGenerator] = None,
        engine: Optional[ProgressionEngine] = None,
    ):
        self.state = state or SessionState()
        self.generator = generator or PuzzleGenerator()
        self.engine = engine or ProgressionEngine(self.state)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "PuzzleGame":
        seed = config.get("PUZZLE_SEED")
        rng = Random(seed) if seed is not None else Random()
        generator = PuzzleGenerator(
            rng=rng,
            operand_count=int(config.get("PUZZLE_OPERAND_COUNT", 3)),
        )
        logger.info(
            "Puzzle game ready: operands=%s seeded=%s",
            generator.operand_count, seed is not None,
        )
        return cls(generator=generator)

    # ---- operations ----
    def new_puzzle(self) -> Puzzle:
        """Generate at the session's level and make it the current puzzle."""
        with self.state.locked():
            puzzle = self.generator.generate(self.state.stats.level)
            self.state.set_current_puzzle(puzzle)
        return puzzle

    def submit(self, answer: Any) -> Dict[str, Any]:
        with self.state.locked():
            outcome = self.engine.submit(answer)
            puzzle = self.state.get_current_puzzle()
        payload = outcome.to_payload()
        payload["levelDescription"] = level_description(outcome.level)
        payload["knowledgeCards"] = puzzle.knowledge_cards() if puzzle else []
        return payload

    # ---- readouts ----
    def puzzle_payload(self, puzzle: Puzzle) -> Dict[str, Any]:
        payload = puzzle.public_payload()
        payload["consecutiveCorrect"] = self.state.get_stats().consecutive_correct
        return payload

    def stats(self) -> Dict[str, Any]:
        return self.state.get_stats().to_payload()

    def history(self) -> Dict[str, Any]:
        return self.state.get_stats().history_payload()

    def reset(self) -> Dict[str, Any]:
        stats = self.state.reset_all()
        payload = stats.to_payload()
        payload["attempts"] = []
        return payload
