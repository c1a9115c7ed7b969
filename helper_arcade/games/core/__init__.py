# helper_arcade/games/core/__init__.py
from .characters import CHARACTER_POOL, Character, OperandAssignment
from .difficulty import (
    MAX_LEVEL,
    OperationType,
    level_description,
    operation_mix_for_level,
    range_for_level,
)
from .errors import InternalGenerationFailure, InvalidAnswerFormat, NoActivePuzzle, PuzzleError
from .game_core import PuzzleGame
from .generator import Puzzle, PuzzleGenerator, TeachingEquation
from .progression import Outcome, ProgressionEngine
from .session_state import AttemptRecord, SessionState, SessionStats
