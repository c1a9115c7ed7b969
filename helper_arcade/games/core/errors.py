# helper_arcade/games/core/errors.py
from __future__ import annotations
from typing import Dict, Optional


class PuzzleError(Exception):
    """Base for errors the puzzle API reports back to the caller."""
    status = 400
    default_message = "Puzzle request failed."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return type(self).__name__

    def to_payload(self) -> Dict[str, str]:
        return {"error": self.code, "message": self.message}


class InvalidAnswerFormat(PuzzleError):
    default_message = "Invalid answer. Must provide a whole number."


class NoActivePuzzle(PuzzleError):
    default_message = "No puzzle available. Please generate a puzzle first."


class InternalGenerationFailure(PuzzleError):
    status = 500
    default_message = "Failed to generate puzzle."
