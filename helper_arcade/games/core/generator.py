# helper_arcade/games/core/generator.py
from __future__ import annotations
from dataclasses import dataclass
from random import Random
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging
import uuid

from .characters import CHARACTER_POOL, Character, OperandAssignment
from .difficulty import OperationType, choose_operation, level_description, range_for_level
from .errors import InternalGenerationFailure

logger = logging.getLogger(__name__)

OPERAND_COUNTS = (2, 3)
FULL_COPIES = 3     # "👨‍⚕️ + 👨‍⚕️ + 👨‍⚕️ = 15"
SHORT_COPIES = 2    # middle operands of a mixed puzzle


def evaluate(values: Sequence[int], operators: Sequence[str]) -> int:
    """Left-to-right evaluation; len(operators) == len(values) - 1."""
    if len(operators) != len(values) - 1:
        raise ValueError("need exactly one operator between each pair of values")
    total = int(values[0])
    for op, v in zip(operators, values[1:]):
        if op == "+":
            total += int(v)
        elif op == "-":
            total -= int(v)
        else:
            raise ValueError(f"unsupported operator {op!r}")
    return total


@dataclass(frozen=True)
class TeachingEquation:
    characters: Tuple[Character, ...]
    operator: str
    total: int

    @property
    def visual(self) -> str:
        joiner = f" {self.operator} "
        return f"{joiner.join(c.glyph for c in self.characters)} = {self.total}"

    def to_payload(self) -> Dict[str, Any]:
        return {
            "characters": [c.to_payload() for c in self.characters],
            "operator": self.operator,
            "total": self.total,
            "visual": self.visual,
        }


@dataclass(frozen=True)
class Puzzle:
    id: str
    level: int
    operation_type: OperationType
    operands: Tuple[OperandAssignment, ...]
    teaching_equations: Tuple[TeachingEquation, ...]
    question_operators: Tuple[str, ...]
    correct_answer: int
    raw_answer: int

    @property
    def question_characters(self) -> Tuple[Character, ...]:
        return tuple(o.character for o in self.operands)

    @property
    def question(self) -> str:
        parts = [self.operands[0].character.glyph]
        for op, operand in zip(self.question_operators, self.operands[1:]):
            parts.append(op)
            parts.append(operand.character.glyph)
        return " ".join(parts) + " = ?"

    def knowledge_cards(self) -> List[Dict[str, Any]]:
        return [o.to_payload() for o in self.operands]

    def public_payload(self) -> Dict[str, Any]:
        """What the client sees before answering: no answer, no operand values."""
        return {
            "puzzleId": self.id,
            "level": self.level,
            "levelDescription": level_description(self.level),
            "operationType": self.operation_type.value,
            "teachingEquations": [eq.to_payload() for eq in self.teaching_equations],
            "questionCharacters": [c.to_payload() for c in self.question_characters],
            "questionOperators": list(self.question_operators),
            "question": self.question,
        }


class PuzzleGenerator:
    """
    Builds "visual algebra" rounds: one teaching equation per helper reveals its
    hidden value, then the question combines the helpers.

        👨‍⚕️ + 👨‍⚕️ + 👨‍⚕️ = 15
        👮 + 👮 + 👮 = 18
        👨‍🍳 + 👨‍🍳 + 👨‍🍳 = 12
        👨‍⚕️ + 👮 + 👨‍🍳 = ?

    Mixed rounds subtract the last helper instead; its middle helpers are taught
    with two copies. A negative mixed answer is published as its absolute value.
    """

    def __init__(
        self,
        pool: Sequence[Character] = CHARACTER_POOL,
        rng: Optional[Random] = None,
        operand_count: int = 3,
    ):
        if operand_count not in OPERAND_COUNTS:
            raise ValueError(f"operand_count must be one of {OPERAND_COUNTS}, got {operand_count}")
        self.pool: Tuple[Character, ...] = tuple(pool)
        self.rng = rng or Random()
        self.operand_count = operand_count

    def generate(self, level: int) -> Puzzle:
        n = self.operand_count
        if len(self.pool) < n:
            raise InternalGenerationFailure(
                f"Character pool has {len(self.pool)} entries; {n} distinct helpers are needed."
            )

        lo, hi = range_for_level(level)
        characters = self.rng.sample(self.pool, n)
        values = [self.rng.randint(lo, hi) for _ in range(n)]
        operation = choose_operation(level, self.rng)
        operands = tuple(OperandAssignment(c, v) for c, v in zip(characters, values))

        if operation is OperationType.ADDITION:
            copies = [FULL_COPIES] * n
            operators = ("+",) * (n - 1)
        else:
            copies = [FULL_COPIES] + [SHORT_COPIES] * (n - 2) + [FULL_COPIES]
            operators = ("+",) * (n - 2) + ("-",)

        equations = tuple(
            TeachingEquation(
                characters=(o.character,) * k,
                operator="+",
                total=evaluate([o.value] * k, ["+"] * (k - 1)),
            )
            for o, k in zip(operands, copies)
        )

        raw = evaluate(values, operators)
        puzzle = Puzzle(
            id=uuid.UUID(int=self.rng.getrandbits(128)).hex,
            level=int(level),
            operation_type=operation,
            operands=operands,
            teaching_equations=equations,
            question_operators=operators,
            correct_answer=abs(raw),
            raw_answer=raw,
        )
        logger.debug(
            "Generated puzzle %s: level=%s op=%s values=%s answer=%s",
            puzzle.id, puzzle.level, operation.value, values, puzzle.correct_answer,
        )
        return puzzle
