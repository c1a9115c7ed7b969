"""Tests for PuzzleGenerator."""

from __future__ import annotations

from random import Random

import pytest

from helper_arcade.games.core.characters import CHARACTER_POOL
from helper_arcade.games.core.difficulty import MAX_LEVEL, OperationType, range_for_level
from helper_arcade.games.core.errors import InternalGenerationFailure
from helper_arcade.games.core.generator import PuzzleGenerator, evaluate

from conftest import ScriptedRandom

DOCTOR, COOK, POLICE = CHARACTER_POOL[:3]


class TestAdditionPuzzle:
    def test_exact_puzzle(self):
        gen = PuzzleGenerator(rng=ScriptedRandom(values=[2, 3, 4]))
        p = gen.generate(1)

        assert p.operation_type is OperationType.ADDITION
        assert p.question_characters == (DOCTOR, COOK, POLICE)
        assert p.question_operators == ("+", "+")
        assert [eq.total for eq in p.teaching_equations] == [6, 9, 12]
        assert [len(eq.characters) for eq in p.teaching_equations] == [3, 3, 3]
        assert p.teaching_equations[0].visual == "👨‍⚕️ + 👨‍⚕️ + 👨‍⚕️ = 6"
        assert p.question == "👨‍⚕️ + 👨‍🍳 + 👮 = ?"
        assert p.correct_answer == 9
        assert p.id == "00000000000000000000000000000abc"

    def test_two_operands(self):
        gen = PuzzleGenerator(rng=ScriptedRandom(values=[5, 2]), operand_count=2)
        p = gen.generate(3)
        assert p.question == "👨‍⚕️ + 👨‍🍳 = ?"
        assert p.correct_answer == 7
        assert len(p.teaching_equations) == 2


class TestMixedPuzzle:
    def test_exact_puzzle(self):
        gen = PuzzleGenerator(rng=ScriptedRandom(values=[8, 9, 15], coin=0.1))
        p = gen.generate(10)

        assert p.operation_type is OperationType.MIXED
        assert p.question_operators == ("+", "-")
        assert [len(eq.characters) for eq in p.teaching_equations] == [3, 2, 3]
        assert [eq.total for eq in p.teaching_equations] == [24, 18, 45]
        assert all(eq.operator == "+" for eq in p.teaching_equations)
        assert p.question == "👨‍⚕️ + 👨‍🍳 - 👮 = ?"
        assert p.correct_answer == 2

    def test_negative_answer_published_as_absolute_value(self):
        gen = PuzzleGenerator(rng=ScriptedRandom(values=[12, 12, 25], coin=0.1))
        p = gen.generate(16)
        assert p.raw_answer == -1
        assert p.correct_answer == 1

    def test_two_operands_subtracts_last(self):
        gen = PuzzleGenerator(rng=ScriptedRandom(values=[20, 25], coin=0.1), operand_count=2)
        p = gen.generate(17)
        assert p.question == "👨‍⚕️ - 👨‍🍳 = ?"
        assert [len(eq.characters) for eq in p.teaching_equations] == [3, 3]
        assert p.correct_answer == 5

    def test_coin_above_threshold_stays_addition(self):
        gen = PuzzleGenerator(rng=ScriptedRandom(values=[8, 9, 15], coin=0.5))
        assert gen.generate(10).operation_type is OperationType.ADDITION


class TestPublicPayload:
    def test_withholds_answer_and_values(self):
        p = PuzzleGenerator(rng=ScriptedRandom(values=[2, 3, 4])).generate(1)
        payload = p.public_payload()
        assert "correctAnswer" not in payload
        assert "knowledgeCards" not in payload
        assert payload["puzzleId"] == p.id
        assert payload["operationType"] == "addition"
        assert payload["questionCharacters"][0] == {"name": "Doctor", "glyph": "👨‍⚕️"}
        assert payload["teachingEquations"][1]["total"] == 9

    def test_knowledge_cards(self):
        p = PuzzleGenerator(rng=ScriptedRandom(values=[2, 3, 4])).generate(1)
        cards = p.knowledge_cards()
        assert [c["value"] for c in cards] == [2, 3, 4]
        assert cards[2]["character"]["name"] == "Police"


class TestGeneratedPuzzleProperties:
    @pytest.mark.parametrize("level", range(1, MAX_LEVEL + 1))
    def test_invariants(self, level):
        gen = PuzzleGenerator(rng=Random(level))
        lo, hi = range_for_level(level)
        for _ in range(25):
            p = gen.generate(level)
            values = [o.value for o in p.operands]

            assert p.level == level
            assert len({c.name for c in p.question_characters}) == 3
            assert all(lo <= v <= hi for v in values)
            assert len(p.question_operators) == len(p.question_characters) - 1
            assert p.correct_answer >= 0
            assert p.correct_answer == abs(evaluate(values, p.question_operators))
            for eq, operand in zip(p.teaching_equations, p.operands):
                assert set(eq.characters) == {operand.character}
                assert eq.total == operand.value * len(eq.characters)
            if level < 8:
                assert p.operation_type is OperationType.ADDITION

    def test_seeded_generators_repeat(self):
        a = PuzzleGenerator(rng=Random(99)).generate(12)
        b = PuzzleGenerator(rng=Random(99)).generate(12)
        assert a == b

    def test_fresh_ids(self):
        gen = PuzzleGenerator(rng=Random(3))
        assert gen.generate(1).id != gen.generate(1).id


class TestFailures:
    def test_pool_too_small(self):
        gen = PuzzleGenerator(pool=CHARACTER_POOL[:2])
        with pytest.raises(InternalGenerationFailure):
            gen.generate(1)

    def test_two_operand_pool_is_enough_for_two(self):
        gen = PuzzleGenerator(pool=CHARACTER_POOL[:2], operand_count=2)
        assert gen.generate(1).correct_answer > 0

    def test_bad_operand_count(self):
        with pytest.raises(ValueError):
            PuzzleGenerator(operand_count=4)

    def test_evaluate_rejects_unknown_operator(self):
        with pytest.raises(ValueError):
            evaluate([1, 2], ["*"])
