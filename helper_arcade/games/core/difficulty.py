# helper_arcade/games/core/difficulty.py
"""
Level -> difficulty lookups for the helper puzzle game.

Everything here is a pure function of the level. Randomness lives with the
callers (the generator flips the addition/mixed coin with its own rng).
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Tuple

MIN_LEVEL = 1
MAX_LEVEL = 20

MIXED_FROM_LEVEL = 8            # below this every puzzle is addition
HEAVY_SUBTRACTION_FROM_LEVEL = 16
SUBTRACTION_PROBABILITY = 0.4
HEAVY_SUBTRACTION_PROBABILITY = 0.6


class OperationType(str, Enum):
    ADDITION = "addition"
    MIXED = "mixed"


@dataclass(frozen=True)
class LevelBand:
    first: int
    last: int
    min_value: int
    max_value: int
    title: str

    def contains(self, level: int) -> bool:
        return self.first <= level <= self.last


LEVEL_BANDS: Tuple[LevelBand, ...] = (
    LevelBand(1, 3, 2, 5, "Very Easy Addition"),
    LevelBand(4, 6, 3, 8, "Easy Addition"),
    LevelBand(7, 9, 5, 12, "Bigger Numbers"),
    LevelBand(10, 12, 8, 15, "Addition & Subtraction"),
    LevelBand(13, 15, 10, 20, "Mixed Operations"),
    LevelBand(16, MAX_LEVEL, 12, 25, "Expert Challenge"),
)


def band_for_level(level: int) -> LevelBand:
    """Levels past the cap keep using the last band; levels below 1 are an error."""
    level = int(level)
    if level < MIN_LEVEL:
        raise ValueError(f"level must be >= {MIN_LEVEL}, got {level}")
    for band in LEVEL_BANDS:
        if band.contains(level):
            return band
    return LEVEL_BANDS[-1]


def range_for_level(level: int) -> Tuple[int, int]:
    band = band_for_level(level)
    return band.min_value, band.max_value


def subtraction_probability(level: int) -> float:
    band_for_level(level)  # validates
    if level < MIXED_FROM_LEVEL:
        return 0.0
    if level >= HEAVY_SUBTRACTION_FROM_LEVEL:
        return HEAVY_SUBTRACTION_PROBABILITY
    return SUBTRACTION_PROBABILITY


def operation_mix_for_level(level: int) -> float:
    """Probability that a puzzle at this level is pure addition."""
    return 1.0 - subtraction_probability(level)


def choose_operation(level: int, rng: Random) -> OperationType:
    p_sub = subtraction_probability(level)
    if p_sub <= 0.0:
        return OperationType.ADDITION
    return OperationType.MIXED if rng.random() < p_sub else OperationType.ADDITION


def level_description(level: int) -> str:
    band = band_for_level(level)
    return f"⭐ Level {int(level)} - {band.title} ({band.min_value}-{band.max_value})"
