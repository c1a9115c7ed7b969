# helper_arcade/games/core/characters.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Character:
    name: str
    glyph: str

    def to_payload(self) -> Dict[str, str]:
        return {"name": self.name, "glyph": self.glyph}


@dataclass(frozen=True)
class OperandAssignment:
    """A helper and the hidden value it stands for in one puzzle."""
    character: Character
    value: int

    def to_payload(self) -> Dict[str, Any]:
        return {"character": self.character.to_payload(), "value": self.value}


CHARACTER_POOL: Tuple[Character, ...] = (
    Character("Doctor", "👨‍⚕️"),
    Character("Cook", "👨‍🍳"),
    Character("Police", "👮"),
    Character("Firefighter", "👨‍🚒"),
    Character("Teacher", "👩‍🏫"),
    Character("Engineer", "👷"),
    Character("Nurse", "👩‍⚕️"),
    Character("Farmer", "👨‍🌾"),
)
