"""Flyweight - shared glyph objects for every occurrence of a character."""
from abc import ABC
from typing import Dict, Type

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.exceptions import UnknownCharacterError


class Character(ABC):
    """Flyweight: intrinsic glyph metrics; point size is extrinsic."""

    symbol: str = ""
    width: int = 0
    height: int = 0
    ascent: int = 0
    descent: int = 0

    def display(self, point_size: int) -> str:
        return f"{self.symbol} (pointsize {point_size})"


class CharacterA(Character):
    symbol = "A"
    width = 120
    height = 100
    ascent = 70
    descent = 0


class CharacterB(Character):
    symbol = "B"
    width = 140
    height = 100
    ascent = 72
    descent = 0


class CharacterZ(Character):
    symbol = "Z"
    width = 100
    height = 100
    ascent = 68
    descent = 0


class CharacterFactory:
    """Creates each flyweight once and hands out the shared instance."""

    _GLYPHS: Dict[str, Type[Character]] = {
        "A": CharacterA,
        "B": CharacterB,
        "Z": CharacterZ,
    }

    def __init__(self):
        self._characters: Dict[str, Character] = {}

    def get_character(self, key: str) -> Character:
        character = self._characters.get(key)
        if character is None:
            glyph = self._GLYPHS.get(key)
            if glyph is None:
                raise UnknownCharacterError(key)
            character = glyph()
            self._characters[key] = character
        return character

    def __len__(self) -> int:
        return len(self._characters)


@register_pattern
class FlyweightDemo(PatternDemo):
    info = PatternInfo(
        slug="flyweight",
        name="Flyweight",
        category=PatternCategory.STRUCTURAL,
        intent="Use sharing to support large numbers of fine-grained objects efficiently.",
        participants=[
            Participant(role="Flyweight", class_name="Character"),
            Participant(role="ConcreteFlyweight", class_name="CharacterA, CharacterB, CharacterZ"),
            Participant(role="FlyweightFactory", class_name="CharacterFactory"),
            Participant(role="Client", class_name="FlyweightDemo",
                        description="supplies the extrinsic point size"),
        ],
        applicability=[
            "an application uses a large number of objects whose state is mostly extrinsic",
        ],
    )

    document = "AAZZBBZB"

    def run(self) -> None:
        factory = CharacterFactory()

        # Extrinsic state
        point_size = 10
        for key in self.document:
            point_size += 1
            self.emit(factory.get_character(key).display(point_size))
