"""Prototype - new colours are cloned from registered prototypes."""
import copy
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Dict, Iterator

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern


class ColorPrototype(ABC):
    @abstractmethod
    def clone(self) -> "ColorPrototype":
        pass


class Color(ColorPrototype):
    def __init__(self, red: int, green: int, blue: int):
        self.red = red
        self.green = green
        self.blue = blue

    def describe_clone(self) -> str:
        return f"Cloning color RGB: {self.red:>3},{self.green:>3},{self.blue:>3}"

    def clone(self) -> "Color":
        """Return a shallow copy."""
        return copy.copy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.red, self.green, self.blue) == (other.red, other.green, other.blue)

    def __hash__(self) -> int:
        return hash((self.red, self.green, self.blue))

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


class ColorManager(MutableMapping):
    """Prototype manager: a name to prototype mapping."""

    def __init__(self):
        self._colors: Dict[str, ColorPrototype] = {}

    def __getitem__(self, key: str) -> ColorPrototype:
        return self._colors[key]

    def __setitem__(self, key: str, value: ColorPrototype) -> None:
        self._colors[key] = value

    def __delitem__(self, key: str) -> None:
        del self._colors[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)


STANDARD_COLORS = {
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
}

PERSONALIZED_COLORS = {
    "angry": (255, 54, 0),
    "peace": (128, 211, 128),
    "flame": (211, 34, 20),
}


@register_pattern
class PrototypeDemo(PatternDemo):
    info = PatternInfo(
        slug="prototype",
        name="Prototype",
        category=PatternCategory.CREATIONAL,
        intent=(
            "Specify the kinds of objects to create using a prototypical instance, "
            "and create new objects by copying this prototype."
        ),
        participants=[
            Participant(role="Prototype", class_name="ColorPrototype",
                        description="declares the cloning interface"),
            Participant(role="ConcretePrototype", class_name="Color"),
            Participant(role="Client", class_name="ColorManager",
                        description="creates new colours by asking a prototype to clone itself"),
        ],
        applicability=[
            "the classes to instantiate are specified at run-time",
            "instances of a class can have one of only a few combinations of state",
        ],
    )

    def run(self) -> None:
        manager = ColorManager()
        for name, rgb in {**STANDARD_COLORS, **PERSONALIZED_COLORS}.items():
            manager[name] = Color(*rgb)

        for name in ("red", "peace", "flame"):
            prototype = manager[name]
            self.emit(prototype.describe_clone())
            prototype.clone()
