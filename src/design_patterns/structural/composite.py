"""Composite - a drawing made of primitive shapes and nested groups."""
from abc import ABC, abstractmethod
from typing import List

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.exceptions import UnsupportedOperationError


class DrawingElement(ABC):
    """Component: the uniform interface for leaves and groups."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def add(self, element: "DrawingElement") -> None:
        pass

    @abstractmethod
    def remove(self, element: "DrawingElement") -> None:
        pass

    @abstractmethod
    def display(self, indent: int = 0) -> List[str]:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class PrimitiveElement(DrawingElement):
    """Leaf."""

    def add(self, element: DrawingElement) -> None:
        raise UnsupportedOperationError("Cannot add to a PrimitiveElement")

    def remove(self, element: DrawingElement) -> None:
        raise UnsupportedOperationError("Cannot remove from a PrimitiveElement")

    def display(self, indent: int = 0) -> List[str]:
        return ["-" * indent + " " + self.name]


class CompositeElement(DrawingElement):
    """Composite: holds child elements and displays them one level deeper."""

    def __init__(self, name: str):
        super().__init__(name)
        self._elements: List[DrawingElement] = []

    @property
    def children(self) -> List[DrawingElement]:
        return list(self._elements)

    def add(self, element: DrawingElement) -> None:
        self._elements.append(element)

    def remove(self, element: DrawingElement) -> None:
        self._elements.remove(element)

    def display(self, indent: int = 0) -> List[str]:
        lines = ["-" * indent + "+ " + self.name]
        for element in self._elements:
            lines.extend(element.display(indent + 2))
        return lines


@register_pattern
class CompositeDemo(PatternDemo):
    info = PatternInfo(
        slug="composite",
        name="Composite",
        category=PatternCategory.STRUCTURAL,
        intent=(
            "Compose objects into tree structures to represent part-whole hierarchies, "
            "treating individual objects and compositions uniformly."
        ),
        participants=[
            Participant(role="Component", class_name="DrawingElement"),
            Participant(role="Leaf", class_name="PrimitiveElement"),
            Participant(role="Composite", class_name="CompositeElement"),
            Participant(role="Client", class_name="CompositeDemo"),
        ],
        applicability=[
            "you want to represent part-whole hierarchies of objects",
            "clients should ignore the difference between compositions and individual objects",
        ],
    )

    def run(self) -> None:
        root = CompositeElement("Picture")
        root.add(PrimitiveElement("Red Line"))
        root.add(PrimitiveElement("Blue Circle"))
        root.add(PrimitiveElement("Green Box"))

        comp = CompositeElement("Two Circles")
        comp.add(PrimitiveElement("Black Circle"))
        comp.add(PrimitiveElement("White Circle"))
        root.add(comp)

        # Add and remove a PrimitiveElement
        yellow = PrimitiveElement("Yellow Line")
        root.add(yellow)
        root.remove(yellow)

        self.emit_lines(root.display(1))
