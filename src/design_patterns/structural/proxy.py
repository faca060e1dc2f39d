"""Proxy - a stand-in that creates the real math object on first use."""
from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.helpers import format_number


class MathSubject(ABC):
    @abstractmethod
    def add(self, x: float, y: float) -> float:
        pass

    @abstractmethod
    def sub(self, x: float, y: float) -> float:
        pass

    @abstractmethod
    def mul(self, x: float, y: float) -> float:
        pass

    @abstractmethod
    def div(self, x: float, y: float) -> float:
        pass


class Math(MathSubject):
    """Real subject."""

    def add(self, x: float, y: float) -> float:
        return x + y

    def sub(self, x: float, y: float) -> float:
        return x - y

    def mul(self, x: float, y: float) -> float:
        return x * y

    def div(self, x: float, y: float) -> float:
        return x / y


class MathProxy(MathSubject):
    """Creates the real subject lazily and counts forwarded calls."""

    def __init__(self):
        self._math: Optional[Math] = None
        self.calls = 0

    @property
    def is_connected(self) -> bool:
        return self._math is not None

    def _subject(self) -> Math:
        if self._math is None:
            self._math = Math()
        self.calls += 1
        return self._math

    def add(self, x: float, y: float) -> float:
        return self._subject().add(x, y)

    def sub(self, x: float, y: float) -> float:
        return self._subject().sub(x, y)

    def mul(self, x: float, y: float) -> float:
        return self._subject().mul(x, y)

    def div(self, x: float, y: float) -> float:
        return self._subject().div(x, y)


@register_pattern
class ProxyDemo(PatternDemo):
    info = PatternInfo(
        slug="proxy",
        name="Proxy",
        category=PatternCategory.STRUCTURAL,
        intent="Provide a surrogate or placeholder for another object to control access to it.",
        participants=[
            Participant(role="Subject", class_name="MathSubject"),
            Participant(role="RealSubject", class_name="Math"),
            Participant(role="Proxy", class_name="MathProxy",
                        description="controls access to and creation of the real subject"),
        ],
        applicability=[
            "a more versatile or sophisticated reference than a simple pointer is needed",
        ],
    )

    def run(self) -> None:
        proxy = MathProxy()

        # Do the math
        self.emit(f"4 + 2 = {format_number(proxy.add(4, 2))}")
        self.emit(f"4 - 2 = {format_number(proxy.sub(4, 2))}")
        self.emit(f"4 * 2 = {format_number(proxy.mul(4, 2))}")
        self.emit(f"4 / 2 = {format_number(proxy.div(4, 2))}")
