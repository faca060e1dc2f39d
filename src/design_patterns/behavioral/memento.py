"""Memento - a sales prospect's state saved and restored by a caretaker."""
from dataclasses import dataclass
from typing import Callable, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern

Listener = Callable[[str], None]


@dataclass(frozen=True)
class Memento:
    """Snapshot of a prospect; opaque to everyone but SalesProspect."""
    name: str
    phone: str
    budget: float


class SalesProspect:
    """Originator. Every change is reported to the optional listener."""

    def __init__(self, listener: Optional[Listener] = None):
        self._listener = listener
        self._name = ""
        self._phone = ""
        self._budget = 0.0

    def _notify(self, text: str) -> None:
        if self._listener is not None:
            self._listener(text)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        self._notify(f"Name:   {value}")

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str) -> None:
        self._phone = value
        self._notify(f"Phone:  {value}")

    @property
    def budget(self) -> float:
        return self._budget

    @budget.setter
    def budget(self, value: float) -> None:
        self._budget = value
        self._notify(f"Budget: {value:.2f}")

    def save_memento(self) -> Memento:
        self._notify("\nSaving state --\n")
        return Memento(self._name, self._phone, self._budget)

    def restore_memento(self, memento: Memento) -> None:
        self._notify("\nRestoring state --\n")
        self.name = memento.name
        self.phone = memento.phone
        self.budget = memento.budget


class ProspectMemory:
    """Caretaker: holds the memento without looking inside it."""

    def __init__(self):
        self.memento: Optional[Memento] = None


@register_pattern
class MementoDemo(PatternDemo):
    info = PatternInfo(
        slug="memento",
        name="Memento",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Without violating encapsulation, capture and externalize an object's internal "
            "state so that the object can be restored to this state later."
        ),
        participants=[
            Participant(role="Memento", class_name="Memento"),
            Participant(role="Originator", class_name="SalesProspect"),
            Participant(role="Caretaker", class_name="ProspectMemory"),
        ],
        applicability=[
            "a snapshot of an object's state must be saved so it can be restored later",
        ],
    )

    def run(self) -> None:
        prospect = SalesProspect(listener=self.emit)
        prospect.name = "Noel van Halen"
        prospect.phone = "(412) 256-0990"
        prospect.budget = 25000.0

        # Store internal state
        memory = ProspectMemory()
        memory.memento = prospect.save_memento()

        # Continue changing originator
        prospect.name = "Leo Welch"
        prospect.phone = "(310) 209-7111"
        prospect.budget = 1000000.0

        # Restore saved state
        prospect.restore_memento(memory.memento)
