"""Adapter - a legacy chemical databank behind the Compound interface."""
from typing import List, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.helpers import format_number


class Compound:
    """Target: what clients display."""

    def __init__(self, chemical: str):
        self.chemical = chemical
        self.boiling_point: float = 0.0
        self.melting_point: float = 0.0
        self.molecular_weight: float = 0.0
        self.molecular_formula: str = ""

    def display(self) -> List[str]:
        return ["", f"Compound: {self.chemical}:"]


class ChemicalDatabank:
    """Adaptee: an API with its own naming and lookup conventions."""

    _CRITICAL_POINTS = {
        # name: (melting, boiling)
        "water": (0.0, 100.0),
        "benzene": (5.5, 80.1),
        "ethanol": (-114.1, 78.3),
    }
    _STRUCTURES = {
        "water": "H20",
        "benzene": "C6H6",
        "ethanol": "C2H5OH",
    }
    _WEIGHTS = {
        "water": 18.015,
        "benzene": 78.1134,
        "ethanol": 46.0688,
    }

    def get_critical_point(self, compound: str, point: str) -> float:
        """Melting point for ``"M"``, boiling point for anything else."""
        melting, boiling = self._CRITICAL_POINTS.get(compound.lower(), (0.0, 0.0))
        return melting if point == "M" else boiling

    def get_molecular_structure(self, compound: str) -> str:
        return self._STRUCTURES.get(compound.lower(), "")

    def get_molecular_weight(self, compound: str) -> float:
        return self._WEIGHTS.get(compound.lower(), 0.0)


class RichCompound(Compound):
    """Adapter: fills a Compound from the databank."""

    def __init__(self, chemical: str, bank: Optional[ChemicalDatabank] = None):
        super().__init__(chemical)
        self._bank = bank or ChemicalDatabank()
        self.boiling_point = self._bank.get_critical_point(chemical, "B")
        self.melting_point = self._bank.get_critical_point(chemical, "M")
        self.molecular_weight = self._bank.get_molecular_weight(chemical)
        self.molecular_formula = self._bank.get_molecular_structure(chemical)

    def display(self) -> List[str]:
        return super().display() + [
            f"   Formula: {self.molecular_formula}",
            f"   Weight : {format_number(self.molecular_weight)}",
            f"   Melting Pt: {format_number(self.melting_point)}",
            f"   Boiling Pt: {format_number(self.boiling_point)}",
        ]


@register_pattern
class AdapterDemo(PatternDemo):
    info = PatternInfo(
        slug="adapter",
        name="Adapter",
        category=PatternCategory.STRUCTURAL,
        intent=(
            "Convert the interface of a class into another interface clients expect, "
            "letting classes work together that couldn't otherwise."
        ),
        participants=[
            Participant(role="Target", class_name="Compound"),
            Participant(role="Adapter", class_name="RichCompound",
                        description="adapts the databank interface to Compound"),
            Participant(role="Adaptee", class_name="ChemicalDatabank"),
            Participant(role="Client", class_name="AdapterDemo"),
        ],
        applicability=[
            "you want to use an existing class whose interface does not match the one you need",
        ],
    )

    def run(self) -> None:
        # Non-adapted chemical compound
        self.emit_lines(Compound("Unknown").display())

        for chemical in ("Water", "Benzene", "Ethanol"):
            self.emit_lines(RichCompound(chemical).display())
