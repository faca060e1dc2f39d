"""Builder - a shop assembles different vehicles step by step.

The director (Shop) knows the construction order; each builder knows how to
make its own parts.
"""
from abc import ABC, abstractmethod
from typing import Dict, List

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern

PART_KEYS = ("frame", "engine", "wheels", "doors")


class Vehicle:
    """The product: a vehicle type plus named parts."""

    def __init__(self, vehicle_type: str):
        self.vehicle_type = vehicle_type
        self._parts: Dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        return self._parts[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._parts[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._parts

    @property
    def is_complete(self) -> bool:
        return all(key in self._parts for key in PART_KEYS)

    def show(self) -> List[str]:
        return [
            f"Vehicle Type: {self.vehicle_type}:",
            f"   Frame : {self['frame']}",
            f"   Engine : {self['engine']}",
            f"   #Wheels: {self['wheels']}",
            f"   #Doors : {self['doors']}",
            "---------------------------",
        ]


class VehicleBuilder(ABC):
    """Abstract builder for the parts of a vehicle."""

    def __init__(self, vehicle_type: str):
        self._vehicle = Vehicle(vehicle_type)

    @property
    def vehicle(self) -> Vehicle:
        return self._vehicle

    @abstractmethod
    def build_frame(self) -> None:
        pass

    @abstractmethod
    def build_engine(self) -> None:
        pass

    @abstractmethod
    def build_wheels(self) -> None:
        pass

    @abstractmethod
    def build_doors(self) -> None:
        pass


class MotorCycleBuilder(VehicleBuilder):
    def __init__(self):
        super().__init__("MotorCycle")

    def build_frame(self) -> None:
        self.vehicle["frame"] = "MotorCycle Frame"

    def build_engine(self) -> None:
        self.vehicle["engine"] = "500 cc"

    def build_wheels(self) -> None:
        self.vehicle["wheels"] = "2"

    def build_doors(self) -> None:
        self.vehicle["doors"] = "0"


class CarBuilder(VehicleBuilder):
    def __init__(self):
        super().__init__("Car")

    def build_frame(self) -> None:
        self.vehicle["frame"] = "Car Frame"

    def build_engine(self) -> None:
        self.vehicle["engine"] = "2500 cc"

    def build_wheels(self) -> None:
        self.vehicle["wheels"] = "4"

    def build_doors(self) -> None:
        self.vehicle["doors"] = "4"


class ScooterBuilder(VehicleBuilder):
    def __init__(self):
        super().__init__("Scooter")

    def build_frame(self) -> None:
        self.vehicle["frame"] = "Scooter Frame"

    def build_engine(self) -> None:
        self.vehicle["engine"] = "50 cc"

    def build_wheels(self) -> None:
        self.vehicle["wheels"] = "2"

    def build_doors(self) -> None:
        self.vehicle["doors"] = "0"


class Shop:
    """The director: runs the building steps in a fixed order."""

    def construct(self, builder: VehicleBuilder) -> Vehicle:
        builder.build_frame()
        builder.build_engine()
        builder.build_wheels()
        builder.build_doors()
        return builder.vehicle


@register_pattern
class BuilderDemo(PatternDemo):
    info = PatternInfo(
        slug="builder",
        name="Builder",
        category=PatternCategory.CREATIONAL,
        intent=(
            "Separate the construction of a complex object from its representation "
            "so that the same construction process can create different representations."
        ),
        participants=[
            Participant(role="Builder", class_name="VehicleBuilder",
                        description="abstract interface for creating vehicle parts"),
            Participant(role="ConcreteBuilder",
                        class_name="MotorCycleBuilder, CarBuilder, ScooterBuilder"),
            Participant(role="Director", class_name="Shop",
                        description="constructs a vehicle through the builder interface"),
            Participant(role="Product", class_name="Vehicle"),
        ],
        applicability=[
            "the algorithm for creating an object should be independent of its parts",
            "construction must allow different representations of the built object",
        ],
    )

    def run(self) -> None:
        shop = Shop()
        for builder in (ScooterBuilder(), CarBuilder(), MotorCycleBuilder()):
            self.emit_lines(shop.construct(builder).show())
