"""Template Method - a fixed data access skeleton with pluggable steps."""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.exceptions import NotConnectedError

# In-memory stand-in for the Northwind sample database
NORTHWIND: Dict[str, List[Dict[str, str]]] = {
    "Categories": [
        {"CategoryName": "Beverages"},
        {"CategoryName": "Condiments"},
        {"CategoryName": "Confections"},
        {"CategoryName": "Dairy Products"},
        {"CategoryName": "Grains/Cereals"},
        {"CategoryName": "Meat/Poultry"},
        {"CategoryName": "Produce"},
        {"CategoryName": "Seafood"},
    ],
    "Products": [
        {"ProductName": "Chai"},
        {"ProductName": "Chang"},
        {"ProductName": "Aniseed Syrup"},
        {"ProductName": "Chef Anton's Cajun Seasoning"},
        {"ProductName": "Grandma's Boysenberry Spread"},
        {"ProductName": "Uncle Bob's Organic Dried Pears"},
        {"ProductName": "Northwoods Cranberry Sauce"},
        {"ProductName": "Mishi Kobe Niku"},
    ],
}


class DataAccessObject(ABC):
    """Abstract class defining the template method :meth:`run`."""

    table = ""

    def __init__(self, database: Optional[Dict[str, List[Dict[str, str]]]] = None):
        self._database = NORTHWIND if database is None else database
        self._connection: Optional[Dict[str, List[Dict[str, str]]]] = None
        self._rows: List[Dict[str, str]] = []

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> None:
        self._connection = self._database

    def select(self) -> None:
        if self._connection is None:
            raise NotConnectedError(f"{self.__class__.__name__} must connect before selecting")
        self._rows = list(self._connection.get(self.table, []))

    @abstractmethod
    def process(self) -> List[str]:
        pass

    def disconnect(self) -> None:
        self._connection = None
        self._rows = []

    def run(self) -> List[str]:
        self.connect()
        try:
            self.select()
            return self.process()
        finally:
            self.disconnect()


class Categories(DataAccessObject):
    table = "Categories"

    def process(self) -> List[str]:
        return ["Categories ---- "] + [row["CategoryName"] for row in self._rows] + [""]


class Products(DataAccessObject):
    table = "Products"

    def process(self) -> List[str]:
        return ["Products ---- "] + [row["ProductName"] for row in self._rows] + [""]


@register_pattern
class TemplateMethodDemo(PatternDemo):
    info = PatternInfo(
        slug="template-method",
        name="Template Method",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Define the skeleton of an algorithm in an operation, deferring some steps "
            "to subclasses."
        ),
        participants=[
            Participant(role="AbstractClass", class_name="DataAccessObject"),
            Participant(role="ConcreteClass", class_name="Categories, Products"),
        ],
        applicability=[
            "implement the invariant parts of an algorithm once and leave the varying parts to subclasses",
        ],
    )

    def run(self) -> None:
        self.emit_lines(Categories().run())
        self.emit_lines(Products().run())
