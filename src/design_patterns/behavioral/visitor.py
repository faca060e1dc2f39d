"""Visitor - new operations over employees without changing their classes."""
from abc import ABC, abstractmethod
from typing import List

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern


class Visitor(ABC):
    @abstractmethod
    def visit(self, element: "Element") -> str:
        pass


class Element(ABC):
    @abstractmethod
    def accept(self, visitor: Visitor) -> str:
        pass


class Employee(Element):
    def __init__(self, name: str, income: float, vacation_days: int):
        self.name = name
        self.income = income
        self.vacation_days = vacation_days

    def accept(self, visitor: Visitor) -> str:
        return visitor.visit(self)


class Clerk(Employee):
    def __init__(self):
        super().__init__("Hank", 25000.0, 14)


class Director(Employee):
    def __init__(self):
        super().__init__("Elly", 35000.0, 16)


class President(Employee):
    def __init__(self):
        super().__init__("Dick", 45000.0, 21)


class IncomeVisitor(Visitor):
    raise_rate = 1.10

    def visit(self, element: Employee) -> str:
        element.income *= self.raise_rate
        return f"{element.__class__.__name__} {element.name}'s new income: ${element.income:,.2f}"


class VacationVisitor(Visitor):
    extra_days = 3

    def visit(self, element: Employee) -> str:
        element.vacation_days += self.extra_days
        return f"{element.__class__.__name__} {element.name}'s new vacation days: {element.vacation_days}"


class Employees:
    """Object structure."""

    def __init__(self):
        self._employees: List[Employee] = []

    def __len__(self) -> int:
        return len(self._employees)

    def attach(self, employee: Employee) -> None:
        self._employees.append(employee)

    def detach(self, employee: Employee) -> None:
        self._employees.remove(employee)

    def accept(self, visitor: Visitor) -> List[str]:
        return [employee.accept(visitor) for employee in self._employees] + [""]


@register_pattern
class VisitorDemo(PatternDemo):
    info = PatternInfo(
        slug="visitor",
        name="Visitor",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Represent an operation to be performed on the elements of an object "
            "structure without changing the classes of the elements."
        ),
        participants=[
            Participant(role="Visitor", class_name="Visitor"),
            Participant(role="ConcreteVisitor", class_name="IncomeVisitor, VacationVisitor"),
            Participant(role="Element", class_name="Element"),
            Participant(role="ConcreteElement", class_name="Employee"),
            Participant(role="ObjectStructure", class_name="Employees"),
        ],
        applicability=[
            "many distinct and unrelated operations need to be performed on objects in a structure",
        ],
    )

    def run(self) -> None:
        employees = Employees()
        employees.attach(Clerk())
        employees.attach(Director())
        employees.attach(President())

        self.emit_lines(employees.accept(IncomeVisitor()))
        self.emit_lines(employees.accept(VacationVisitor()))
