"""Chain of Responsibility - exam results passed up a chain of lecturers.

Each approver grades the exam if the result is within its range and
otherwise hands it to its successor.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.helpers import format_number


@dataclass(frozen=True)
class Rate:
    """The request: an exam to be graded."""
    id: int
    result: float
    subject: str


class Approver(ABC):
    """Handler with an optional successor."""

    limit: float = 0.0
    grade: str = ""

    def __init__(self):
        self.successor: Optional["Approver"] = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def set_successor(self, successor: "Approver") -> "Approver":
        """Link the next handler; returns it so chains read left to right."""
        self.successor = successor
        return successor

    def approve(self, exam: Rate) -> str:
        return (
            f"{self.name} approved exam# {exam.id} in {exam.subject} "
            f"as '{self.grade}' with {format_number(exam.result)}."
        )

    def can_handle(self, exam: Rate) -> bool:
        return exam.result < self.limit

    @abstractmethod
    def process_request(self, exam: Rate) -> Optional[str]:
        """Handle the exam or pass it on; None when nobody handled it."""


class JuniorLector(Approver):
    limit = 100.0
    grade = "Not Taken"

    def process_request(self, exam: Rate) -> Optional[str]:
        if self.can_handle(exam):
            return self.approve(exam)
        if self.successor is not None:
            return self.successor.process_request(exam)
        return None


class Lector(Approver):
    limit = 200.0
    grade = "Taken"

    def process_request(self, exam: Rate) -> Optional[str]:
        if self.can_handle(exam):
            return self.approve(exam)
        if self.successor is not None:
            return self.successor.process_request(exam)
        return None


class SeniorLector(Approver):
    """End of the chain: escalates anything it cannot grade."""

    limit = 300.0
    grade = "Excellent"

    def process_request(self, exam: Rate) -> Optional[str]:
        if self.can_handle(exam):
            return self.approve(exam)
        if self.successor is not None:
            return self.successor.process_request(exam)
        return f"Exam# {exam.id} in {exam.subject} requires an additional review!"


def build_chain() -> Approver:
    """Junior -> Lector -> Senior; returns the head of the chain."""
    junior = JuniorLector()
    junior.set_successor(Lector()).set_successor(SeniorLector())
    return junior


@register_pattern
class ChainOfResponsibilityDemo(PatternDemo):
    info = PatternInfo(
        slug="chain-of-responsibility",
        name="Chain of Responsibility",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Avoid coupling the sender of a request to its receiver by giving more than "
            "one object a chance to handle the request."
        ),
        participants=[
            Participant(role="Handler", class_name="Approver",
                        description="defines the interface and holds the successor link"),
            Participant(role="ConcreteHandler", class_name="JuniorLector, Lector, SeniorLector"),
            Participant(role="Client", class_name="ChainOfResponsibilityDemo",
                        description="submits exams to the head of the chain"),
        ],
        applicability=[
            "more than one object may handle a request and the handler isn't known a priori",
            "the set of objects that can handle a request should be specified dynamically",
        ],
    )

    exams = (
        Rate(2034, 75.00, "Databases"),
        Rate(2035, 101.00, "Databases"),
        Rate(2036, 295.00, "Design Patterns"),
    )

    def run(self) -> None:
        chain = build_chain()
        for exam in self.exams:
            self.emit(chain.process_request(exam))
