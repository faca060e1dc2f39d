"""Bridge - customer views decoupled from where customer records live."""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.exceptions import BridgeNotConnectedError

DEFAULT_CUSTOMERS = ("Jim Jones", "Samual Jackson", "Allen Good", "Ann Stills", "Lisa Giolani")


class DataObject(ABC):
    """Implementor: record navigation and editing."""

    @abstractmethod
    def next_record(self) -> None:
        pass

    @abstractmethod
    def prior_record(self) -> None:
        pass

    @abstractmethod
    def add_record(self, name: str) -> None:
        pass

    @abstractmethod
    def delete_record(self, name: str) -> None:
        pass

    @abstractmethod
    def get_current_record(self) -> Optional[str]:
        pass

    @abstractmethod
    def records(self) -> List[str]:
        pass


class CustomersData(DataObject):
    """Concrete implementor backed by an in-memory list with a cursor."""

    def __init__(self, customers: Iterable[str] = DEFAULT_CUSTOMERS):
        self._customers: List[str] = list(customers)
        self._current = 0

    def next_record(self) -> None:
        if self._current < len(self._customers) - 1:
            self._current += 1

    def prior_record(self) -> None:
        if self._current > 0:
            self._current -= 1

    def add_record(self, name: str) -> None:
        self._customers.append(name)

    def delete_record(self, name: str) -> None:
        self._customers.remove(name)
        # Keep the cursor on a valid record
        self._current = min(self._current, max(len(self._customers) - 1, 0))

    def get_current_record(self) -> Optional[str]:
        if not self._customers:
            return None
        return self._customers[self._current]

    def records(self) -> List[str]:
        return list(self._customers)


class CustomersBase:
    """Abstraction: forwards every operation to its DataObject."""

    def __init__(self, group: str, data: Optional[DataObject] = None):
        self.group = group
        self.data = data

    def _implementor(self) -> DataObject:
        if self.data is None:
            raise BridgeNotConnectedError(f"Customer group '{self.group}' has no data object")
        return self.data

    def next(self) -> None:
        self._implementor().next_record()

    def prior(self) -> None:
        self._implementor().prior_record()

    def add(self, name: str) -> None:
        self._implementor().add_record(name)

    def delete(self, name: str) -> None:
        self._implementor().delete_record(name)

    def show(self) -> str:
        return self._implementor().get_current_record() or ""

    def show_all(self) -> List[str]:
        lines = [f"Customer Group: {self.group}"]
        lines.extend(self._implementor().records())
        return lines


class Customers(CustomersBase):
    """Refined abstraction: frames the full listing."""

    def show_all(self) -> List[str]:
        separator = "------------------------"
        return ["", separator] + super().show_all() + [separator]


@register_pattern
class BridgeDemo(PatternDemo):
    info = PatternInfo(
        slug="bridge",
        name="Bridge",
        category=PatternCategory.STRUCTURAL,
        intent="Decouple an abstraction from its implementation so that the two can vary independently.",
        participants=[
            Participant(role="Abstraction", class_name="CustomersBase"),
            Participant(role="RefinedAbstraction", class_name="Customers"),
            Participant(role="Implementor", class_name="DataObject"),
            Participant(role="ConcreteImplementor", class_name="CustomersData"),
        ],
        applicability=[
            "you want to avoid a permanent binding between an abstraction and its implementation",
            "both abstractions and implementations should be extensible by subclassing",
        ],
    )

    def run(self) -> None:
        customers = Customers("Chicago")
        customers.data = CustomersData()

        # Exercise the bridge
        self.emit(customers.show())
        customers.next()
        self.emit(customers.show())
        customers.next()
        self.emit(customers.show())
        customers.add("Henry Velasquez")
        self.emit_lines(customers.show_all())
