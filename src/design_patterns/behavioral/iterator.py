"""Iterator - sequential access to an aggregate without exposing its storage."""
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator as TypingIterator, List, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern


class Iterator(ABC):
    @abstractmethod
    def first(self) -> Optional[Any]:
        pass

    @abstractmethod
    def next(self) -> Optional[Any]:
        pass

    @abstractmethod
    def is_done(self) -> bool:
        pass

    @abstractmethod
    def current_item(self) -> Optional[Any]:
        pass


class Aggregate(ABC):
    @abstractmethod
    def create_iterator(self) -> Iterator:
        pass

    def __iter__(self) -> TypingIterator[Any]:
        iterator = self.create_iterator()
        iterator.first()
        while not iterator.is_done():
            yield iterator.current_item()
            iterator.next()


class ConcreteAggregate(Aggregate):
    def __init__(self, items: Iterable[Any] = ()):
        self._items: List[Any] = list(items)

    def create_iterator(self) -> Iterator:
        return ConcreteIterator(self)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        # Assignment inserts, shifting later items
        self._items.insert(index, value)


class ConcreteIterator(Iterator):
    def __init__(self, aggregate: ConcreteAggregate):
        self._aggregate = aggregate
        self._current = 0

    def first(self) -> Optional[Any]:
        self._current = 0
        return self.current_item()

    def next(self) -> Optional[Any]:
        if self._current < len(self._aggregate):
            self._current += 1
        return self.current_item()

    def is_done(self) -> bool:
        return self._current >= len(self._aggregate)

    def current_item(self) -> Optional[Any]:
        if self.is_done():
            return None
        return self._aggregate[self._current]


@register_pattern
class IteratorDemo(PatternDemo):
    info = PatternInfo(
        slug="iterator",
        name="Iterator",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Provide a way to access the elements of an aggregate object sequentially "
            "without exposing its underlying representation."
        ),
        participants=[
            Participant(role="Iterator", class_name="Iterator"),
            Participant(role="ConcreteIterator", class_name="ConcreteIterator",
                        description="keeps track of the current position"),
            Participant(role="Aggregate", class_name="Aggregate"),
            Participant(role="ConcreteAggregate", class_name="ConcreteAggregate"),
        ],
        applicability=[
            "access an aggregate's contents without exposing its internal representation",
            "provide a uniform interface for traversing different aggregate structures",
        ],
    )

    def run(self) -> None:
        aggregate = ConcreteAggregate()
        for index in range(5):
            aggregate[index] = f"Item {index + 1}"

        iterator = aggregate.create_iterator()

        self.emit("Iterating over collection:")
        item = iterator.first()
        while not iterator.is_done():
            self.emit(item)
            item = iterator.next()
