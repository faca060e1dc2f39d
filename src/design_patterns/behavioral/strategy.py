"""Strategy - interchangeable sorting algorithms behind one interface."""
from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern


class SortStrategy(ABC):
    label = ""

    @abstractmethod
    def sort(self, items: List[str]) -> List[str]:
        """Return a new sorted list; the input is left untouched."""


class QuickSort(SortStrategy):
    label = "QuickSorted"

    def sort(self, items: List[str]) -> List[str]:
        if len(items) <= 1:
            return list(items)
        pivot, rest = items[0], items[1:]
        lower = [item for item in rest if item < pivot]
        upper = [item for item in rest if item >= pivot]
        return self.sort(lower) + [pivot] + self.sort(upper)


class ShellSort(SortStrategy):
    label = "ShellSorted"

    def sort(self, items: List[str]) -> List[str]:
        result = list(items)
        gap = len(result) // 2
        while gap > 0:
            for i in range(gap, len(result)):
                current = result[i]
                j = i
                while j >= gap and result[j - gap] > current:
                    result[j] = result[j - gap]
                    j -= gap
                result[j] = current
            gap //= 2
        return result


class MergeSort(SortStrategy):
    label = "MergeSorted"

    def sort(self, items: List[str]) -> List[str]:
        if len(items) <= 1:
            return list(items)
        middle = len(items) // 2
        left = self.sort(items[:middle])
        right = self.sort(items[middle:])

        merged = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged


class SortedList:
    """Context."""

    def __init__(self, strategy: Optional[SortStrategy] = None):
        self._items: List[str] = []
        self._strategy = strategy or QuickSort()

    @property
    def items(self) -> List[str]:
        return list(self._items)

    def add(self, name: str) -> None:
        self._items.append(name)

    def set_sort_strategy(self, strategy: SortStrategy) -> None:
        self._strategy = strategy

    def sort(self) -> List[str]:
        self._items = self._strategy.sort(self._items)
        return [f"{self._strategy.label} list "] + [f" {item}" for item in self._items] + [""]


@register_pattern
class StrategyDemo(PatternDemo):
    info = PatternInfo(
        slug="strategy",
        name="Strategy",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Define a family of algorithms, encapsulate each one, and make them "
            "interchangeable."
        ),
        participants=[
            Participant(role="Strategy", class_name="SortStrategy"),
            Participant(role="ConcreteStrategy", class_name="QuickSort, ShellSort, MergeSort"),
            Participant(role="Context", class_name="SortedList"),
        ],
        applicability=[
            "many related classes differ only in their behavior",
            "you need different variants of an algorithm",
        ],
    )

    names = ("Samual", "Jimmy", "Sandra", "Vivek", "Anna")

    def run(self) -> None:
        students = SortedList()
        for name in self.names:
            students.add(name)

        for strategy in (QuickSort(), ShellSort(), MergeSort()):
            students.set_sort_strategy(strategy)
            self.emit_lines(students.sort())
