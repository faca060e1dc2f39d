"""Decorator - lending behaviour added to library items at run time."""
from abc import ABC, abstractmethod
from typing import List

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.exceptions import NoCopiesAvailableError


class LibraryItem(ABC):
    """Component."""

    def __init__(self, num_copies: int = 0):
        self.num_copies = num_copies

    @property
    @abstractmethod
    def title(self) -> str:
        pass

    @abstractmethod
    def display(self) -> List[str]:
        pass


class Book(LibraryItem):
    def __init__(self, author: str, title: str, num_copies: int):
        super().__init__(num_copies)
        self.author = author
        self._title = title

    @property
    def title(self) -> str:
        return self._title

    def display(self) -> List[str]:
        return [
            "",
            "Book:",
            f"   Author: {self.author}",
            f"   Title: {self.title}",
            f"   # Copies: {self.num_copies}",
        ]


class Video(LibraryItem):
    def __init__(self, director: str, title: str, num_copies: int, playtime: int):
        super().__init__(num_copies)
        self.director = director
        self._title = title
        self.playtime = playtime

    @property
    def title(self) -> str:
        return self._title

    def display(self) -> List[str]:
        return [
            "",
            "Video:",
            f"   Director: {self.director}",
            f"   Title: {self.title}",
            f"   # Copies: {self.num_copies}",
            f"   Playtime: {self.playtime}",
        ]


class Decorator(LibraryItem):
    """Forwards everything to the wrapped item."""

    def __init__(self, item: LibraryItem):
        # Copies live on the wrapped item
        self._item = item

    @property
    def item(self) -> LibraryItem:
        return self._item

    @property
    def num_copies(self) -> int:
        return self._item.num_copies

    @num_copies.setter
    def num_copies(self, value: int) -> None:
        self._item.num_copies = value

    @property
    def title(self) -> str:
        return self._item.title

    def display(self) -> List[str]:
        return self._item.display()


class Borrowable(Decorator):
    """Concrete decorator: tracks who borrowed copies of the item."""

    def __init__(self, item: LibraryItem):
        super().__init__(item)
        self.borrowers: List[str] = []

    def borrow_item(self, name: str) -> None:
        if self.num_copies <= 0:
            raise NoCopiesAvailableError(self.title)
        self.borrowers.append(name)
        self.num_copies -= 1

    def return_item(self, name: str) -> None:
        if name not in self.borrowers:
            raise ValueError(f"'{name}' has not borrowed '{self.title}'")
        self.borrowers.remove(name)
        self.num_copies += 1

    def display(self) -> List[str]:
        return super().display() + [f"   borrower: {name}" for name in self.borrowers]


@register_pattern
class DecoratorDemo(PatternDemo):
    info = PatternInfo(
        slug="decorator",
        name="Decorator",
        category=PatternCategory.STRUCTURAL,
        intent=(
            "Attach additional responsibilities to an object dynamically, as a flexible "
            "alternative to subclassing."
        ),
        participants=[
            Participant(role="Component", class_name="LibraryItem"),
            Participant(role="ConcreteComponent", class_name="Book, Video"),
            Participant(role="Decorator", class_name="Decorator",
                        description="keeps a reference to the wrapped item and forwards to it"),
            Participant(role="ConcreteDecorator", class_name="Borrowable"),
        ],
        applicability=[
            "add responsibilities to individual objects without affecting other objects",
            "extension by subclassing is impractical",
        ],
    )

    def run(self) -> None:
        book = Book("Worley", "Inside ASP.NET", 10)
        self.emit_lines(book.display())

        video = Video("Spielberg", "Jaws", 23, 92)
        self.emit_lines(video.display())

        # Make video borrowable, then borrow and display
        self.emit()
        self.emit("Making video borrowable:")
        borrow_video = Borrowable(video)
        borrow_video.borrow_item("Customer #1")
        borrow_video.borrow_item("Customer #2")
        self.emit_lines(borrow_video.display())
