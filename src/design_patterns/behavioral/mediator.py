"""Mediator - chat participants only ever talk to the chatroom."""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from design_patterns.catalog import Participant as Role
from design_patterns.catalog import PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.exceptions import UnknownParticipantError


class AbstractChatroom(ABC):
    @abstractmethod
    def register(self, participant: "Participant") -> None:
        pass

    @abstractmethod
    def send(self, sender: str, receiver: str, message: str) -> str:
        pass


class Chatroom(AbstractChatroom):
    """Concrete mediator keyed by participant name."""

    def __init__(self):
        self._participants: Dict[str, "Participant"] = {}

    def register(self, participant: "Participant") -> None:
        self._participants[participant.name] = participant
        participant.chatroom = self

    def send(self, sender: str, receiver: str, message: str) -> str:
        participant = self._participants.get(receiver)
        if participant is None:
            raise UnknownParticipantError(receiver)
        return participant.receive(sender, message)

    @property
    def members(self) -> List[str]:
        return list(self._participants)


class Participant:
    """Colleague."""

    kind = "participant"

    def __init__(self, name: str):
        self.name = name
        self.chatroom: Optional[AbstractChatroom] = None
        self.inbox: List[str] = []

    def send(self, receiver: str, message: str) -> str:
        if self.chatroom is None:
            raise UnknownParticipantError(self.name)
        return self.chatroom.send(self.name, receiver, message)

    def receive(self, sender: str, message: str) -> str:
        self.inbox.append(message)
        return f"To a {self.kind}: {sender} to {self.name}: '{message}'"


class Beatle(Participant):
    kind = "Beatle"


class NonBeatle(Participant):
    kind = "non-Beatle"


@register_pattern
class MediatorDemo(PatternDemo):
    info = PatternInfo(
        slug="mediator",
        name="Mediator",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Define an object that encapsulates how a set of objects interact, promoting "
            "loose coupling by keeping objects from referring to each other explicitly."
        ),
        participants=[
            Role(role="Mediator", class_name="AbstractChatroom"),
            Role(role="ConcreteMediator", class_name="Chatroom"),
            Role(role="Colleague", class_name="Participant"),
            Role(role="ConcreteColleague", class_name="Beatle, NonBeatle"),
        ],
        applicability=[
            "a set of objects communicate in well-defined but complex ways",
            "reusing an object is difficult because it refers to many other objects",
        ],
    )

    def run(self) -> None:
        chatroom = Chatroom()

        george = Beatle("George")
        paul = Beatle("Paul")
        ringo = Beatle("Ringo")
        john = Beatle("John")
        yoko = NonBeatle("Yoko")
        for member in (george, paul, ringo, john, yoko):
            chatroom.register(member)

        self.emit(yoko.send("John", "Hi John!"))
        self.emit(paul.send("Ringo", "All you need is love"))
        self.emit(ringo.send("George", "My sweet Lord"))
        self.emit(paul.send("John", "Can't buy me love"))
        self.emit(john.send("Yoko", "My sweet love"))
