"""Command - calculator operations as objects with multi-level undo/redo."""
from abc import ABC, abstractmethod
from typing import List, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.exceptions import InvalidOperatorError
from design_patterns.helpers import format_number

INVERSE_OPERATORS = {
    "+": "-",
    "-": "+",
    "*": "/",
    "/": "*",
}


def inverse_operator(operator: str) -> str:
    """Return the operator that undoes ``operator``."""
    try:
        return INVERSE_OPERATORS[operator]
    except KeyError:
        raise InvalidOperatorError(operator) from None


class Calculator:
    """Receiver."""

    def __init__(self, current: float = 0):
        self.current = current

    def operation(self, operator: str, operand: float) -> str:
        if operator == "+":
            self.current += operand
        elif operator == "-":
            self.current -= operand
        elif operator == "*":
            self.current *= operand
        elif operator == "/":
            if operand == 0:
                raise InvalidOperatorError(operator, "division by zero")
            self.current /= operand
        else:
            raise InvalidOperatorError(operator)
        return (
            f"Current value = {format_number(self.current):>3} "
            f"(following {operator} {format_number(operand)})"
        )


class Command(ABC):
    @abstractmethod
    def execute(self) -> str:
        pass

    @abstractmethod
    def unexecute(self) -> str:
        pass


class CalculatorCommand(Command):
    def __init__(self, calculator: Calculator, operator: str, operand: float):
        # Fail before anything runs if the command could never be undone
        inverse_operator(operator)
        if operator == "*" and operand == 0:
            raise InvalidOperatorError(operator, "multiplying by zero cannot be undone")
        self._calculator = calculator
        self.operator = operator
        self.operand = operand

    def execute(self) -> str:
        return self._calculator.operation(self.operator, self.operand)

    def unexecute(self) -> str:
        return self._calculator.operation(inverse_operator(self.operator), self.operand)

    def __repr__(self) -> str:
        return f"CalculatorCommand({self.operator!r}, {self.operand!r})"


class User:
    """
    Invoker: executes commands and keeps the undo history.

    ``_current`` counts the commands currently applied; everything after it
    is the redo tail, discarded as soon as a new command is computed.
    """

    def __init__(self, calculator: Optional[Calculator] = None):
        self.calculator = calculator or Calculator()
        self._commands: List[Command] = []
        self._current = 0

    @property
    def history(self) -> List[Command]:
        return list(self._commands)

    @property
    def can_undo(self) -> bool:
        return self._current > 0

    @property
    def can_redo(self) -> bool:
        return self._current < len(self._commands)

    def compute(self, operator: str, operand: float) -> str:
        command = CalculatorCommand(self.calculator, operator, operand)
        line = command.execute()

        del self._commands[self._current:]
        self._commands.append(command)
        self._current += 1
        return line

    def undo(self, levels: int = 1) -> List[str]:
        lines = []
        for _ in range(levels):
            if not self.can_undo:
                break
            self._current -= 1
            lines.append(self._commands[self._current].unexecute())
        return lines

    def redo(self, levels: int = 1) -> List[str]:
        lines = []
        for _ in range(levels):
            if not self.can_redo:
                break
            lines.append(self._commands[self._current].execute())
            self._current += 1
        return lines


@register_pattern
class CommandDemo(PatternDemo):
    info = PatternInfo(
        slug="command",
        name="Command",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Encapsulate a request as an object, letting you parameterize clients with "
            "requests, queue or log them, and support undoable operations."
        ),
        participants=[
            Participant(role="Command", class_name="Command"),
            Participant(role="ConcreteCommand", class_name="CalculatorCommand",
                        description="binds a calculator to an operator and operand"),
            Participant(role="Receiver", class_name="Calculator"),
            Participant(role="Invoker", class_name="User",
                        description="executes commands and keeps the undo history"),
            Participant(role="Client", class_name="CommandDemo"),
        ],
        applicability=[
            "parameterize objects by an action to perform",
            "support undo",
        ],
    )

    def run(self) -> None:
        user = User()

        # User presses calculator buttons
        self.emit(user.compute("+", 100))
        self.emit(user.compute("-", 50))
        self.emit(user.compute("*", 10))
        self.emit(user.compute("/", 2))

        self.emit()
        self.emit("---- Undo 4 levels ")
        self.emit_lines(user.undo(4))

        self.emit()
        self.emit("---- Redo 3 levels ")
        self.emit_lines(user.redo(3))
