"""Interpreter - a grammar of Roman numerals, one expression per place value."""
from abc import ABC
from typing import List, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern
from design_patterns.exceptions import InvalidExpressionError


class Context:
    """Remaining input and the value interpreted so far."""

    def __init__(self, text: str):
        self.input = text
        self.output = 0


class Expression(ABC):
    """Terminal expression for one decimal place."""

    one: str = ""
    four: Optional[str] = None
    five: Optional[str] = None
    nine: Optional[str] = None
    multiplier: int = 1

    def _consume(self, context: Context, token: Optional[str], value: int) -> bool:
        if token and context.input.startswith(token):
            context.output += value * self.multiplier
            context.input = context.input[len(token):]
            return True
        return False

    def interpret(self, context: Context) -> None:
        if not context.input:
            return

        if not self._consume(context, self.nine, 9) and not self._consume(context, self.four, 4):
            self._consume(context, self.five, 5)

        while self._consume(context, self.one, 1):
            pass


class ThousandExpression(Expression):
    one = "M"
    multiplier = 1000


class HundredExpression(Expression):
    one, four, five, nine = "C", "CD", "D", "CM"
    multiplier = 100


class TenExpression(Expression):
    one, four, five, nine = "X", "XL", "L", "XC"
    multiplier = 10


class OneExpression(Expression):
    one, four, five, nine = "I", "IV", "V", "IX"
    multiplier = 1


def build_tree() -> List[Expression]:
    """The parse tree, highest place value first."""
    return [ThousandExpression(), HundredExpression(), TenExpression(), OneExpression()]


def parse_roman(text: str) -> int:
    """
    Interpret a Roman numeral.

    Raises:
        InvalidExpressionError: If any part of the input is not understood
    """
    context = Context(text.strip().upper())
    for expression in build_tree():
        expression.interpret(context)
    if context.input:
        raise InvalidExpressionError(text, context.input)
    return context.output


@register_pattern
class InterpreterDemo(PatternDemo):
    info = PatternInfo(
        slug="interpreter",
        name="Interpreter",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Given a language, define a representation for its grammar along with an "
            "interpreter that uses the representation to interpret sentences."
        ),
        participants=[
            Participant(role="AbstractExpression", class_name="Expression"),
            Participant(role="TerminalExpression",
                        class_name="ThousandExpression, HundredExpression, TenExpression, OneExpression"),
            Participant(role="Context", class_name="Context"),
            Participant(role="Client", class_name="InterpreterDemo",
                        description="builds the parse tree and invokes interpret"),
        ],
        applicability=[
            "the grammar is simple and efficiency is not a critical concern",
        ],
    )

    roman = "MCMXXVIII"

    def run(self) -> None:
        self.emit(f"{self.roman} = {parse_roman(self.roman)}")
