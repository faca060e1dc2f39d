"""Tests for chain of responsibility, command and interpreter."""
import pytest

from design_patterns.behavioral.chain_of_responsibility import (
    JuniorLector,
    Lector,
    Rate,
    SeniorLector,
    build_chain,
)
from design_patterns.behavioral.command import (
    Calculator,
    CalculatorCommand,
    User,
    inverse_operator,
)
from design_patterns.behavioral.interpreter import Context, TenExpression, parse_roman
from design_patterns.exceptions import InvalidExpressionError, InvalidOperatorError


class TestChainOfResponsibility:
    """Test exam grading along the lecturer chain."""

    @pytest.mark.parametrize(
        "result,expected",
        [
            (75.0, "JuniorLector approved exam# 1 in Maths as 'Not Taken' with 75."),
            (101.0, "Lector approved exam# 1 in Maths as 'Taken' with 101."),
            (295.0, "SeniorLector approved exam# 1 in Maths as 'Excellent' with 295."),
        ],
    )
    def test_each_level_handles_its_range(self, result, expected):
        assert build_chain().process_request(Rate(1, result, "Maths")) == expected

    def test_result_keeps_all_digits(self):
        assert (
            build_chain().process_request(Rate(1, 99.1234567, "Maths"))
            == "JuniorLector approved exam# 1 in Maths as 'Not Taken' with 99.1234567."
        )

    def test_senior_escalates_out_of_range(self):
        assert (
            build_chain().process_request(Rate(7, 350.0, "Maths"))
            == "Exam# 7 in Maths requires an additional review!"
        )

    def test_unchained_handler_returns_none(self):
        assert JuniorLector().process_request(Rate(1, 150.0, "Maths")) is None

    def test_set_successor_returns_successor(self):
        lector = Lector()
        assert JuniorLector().set_successor(lector) is lector

    def test_boundary_goes_to_successor(self):
        junior = JuniorLector()
        junior.set_successor(SeniorLector())
        assert junior.process_request(Rate(1, 100.0, "Maths")).startswith("SeniorLector")

    def test_demo_output(self, run_demo):
        assert run_demo("chain-of-responsibility") == [
            "JuniorLector approved exam# 2034 in Databases as 'Not Taken' with 75.",
            "Lector approved exam# 2035 in Databases as 'Taken' with 101.",
            "SeniorLector approved exam# 2036 in Design Patterns as 'Excellent' with 295.",
        ]


class TestCommand:
    """Test calculator commands with undo and redo."""

    def test_inverse_operator(self):
        assert inverse_operator("+") == "-"
        assert inverse_operator("/") == "*"
        with pytest.raises(InvalidOperatorError):
            inverse_operator("%")

    def test_calculator_operation_line(self):
        assert Calculator().operation("+", 100) == "Current value = 100 (following + 100)"

    def test_large_operand_keeps_all_digits(self):
        assert User().compute("+", 1234567) == "Current value = 1234567 (following + 1234567)"

    def test_fractional_result_keeps_all_digits(self):
        calculator = Calculator()
        calculator.operation("+", 1)
        assert calculator.operation("/", 3) == (
            f"Current value = {1 / 3} (following / 3)"
        )

    def test_calculator_rejects_division_by_zero(self):
        with pytest.raises(InvalidOperatorError):
            Calculator().operation("/", 0)

    def test_command_rejects_unknown_operator(self):
        with pytest.raises(InvalidOperatorError):
            CalculatorCommand(Calculator(), "^", 2)

    def test_command_rejects_multiply_by_zero(self):
        with pytest.raises(InvalidOperatorError):
            CalculatorCommand(Calculator(), "*", 0)

    def test_undo_all_returns_to_zero(self):
        user = User()
        for operator, operand in (("+", 100), ("-", 50), ("*", 10), ("/", 2)):
            user.compute(operator, operand)

        user.undo(4)

        assert user.calculator.current == 0
        assert not user.can_undo

    def test_redo_reaches_last_command(self):
        user = User()
        user.compute("+", 100)
        user.compute("-", 50)
        user.undo(2)

        lines = user.redo(5)

        assert len(lines) == 2
        assert user.calculator.current == 50
        assert not user.can_redo

    def test_compute_discards_redo_tail(self):
        user = User()
        user.compute("+", 100)
        user.compute("-", 50)
        user.undo(1)

        user.compute("+", 1)

        assert not user.can_redo
        assert len(user.history) == 2
        assert user.calculator.current == 101

    def test_undo_with_empty_history(self):
        assert User().undo(3) == []

    def test_failed_compute_leaves_history_untouched(self):
        user = User()
        with pytest.raises(InvalidOperatorError):
            user.compute("/", 0)
        assert user.history == []

    def test_demo_output(self, run_demo):
        assert run_demo("command") == [
            "Current value = 100 (following + 100)",
            "Current value =  50 (following - 50)",
            "Current value = 500 (following * 10)",
            "Current value = 250 (following / 2)",
            "",
            "---- Undo 4 levels ",
            "Current value = 500 (following * 2)",
            "Current value =  50 (following / 10)",
            "Current value = 100 (following + 50)",
            "Current value =   0 (following - 100)",
            "",
            "---- Redo 3 levels ",
            "Current value = 100 (following + 100)",
            "Current value =  50 (following - 50)",
            "Current value = 500 (following * 10)",
        ]


class TestInterpreter:
    """Test the Roman numeral grammar."""

    @pytest.mark.parametrize(
        "text,value",
        [("I", 1), ("IV", 4), ("IX", 9), ("XLII", 42), ("XC", 90), ("CD", 400),
         ("MCMXXVIII", 1928), ("MMXXIV", 2024), ("mcmlxxxiv", 1984)],
    )
    def test_parse_roman(self, text, value):
        assert parse_roman(text) == value

    def test_invalid_input(self):
        with pytest.raises(InvalidExpressionError):
            parse_roman("MXQ")

    def test_out_of_order_input(self):
        with pytest.raises(InvalidExpressionError):
            parse_roman("IM")

    def test_single_expression_consumes_its_place(self):
        context = Context("XLV")
        TenExpression().interpret(context)

        assert context.output == 40
        assert context.input == "V"

    def test_empty_input_is_zero(self):
        assert parse_roman("") == 0

    def test_demo_output(self, run_demo):
        assert run_demo("interpreter") == ["MCMXXVIII = 1928"]
