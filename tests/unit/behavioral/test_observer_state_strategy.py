"""Tests for observer, state and strategy."""
import pytest

from design_patterns.behavioral.observer import IBM, Investor
from design_patterns.behavioral.state import (
    Account,
    GoldState,
    RedState,
    SilverState,
    format_money,
)
from design_patterns.behavioral.strategy import MergeSort, QuickSort, ShellSort, SortedList


class TestObserver:
    """Test stock price notifications."""

    def setup_method(self):
        self.stock = IBM(120.00)
        self.sorros = Investor("Sorros")
        self.stock.attach(self.sorros)

    def test_price_change_notifies(self):
        lines = self.stock.set_price(121.0)

        assert lines == ["Notified Sorros of IBM's change to 121.00 lv."]
        assert self.sorros.notifications == lines

    def test_property_setter_notifies(self):
        self.stock.price = 99.5
        assert self.sorros.notifications == ["Notified Sorros of IBM's change to 99.50 lv."]

    def test_setter_lines_match_set_price(self):
        self.stock.price = 99.5
        lines = self.stock.set_price(101.0)

        assert self.sorros.notifications == [
            "Notified Sorros of IBM's change to 99.50 lv.",
            lines[0],
        ]

    def test_same_price_does_not_notify(self):
        assert self.stock.set_price(120.00) == []

    def test_detach(self):
        self.stock.detach(self.sorros)
        assert self.stock.set_price(130.0) == []

    def test_attach_is_idempotent(self):
        self.stock.attach(self.sorros)
        assert len(self.stock.investors) == 1

    def test_demo_output(self, run_demo):
        lines = run_demo("observer")

        assert len(lines) == 8
        assert lines[:2] == [
            "Notified Sorros of IBM's change to 120.10 lv.",
            "Notified Berkshire of IBM's change to 120.10 lv.",
        ]
        assert lines[-1] == "Notified Berkshire of IBM's change to 120.75 lv."


class TestState:
    """Test account state transitions."""

    def test_new_account_is_silver(self):
        account = Account("Jim Johnson")
        assert isinstance(account.state, SilverState)
        assert account.balance == 0.0

    def test_large_deposit_moves_to_gold(self):
        account = Account("Jim Johnson")
        account.deposit(1500.0)
        assert isinstance(account.state, GoldState)

    def test_gold_pays_interest(self):
        account = Account("Jim Johnson")
        account.deposit(2000.0)
        account.pay_interest()
        assert account.balance == pytest.approx(2100.0)

    def test_silver_pays_no_interest(self):
        account = Account("Jim Johnson")
        account.deposit(500.0)
        account.pay_interest()
        assert account.balance == 500.0

    def test_overdraw_moves_to_red(self):
        account = Account("Jim Johnson")
        account.deposit(100.0)
        account.withdraw(200.0)
        assert isinstance(account.state, RedState)

    def test_red_refuses_withdrawal(self):
        account = Account("Jim Johnson")
        account.withdraw(50.0)

        lines = account.withdraw(10.0)

        assert lines[0] == "No funds available for withdrawal!"
        assert account.balance == -50.0

    def test_deposit_leaves_red(self):
        account = Account("Jim Johnson")
        account.withdraw(50.0)
        account.deposit(100.0)
        assert isinstance(account.state, SilverState)

    def test_deposit_reaching_gold_threshold(self):
        account = Account("Jim Johnson")
        account.deposit(1000.0)
        assert isinstance(account.state, GoldState)

    def test_zero_balance_is_silver(self):
        account = Account("Jim Johnson")
        account.deposit(1000.0)
        account.withdraw(1100.0)
        assert isinstance(account.state, RedState)

        account.deposit(100.0)
        assert account.balance == 0.0
        assert isinstance(account.state, SilverState)

        lines = account.withdraw(50.0)
        assert lines[0] == "Withdrew $50.00 --- "
        assert account.balance == -50.0
        assert isinstance(account.state, RedState)

    def test_red_deposit_can_reach_gold(self):
        account = Account("Jim Johnson")
        account.withdraw(50.0)
        account.deposit(1050.0)
        assert isinstance(account.state, GoldState)

    def test_gold_drops_to_silver_just_below_threshold(self):
        account = Account("Jim Johnson")
        account.deposit(1000.0)
        account.withdraw(0.5)
        assert isinstance(account.state, SilverState)

    def test_gold_falls_back_to_silver(self):
        account = Account("Jim Johnson")
        account.deposit(1500.0)
        account.withdraw(1000.0)
        assert isinstance(account.state, SilverState)

    def test_format_money(self):
        assert format_money(1417.5) == "$1,417.50"
        assert format_money(-582.5) == "-$582.50"

    def test_demo_output(self, run_demo):
        lines = run_demo("state")

        assert lines[:4] == ["Deposited $500.00 --- ", " Balance = $500.00", " Status  = SilverState", ""]
        assert " Status  = GoldState" in lines
        assert "Withdrew $2,000.00 --- " in lines
        assert "No funds available for withdrawal!" in lines
        assert lines[-3:] == [" Balance = -$582.50", " Status  = RedState", ""]


class TestStrategy:
    """Test interchangeable sort strategies."""

    names = ["Samual", "Jimmy", "Sandra", "Vivek", "Anna"]

    @pytest.mark.parametrize("strategy", [QuickSort(), ShellSort(), MergeSort()])
    def test_strategies_sort(self, strategy):
        assert strategy.sort(self.names) == sorted(self.names)

    @pytest.mark.parametrize("strategy", [QuickSort(), ShellSort(), MergeSort()])
    def test_strategies_handle_duplicates_and_empty(self, strategy):
        assert strategy.sort([]) == []
        assert strategy.sort(["b", "a", "b"]) == ["a", "b", "b"]

    def test_input_not_modified(self):
        names = list(self.names)
        ShellSort().sort(names)
        assert names == self.names

    def test_sorted_list_uses_current_strategy(self):
        students = SortedList()
        for name in self.names:
            students.add(name)
        students.set_sort_strategy(MergeSort())

        lines = students.sort()

        assert lines[0] == "MergeSorted list "
        assert lines[1:-1] == [f" {name}" for name in sorted(self.names)]
        assert students.items == sorted(self.names)

    def test_demo_output(self, run_demo):
        lines = run_demo("strategy")

        assert [line for line in lines if line.endswith("list ")] == [
            "QuickSorted list ", "ShellSorted list ", "MergeSorted list ",
        ]
        assert lines[1] == " Anna"
