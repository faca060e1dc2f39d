"""State - an account whose behaviour depends on its balance tier."""
from abc import ABC, abstractmethod
from typing import List

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern


def format_money(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


class State(ABC):
    """Account state; owns the balance and decides the next state."""

    interest: float = 0.0
    lower_limit: float = 0.0
    upper_limit: float = 0.0

    def __init__(self, balance: float, account: "Account"):
        self.balance = balance
        self.account = account

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def transition(self, state_class: type) -> None:
        self.account.state = state_class(self.balance, self.account)

    @abstractmethod
    def deposit(self, amount: float) -> None:
        pass

    @abstractmethod
    def withdraw(self, amount: float) -> bool:
        """Returns False when the withdrawal was refused."""

    @abstractmethod
    def pay_interest(self) -> None:
        pass


class RedState(State):
    """Overdrawn: no withdrawals, no interest."""

    lower_limit = -100.0
    upper_limit = 0.0

    def deposit(self, amount: float) -> None:
        self.balance += amount
        self._check()

    def withdraw(self, amount: float) -> bool:
        return False

    def pay_interest(self) -> None:
        pass

    def _check(self) -> None:
        if self.balance >= GoldState.lower_limit:
            self.transition(GoldState)
        elif self.balance >= self.upper_limit:
            self.transition(SilverState)


class SilverState(State):
    """Non-interest bearing."""

    interest = 0.0
    lower_limit = 0.0
    upper_limit = 1000.0

    def deposit(self, amount: float) -> None:
        self.balance += amount
        self._check()

    def withdraw(self, amount: float) -> bool:
        self.balance -= amount
        self._check()
        return True

    def pay_interest(self) -> None:
        self.balance += self.interest * self.balance
        self._check()

    def _check(self) -> None:
        if self.balance < self.lower_limit:
            self.transition(RedState)
        elif self.balance >= self.upper_limit:
            self.transition(GoldState)


class GoldState(State):
    """Interest bearing."""

    interest = 0.05
    lower_limit = 1000.0
    upper_limit = 10000000.0

    def deposit(self, amount: float) -> None:
        self.balance += amount
        self._check()

    def withdraw(self, amount: float) -> bool:
        self.balance -= amount
        self._check()
        return True

    def pay_interest(self) -> None:
        self.balance += self.interest * self.balance
        self._check()

    def _check(self) -> None:
        if self.balance < 0.0:
            self.transition(RedState)
        elif self.balance < self.lower_limit:
            self.transition(SilverState)


class Account:
    """Context: delegates every operation to its current state."""

    def __init__(self, owner: str):
        self.owner = owner
        # New accounts are 'Silver' by default
        self.state: State = SilverState(0.0, self)

    @property
    def balance(self) -> float:
        return self.state.balance

    def _report(self, headline: str) -> List[str]:
        return [
            headline,
            f" Balance = {format_money(self.balance)}",
            f" Status  = {self.state.name}",
            "",
        ]

    def deposit(self, amount: float) -> List[str]:
        self.state.deposit(amount)
        return self._report(f"Deposited {format_money(amount)} --- ")

    def withdraw(self, amount: float) -> List[str]:
        if not self.state.withdraw(amount):
            return ["No funds available for withdrawal!"] + self._report(
                f"Withdrawal of {format_money(amount)} refused --- "
            )
        return self._report(f"Withdrew {format_money(amount)} --- ")

    def pay_interest(self) -> List[str]:
        self.state.pay_interest()
        return self._report("Interest Paid --- ")


@register_pattern
class StateDemo(PatternDemo):
    info = PatternInfo(
        slug="state",
        name="State",
        category=PatternCategory.BEHAVIORAL,
        intent="Allow an object to alter its behavior when its internal state changes.",
        participants=[
            Participant(role="Context", class_name="Account"),
            Participant(role="State", class_name="State"),
            Participant(role="ConcreteState", class_name="RedState, SilverState, GoldState"),
        ],
        applicability=[
            "an object's behavior depends on its state and must change at run-time",
            "operations have large conditional statements that depend on the object's state",
        ],
    )

    def run(self) -> None:
        account = Account("Jim Johnson")

        # Apply financial transactions
        self.emit_lines(account.deposit(500.0))
        self.emit_lines(account.deposit(300.0))
        self.emit_lines(account.deposit(550.0))
        self.emit_lines(account.pay_interest())
        self.emit_lines(account.withdraw(2000.00))
        self.emit_lines(account.withdraw(1100.00))
