"""Facade - one mortgage check in front of three subsystems."""
from dataclasses import dataclass
from typing import List, Tuple

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern

MIN_SAVINGS_RATIO = 0.1
MIN_CREDIT_SCORE = 600


@dataclass
class Customer:
    name: str
    savings: float = 50000.0
    credit_score: int = 720
    bad_loans: int = 0


class Bank:
    def has_sufficient_savings(self, customer: Customer, amount: float) -> bool:
        return customer.savings >= amount * MIN_SAVINGS_RATIO


class Credit:
    def has_good_credit(self, customer: Customer) -> bool:
        return customer.credit_score >= MIN_CREDIT_SCORE


class Loan:
    def has_no_bad_loans(self, customer: Customer) -> bool:
        return customer.bad_loans == 0


class Mortgage:
    """Facade over Bank, Credit and Loan."""

    def __init__(self):
        self._bank = Bank()
        self._credit = Credit()
        self._loan = Loan()

    def is_eligible(self, customer: Customer, amount: float) -> Tuple[bool, List[str]]:
        """Run every subsystem check and return the verdict with a trace."""
        trace = [f"{customer.name} applies for ${amount:,.2f} loan", ""]

        trace.append(f"Check bank for {customer.name}")
        eligible = self._bank.has_sufficient_savings(customer, amount)

        trace.append(f"Check loans for {customer.name}")
        eligible = self._loan.has_no_bad_loans(customer) and eligible

        trace.append(f"Check credit for {customer.name}")
        eligible = self._credit.has_good_credit(customer) and eligible

        return eligible, trace


@register_pattern
class FacadeDemo(PatternDemo):
    info = PatternInfo(
        slug="facade",
        name="Facade",
        category=PatternCategory.STRUCTURAL,
        intent="Provide a unified interface to a set of interfaces in a subsystem.",
        participants=[
            Participant(role="Facade", class_name="Mortgage",
                        description="knows which subsystem handles which check"),
            Participant(role="Subsystem classes", class_name="Bank, Credit, Loan"),
        ],
        applicability=[
            "you want a simple interface to a complex subsystem",
            "you want to layer your subsystems",
        ],
    )

    def run(self) -> None:
        mortgage = Mortgage()

        customer = Customer("Ann McKinsey")
        eligible, trace = mortgage.is_eligible(customer, 125000)
        self.emit_lines(trace)

        self.emit()
        self.emit(f"{customer.name} has been {'Approved' if eligible else 'Rejected'}")
