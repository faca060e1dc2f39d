"""Observer - investors notified whenever a stock price changes."""
from abc import ABC, abstractmethod
from typing import List

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern


class InvestorObserver(ABC):
    @abstractmethod
    def update(self, stock: "Stock") -> str:
        pass


class Stock(ABC):
    """Subject."""

    def __init__(self, symbol: str, price: float):
        self.symbol = symbol
        self._price = price
        self._investors: List[InvestorObserver] = []

    @property
    def investors(self) -> List[InvestorObserver]:
        return list(self._investors)

    def attach(self, investor: InvestorObserver) -> None:
        if investor not in self._investors:
            self._investors.append(investor)

    def detach(self, investor: InvestorObserver) -> None:
        self._investors.remove(investor)

    def notify(self) -> List[str]:
        return [investor.update(self) for investor in self._investors]

    @property
    def price(self) -> float:
        """Assigning notifies observers, which keep the lines; set_price() returns them."""
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        self.set_price(value)

    def set_price(self, value: float) -> List[str]:
        """Change the price; observers are only notified of actual changes."""
        if value == self._price:
            return []
        self._price = value
        return self.notify()


class IBM(Stock):
    """Concrete subject."""

    def __init__(self, price: float):
        super().__init__("IBM", price)


class Investor(InvestorObserver):
    def __init__(self, name: str):
        self.name = name
        self.notifications: List[str] = []

    def update(self, stock: Stock) -> str:
        message = f"Notified {self.name} of {stock.symbol}'s change to {stock.price:.2f} lv."
        self.notifications.append(message)
        return message


@register_pattern
class ObserverDemo(PatternDemo):
    info = PatternInfo(
        slug="observer",
        name="Observer",
        category=PatternCategory.BEHAVIORAL,
        intent=(
            "Define a one-to-many dependency between objects so that when one object "
            "changes state, all its dependents are notified and updated automatically."
        ),
        participants=[
            Participant(role="Subject", class_name="Stock"),
            Participant(role="ConcreteSubject", class_name="IBM"),
            Participant(role="Observer", class_name="InvestorObserver"),
            Participant(role="ConcreteObserver", class_name="Investor"),
        ],
        applicability=[
            "a change to one object requires changing others, and you don't know how many",
        ],
    )

    prices = (120.10, 121.00, 120.50, 120.75)

    def run(self) -> None:
        ibm = IBM(120.00)
        ibm.attach(Investor("Sorros"))
        ibm.attach(Investor("Berkshire"))

        # Fluctuating prices will notify investors
        for price in self.prices:
            self.emit_lines(ibm.set_price(price))
