"""Abstract Factory - families of related animals per continent.

A client (AnimalWorld) is built from a ContinentFactory and never names a
concrete animal class; swapping the factory swaps the whole food chain.
"""
from abc import ABC, abstractmethod

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern


class Herbivore(ABC):
    """An animal that feeds on plants."""

    @property
    def name(self) -> str:
        return self.__class__.__name__


class Carnivore(ABC):
    """An animal that eats meat."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def eat(self, herbivore: Herbivore) -> str:
        """Eat a herbivore and describe it."""


class Wildebeest(Herbivore):
    pass


class Bison(Herbivore):
    pass


class Lion(Carnivore):
    def eat(self, herbivore: Herbivore) -> str:
        # Eat Wildebeest
        return f"{self.name} eats {herbivore.name}"


class Wolf(Carnivore):
    def eat(self, herbivore: Herbivore) -> str:
        # Eat Bison
        return f"{self.name} eats {herbivore.name}"


class ContinentFactory(ABC):
    """Creates one herbivore and one carnivore of the same continent."""

    @abstractmethod
    def create_herbivore(self) -> Herbivore:
        pass

    @abstractmethod
    def create_carnivore(self) -> Carnivore:
        pass


class AfricaFactory(ContinentFactory):
    def create_herbivore(self) -> Herbivore:
        return Wildebeest()

    def create_carnivore(self) -> Carnivore:
        return Lion()


class AmericaFactory(ContinentFactory):
    def create_herbivore(self) -> Herbivore:
        return Bison()

    def create_carnivore(self) -> Carnivore:
        return Wolf()


class AnimalWorld:
    """The client: only knows the abstract factory and abstract products."""

    def __init__(self, factory: ContinentFactory):
        self.carnivore = factory.create_carnivore()
        self.herbivore = factory.create_herbivore()

    def run_food_chain(self) -> str:
        return self.carnivore.eat(self.herbivore)


@register_pattern
class AbstractFactoryDemo(PatternDemo):
    info = PatternInfo(
        slug="abstract-factory",
        name="Abstract Factory",
        category=PatternCategory.CREATIONAL,
        intent=(
            "Provide an interface for creating families of related or dependent "
            "objects without specifying their concrete classes."
        ),
        participants=[
            Participant(role="AbstractFactory", class_name="ContinentFactory",
                        description="declares creation of herbivores and carnivores"),
            Participant(role="ConcreteFactory", class_name="AfricaFactory, AmericaFactory",
                        description="create the animals of one continent"),
            Participant(role="AbstractProduct", class_name="Herbivore, Carnivore"),
            Participant(role="Product", class_name="Wildebeest, Lion, Bison, Wolf"),
            Participant(role="Client", class_name="AnimalWorld",
                        description="uses only the abstract interfaces"),
        ],
        applicability=[
            "a system should be independent of how its products are created",
            "a family of related products is designed to be used together",
        ],
    )

    def run(self) -> None:
        for factory in (AfricaFactory(), AmericaFactory()):
            self.emit(AnimalWorld(factory).run_food_chain())
