"""Creational patterns."""

from .abstract_factory import AbstractFactoryDemo
from .builder import BuilderDemo
from .factory_method import FactoryMethodDemo
from .prototype import PrototypeDemo
from .singleton import SingletonDemo

DEMOS = (
    AbstractFactoryDemo,
    BuilderDemo,
    FactoryMethodDemo,
    PrototypeDemo,
    SingletonDemo,
)

__all__ = [demo.__name__ for demo in DEMOS] + ["DEMOS"]
