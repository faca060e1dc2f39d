"""Behavioral patterns."""

from .chain_of_responsibility import ChainOfResponsibilityDemo
from .command import CommandDemo
from .interpreter import InterpreterDemo
from .iterator import IteratorDemo
from .mediator import MediatorDemo
from .memento import MementoDemo
from .observer import ObserverDemo
from .state import StateDemo
from .strategy import StrategyDemo
from .template_method import TemplateMethodDemo
from .visitor import VisitorDemo

DEMOS = (
    ChainOfResponsibilityDemo,
    CommandDemo,
    InterpreterDemo,
    IteratorDemo,
    MediatorDemo,
    MementoDemo,
    ObserverDemo,
    StateDemo,
    StrategyDemo,
    TemplateMethodDemo,
    VisitorDemo,
)

__all__ = [demo.__name__ for demo in DEMOS] + ["DEMOS"]
