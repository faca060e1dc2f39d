"""GoF Design Patterns - Root Package.

Minimal reference implementations of the Gang-of-Four design patterns.
Every pattern is a small set of participant classes wired together by a
demo driver that prints a few lines showing the pattern's structure.

Key Components:
    - catalog: pattern metadata, demo base class and demo registry
    - creational: Abstract Factory, Builder, Factory Method, Prototype, Singleton
    - structural: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy
    - behavioral: Chain of Responsibility, Command, Interpreter, Iterator,
      Mediator, Memento, Observer, State, Strategy, Template Method, Visitor
    - config: typed configuration and loading
    - cli: the ``gof-patterns`` command line interface

Usage:
    >>> gof-patterns list
    >>> gof-patterns show command
    >>> gof-patterns run chain-of-responsibility
"""

from ._version import __version__

__all__ = ["__version__"]
