"""Structural patterns."""

from .adapter import AdapterDemo
from .bridge import BridgeDemo
from .composite import CompositeDemo
from .decorator import DecoratorDemo
from .facade import FacadeDemo
from .flyweight import FlyweightDemo
from .proxy import ProxyDemo

DEMOS = (
    AdapterDemo,
    BridgeDemo,
    CompositeDemo,
    DecoratorDemo,
    FacadeDemo,
    FlyweightDemo,
    ProxyDemo,
)

__all__ = [demo.__name__ for demo in DEMOS] + ["DEMOS"]
