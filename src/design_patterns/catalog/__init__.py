"""Pattern catalog - metadata, demo base class and demo registry."""

from .demo import PatternDemo
from .models import Participant, PatternCategory, PatternInfo
from .registry import DemoRegistry, create_demo, load_builtin_demos, register_pattern

__all__ = [
    "PatternDemo",
    "Participant",
    "PatternCategory",
    "PatternInfo",
    "DemoRegistry",
    "create_demo",
    "load_builtin_demos",
    "register_pattern",
]
