"""Demo Registry - registry pattern for pattern demo drivers.

Demos register themselves with ``@register_pattern`` when their module is
imported; the CLI looks them up by slug without hard-coding any pattern.
"""
import importlib
import threading
from typing import Dict, List, Optional, TextIO, Type

from design_patterns.catalog.demo import PatternDemo
from design_patterns.catalog.models import PatternCategory, PatternInfo
from design_patterns.config.schemas import DemoConfig
from design_patterns.exceptions import DuplicatePatternError, UnknownPatternError
from design_patterns.infrastructure.logging import get_logger

BUILTIN_PACKAGES = (
    "design_patterns.creational",
    "design_patterns.structural",
    "design_patterns.behavioral",
)


class DemoRegistry:
    """
    Registry of pattern demo classes keyed by slug.

    Thread-safe singleton implementation.
    """

    _instance: Optional["DemoRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize demo registry."""
        self._registrations: Dict[str, Type[PatternDemo]] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "DemoRegistry":
        """Get singleton instance of demo registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def register(self, demo_class: Type[PatternDemo]) -> Type[PatternDemo]:
        """
        Register a demo class under its pattern slug.

        Args:
            demo_class: PatternDemo subclass with an ``info`` attribute

        Returns:
            The registered class, so this can back a decorator

        Raises:
            TypeError: If the class carries no PatternInfo
            DuplicatePatternError: If the slug is already registered
        """
        info = getattr(demo_class, "info", None)
        if not isinstance(info, PatternInfo):
            raise TypeError(f"{demo_class.__name__} must define a PatternInfo 'info' attribute")

        with self._registration_lock:
            existing = self._registrations.get(info.slug)
            if existing is not None and existing is not demo_class:
                raise DuplicatePatternError(info.slug)
            self._registrations[info.slug] = demo_class
            self._logger.debug("Registered pattern demo", slug=info.slug)
        return demo_class

    def unregister(self, slug: str) -> bool:
        """Remove a registration. Returns False if the slug was unknown."""
        with self._registration_lock:
            return self._registrations.pop(slug, None) is not None

    def is_registered(self, slug: str) -> bool:
        return slug in self._registrations

    def get(self, slug: str) -> Type[PatternDemo]:
        """
        Look up a demo class.

        Raises:
            UnknownPatternError: If no demo is registered under slug
        """
        try:
            return self._registrations[slug]
        except KeyError:
            raise UnknownPatternError(slug, self.slugs()) from None

    def slugs(self) -> List[str]:
        """Registered slugs in catalog order."""
        return [info.slug for info in self.list_infos()]

    def list_infos(self, category: Optional[PatternCategory] = None) -> List[PatternInfo]:
        """
        List pattern metadata sorted by category order, then name.

        Args:
            category: Only return patterns of this category
        """
        with self._registration_lock:
            infos = [demo.info for demo in self._registrations.values()]
        if category is not None:
            category = PatternCategory(category)
            infos = [info for info in infos if info.category == category]
        return sorted(infos, key=lambda info: (info.category.order, info.name))

    def create(
        self,
        slug: str,
        settings: Optional[DemoConfig] = None,
        stream: Optional[TextIO] = None,
    ) -> PatternDemo:
        """Instantiate the demo registered under slug."""
        return self.get(slug)(settings=settings, stream=stream)

    def clear(self) -> None:
        """Clear all registrations (for testing)."""
        with self._registration_lock:
            self._registrations.clear()

    def __len__(self) -> int:
        return len(self._registrations)


def register_pattern(demo_class: Type[PatternDemo]) -> Type[PatternDemo]:
    """
    Class decorator registering a demo in the global registry.

    Usage:
        @register_pattern
        class CommandDemo(PatternDemo):
            info = PatternInfo(...)
    """
    return DemoRegistry.get_instance().register(demo_class)


def load_builtin_demos() -> DemoRegistry:
    """Import the built-in pattern packages so every demo registers itself."""
    registry = DemoRegistry.get_instance()
    for package in BUILTIN_PACKAGES:
        module = importlib.import_module(package)
        # A cleared registry needs the already-imported demos re-registered
        for demo_class in getattr(module, "DEMOS", ()):
            if not registry.is_registered(demo_class.info.slug):
                registry.register(demo_class)
    return registry


def create_demo(
    slug: str,
    settings: Optional[DemoConfig] = None,
    stream: Optional[TextIO] = None,
) -> PatternDemo:
    """Instantiate a built-in demo by slug."""
    return load_builtin_demos().create(slug, settings=settings, stream=stream)
