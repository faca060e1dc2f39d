"""Command handlers for the interface layer.

Each CLI command maps to one handler class:
- list: ListPatternsHandler
- show: ShowPatternHandler
- run: RunDemosHandler
"""
import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TextIO

from design_patterns.catalog import DemoRegistry, PatternCategory, load_builtin_demos
from design_patterns.config.schemas import DemoConfig
from design_patterns.infrastructure.logging import get_logger


class CLICommandHandler(ABC):
    """Base class for CLI command handlers."""

    def __init__(
        self,
        registry: Optional[DemoRegistry] = None,
        settings: Optional[DemoConfig] = None,
        stream: Optional[TextIO] = None,
        logger=None,
    ):
        """Initialize handler.

        Args:
            registry: Demo registry; the built-in demos are loaded when omitted
            settings: Demo settings passed to every demo
            stream: Destination for demo output (defaults to stdout)
            logger: Logger instance for logging operations
        """
        self.registry = registry or load_builtin_demos()
        self.settings = settings or DemoConfig()
        self._stream = stream
        self.logger = logger or get_logger(self.__class__.__module__)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @abstractmethod
    def handle(self, command) -> Optional[Dict[str, Any]]:
        """
        Handle a parsed CLI command.

        Returns:
            Result data for the formatter, or None when the handler wrote
            its own output
        """


class ListPatternsHandler(CLICommandHandler):
    """Handler for the list command."""

    def handle(self, command) -> Dict[str, Any]:
        category = getattr(command, "category", None)
        self.logger.debug("Listing patterns", category=category)
        infos = self.registry.list_infos(PatternCategory(category) if category else None)
        return {"patterns": [info.summary() for info in infos]}


class ShowPatternHandler(CLICommandHandler):
    """Handler for the show command."""

    def handle(self, command) -> Dict[str, Any]:
        self.logger.debug("Showing pattern", slug=command.slug)
        demo_class = self.registry.get(command.slug)
        return {"pattern": demo_class.info.to_dict()}


class RunDemosHandler(CLICommandHandler):
    """Handler for the run command; demo output goes straight to the stream."""

    def _selected_slugs(self, command) -> List[str]:
        if getattr(command, "all", False):
            return self.registry.slugs()
        slugs = list(getattr(command, "slugs", None) or [])
        # Fail before any demo runs if a slug is unknown
        for slug in slugs:
            self.registry.get(slug)
        return slugs

    def _banner(self, slug: str) -> str:
        info = self.registry.get(slug).info
        return f"=== {info.name} ({info.category.value}) ==="

    def handle(self, command) -> None:
        slugs = self._selected_slugs(command)
        self.logger.info("Running demos", count=len(slugs))

        for index, slug in enumerate(slugs):
            if self.settings.show_banner:
                if index > 0:
                    print(file=self.stream)
                print(self._banner(slug), file=self.stream)
            demo = self.registry.create(slug, settings=self.settings, stream=self._stream)
            demo.execute()
        return None
