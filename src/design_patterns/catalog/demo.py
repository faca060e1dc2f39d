"""Base class for pattern demo drivers."""
import sys
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, TextIO

from design_patterns.catalog.models import PatternInfo
from design_patterns.config.schemas import DemoConfig
from design_patterns.infrastructure.logging import get_logger


class PatternDemo(ABC):
    """
    Driver that wires a pattern's participants together and prints the result.

    Subclasses set ``info`` and implement ``run()``, writing every line of
    output through ``emit()`` so the destination stream can be swapped.
    """

    info: ClassVar[PatternInfo]

    def __init__(self, settings: Optional[DemoConfig] = None, stream: Optional[TextIO] = None):
        self.settings = settings or DemoConfig()
        self._stream = stream
        self._logger = get_logger(self.__class__.__module__).bind(pattern=self.info.slug)

    @property
    def stream(self) -> TextIO:
        # Resolved late so redirected stdout (tests, --output) is honoured
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, text: str = "") -> None:
        """Write one line of demo output."""
        print(text, file=self.stream)

    def emit_lines(self, lines) -> None:
        """Write several lines of demo output."""
        for line in lines:
            self.emit(line)

    @abstractmethod
    def run(self) -> None:
        """Exercise the participants and emit the observable output."""

    def execute(self) -> None:
        """Run the demo with lifecycle logging."""
        self._logger.debug("Demo started")
        try:
            self.run()
        except Exception as e:
            self._logger.error("Demo failed", error=str(e))
            raise
        self._logger.debug("Demo finished")
