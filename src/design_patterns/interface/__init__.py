"""Interface layer - command handlers behind the CLI."""

from .command_handlers import (
    CLICommandHandler,
    ListPatternsHandler,
    RunDemosHandler,
    ShowPatternHandler,
)

__all__ = [
    "CLICommandHandler",
    "ListPatternsHandler",
    "RunDemosHandler",
    "ShowPatternHandler",
]
