"""Small presentation helpers shared by the pattern demos."""

from .formatting import format_number

__all__ = ["format_number"]
