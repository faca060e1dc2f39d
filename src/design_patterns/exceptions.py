# src/design_patterns/exceptions.py
from typing import Any, List, Optional


class PatternError(Exception):
    """Base exception for all pattern-specific errors."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnknownPatternError(PatternError):
    """Raised when a requested pattern slug is not registered."""
    def __init__(self, slug: str, known: Optional[List[str]] = None):
        known = known or []
        hint = f" (known: {', '.join(known)})" if known else ""
        super().__init__(f"Unknown pattern '{slug}'{hint}", known)
        self.slug = slug
        self.known = known


class DuplicatePatternError(PatternError):
    """Raised when a pattern slug is registered twice."""
    def __init__(self, slug: str):
        super().__init__(f"Pattern '{slug}' is already registered")
        self.slug = slug


class InvalidOperatorError(PatternError):
    """Raised when a calculator command receives an operator it cannot apply."""
    def __init__(self, operator: str, reason: str = "unsupported operator"):
        super().__init__(f"Invalid operator '{operator}': {reason}")
        self.operator = operator


class UnsupportedOperationError(PatternError):
    """Raised when a participant does not support the requested operation."""
    pass


class BridgeNotConnectedError(PatternError):
    """Raised when an abstraction is used before an implementor is attached."""
    pass


class NoCopiesAvailableError(PatternError):
    """Raised when borrowing an item that has no copies left."""
    def __init__(self, title: str):
        super().__init__(f"No copies of '{title}' left to borrow")
        self.title = title


class UnknownCharacterError(PatternError):
    """Raised when the flyweight factory has no glyph for a key."""
    def __init__(self, key: str):
        super().__init__(f"No character flyweight for '{key}'")
        self.key = key


class UnknownParticipantError(PatternError):
    """Raised when a mediator is asked to deliver to an unregistered colleague."""
    def __init__(self, name: str):
        super().__init__(f"Participant '{name}' is not registered in the chatroom")
        self.name = name


class InvalidExpressionError(PatternError):
    """Raised when an interpreter cannot consume its whole input."""
    def __init__(self, text: str, remaining: str):
        super().__init__(f"Cannot interpret '{text}': unexpected '{remaining}'")
        self.text = text
        self.remaining = remaining


class NotConnectedError(PatternError):
    """Raised when a data access step runs before connect()."""
    pass


class ConfigurationError(PatternError):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
