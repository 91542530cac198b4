"""
Custom exceptions for helpkit.

Provides a small hierarchy of exceptions for the few places that can fail.
"""

from typing import Any, Dict, Optional


class HelpkitError(Exception):
    """Base exception for all helpkit errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(HelpkitError):
    """Raised when there are configuration issues."""
    pass


class ValidationError(HelpkitError):
    """Input validation errors."""
    pass


class RoundingModeError(ValidationError):
    """Unknown rounding mode requested."""

    def __init__(self, mode: Any, **kwargs):
        super().__init__(f"Unknown rounding mode: {mode!r}", **kwargs)
        self.mode = mode


class ObjectHashError(ValidationError):
    """Object could not be serialized for hashing."""
    pass
