"""Custom exceptions for dirstage.

Staging operations never wrap filesystem errors or exceptions raised by
caller callbacks; those propagate unchanged. The types here cover problems
detected by dirstage itself, before any filesystem work starts.
"""

from typing import Any


class DirstageError(Exception):
    """Base exception for all dirstage errors."""

    pass


class InvalidConfiguration(DirstageError):
    """Raised when a staging context cannot be built from the given options.

    Attributes:
        field: The offending option (e.g., 'destination_root', 'cleanup')
        reason: Human-readable explanation
    """

    def __init__(self, field: str, reason: str) -> None:
        """Initialize InvalidConfiguration exception.

        Args:
            field: Option that failed validation
            reason: Why the value was rejected
        """
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration for '{field}': {reason}")

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured output.

        Returns:
            Dictionary representation suitable for JSON output
        """
        return {
            "error": "invalid_configuration",
            "field": self.field,
            "reason": self.reason,
        }

    def __repr__(self) -> str:
        """Return repr string for debugging."""
        return f"InvalidConfiguration(field={self.field!r}, reason={self.reason!r})"
