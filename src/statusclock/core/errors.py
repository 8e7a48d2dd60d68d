"""Exception hierarchy for the status clock.

Startup errors (configuration, socket, surface) are fatal and carry
structured context for logging.
"""

from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels for logging."""

    ERROR = "error"
    CRITICAL = "critical"


class StatusClockError(Exception):
    """Base exception for all status clock errors.

    Attributes:
        message: Human-readable error message
        details: Additional context as key-value pairs
        severity: Error severity level
    """

    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "severity": self.severity.value,
            "details": self.details,
        }


class ConfigurationError(StatusClockError):
    """Configuration loading or validation error.

    Raised when:
    - Config file is missing, unreadable or not valid YAML
    - A required setting is missing or has the wrong type
    - The day-name table does not have exactly seven entries
    - A color name cannot be resolved
    """

    severity = ErrorSeverity.CRITICAL


class SocketSetupError(StatusClockError):
    """Status socket could not be set up.

    Raised when:
    - Another instance is already serving the socket path
    - A stale socket file cannot be removed
    - Binding or listening fails
    """

    severity = ErrorSeverity.CRITICAL


class SurfaceError(StatusClockError):
    """Display surface or drawing resource acquisition failed.

    Always fatal: there is no recovery path once the clock is running.
    """

    severity = ErrorSeverity.CRITICAL
