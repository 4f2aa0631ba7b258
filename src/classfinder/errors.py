"""Error hierarchy for the classfinder package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ClassFinderError",
    "InvalidPatternError",
    "ConfigNotFoundError",
    "ConfigError",
    "NamesSourceError",
    "ErrorCodes",
]


class ClassFinderError(Exception):
    """Base error for all classfinder errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidPatternError(ClassFinderError):
    """Raised when a search pattern is empty or a single space."""

    def __init__(self, pattern: str, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATTERN",
            message=f"Pattern format: '<pattern>' \"{pattern}\"",
            details={"pattern": pattern},
            **kwargs,
        )

    @property
    def pattern(self) -> str:
        """The rejected raw pattern."""
        return self.details["pattern"]


class ConfigNotFoundError(ClassFinderError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ClassFinderError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class NamesSourceError(ClassFinderError):
    """Raised when the file of class names cannot be read."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="NAMES_SOURCE_ERROR",
            message=f"Cannot read names from {path}: {reason}",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        return self.details["path"]


class ErrorCodes:
    """All error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_PATTERN:
            show_usage()
    """

    INVALID_PATTERN = "INVALID_PATTERN"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    NAMES_SOURCE_ERROR = "NAMES_SOURCE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
