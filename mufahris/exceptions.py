"""
Custom exceptions for Mufahris library.

All exceptions inherit from MufahrisError for easy catching of library-specific errors.

Malformed annotation lines, missing roots and empty query filters are not
errors; they degrade to skipped lines, empty strings and empty results.
"""

from pathlib import Path
from typing import Any


class MufahrisError(Exception):
    """Base exception for all Mufahris errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class ConfigurationError(MufahrisError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name


class MorphologyDataError(MufahrisError):
    """Raised when a morphology annotation file cannot be loaded."""

    def __init__(
        self,
        message: str = "Failed to load morphology annotation data.",
        path: str | Path | None = None,
    ) -> None:
        ctx: dict[str, Any] = {}
        if path is not None:
            ctx["path"] = str(path)
        super().__init__(message, ctx)
        self.path = path


class InvalidOptionsError(MufahrisError):
    """Raised when collocation options cannot be validated."""

    def __init__(
        self,
        message: str,
        option_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if option_name:
            ctx["option"] = option_name
        super().__init__(message, ctx)
        self.option_name = option_name
