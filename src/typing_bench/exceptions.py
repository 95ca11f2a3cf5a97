"""Custom exceptions for typing-bench with detailed error context."""

from __future__ import annotations

from typing import Any


class TypingBenchError(Exception):
    """Base exception for all typing-bench errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: The error message.
            context: Additional context information for debugging.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message


class UnsupportedValueKind(TypingBenchError):
    """Raised when a dynamic value is not an int, float, str or bool."""

    def __init__(self, kind: str, original_error: Exception | None = None) -> None:
        """
        Initialize unsupported value kind error.

        Args:
            kind: Name of the kind that was rejected.
            original_error: The original exception that caused the failure.
        """
        message = f"Unsupported value kind: {kind} (expected int, float, str or bool)"
        context = {"kind": kind}
        if original_error:
            context["original_error"] = str(original_error)

        super().__init__(message, context)
        self.kind = kind
        self.original_error = original_error


class ConfigurationError(TypingBenchError):
    """Raised when the benchmark configuration is invalid."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        """
        Initialize configuration error.

        Args:
            message: The error message.
            suggestion: Optional suggestion for fixing the issue.
        """
        if suggestion:
            message = f"{message}. Suggestion: {suggestion}"

        super().__init__(message)
        self.suggestion = suggestion
