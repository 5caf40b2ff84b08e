"""Custom exception hierarchy for annosql.

All public errors inherit from AnnoSQLError so callers can catch the base
class for any annosql-specific failure.
"""
from __future__ import annotations

from typing import Any


class AnnoSQLError(Exception):
    """Base exception for all annosql errors."""


class AnnotationError(AnnoSQLError):
    """A single malformed query unit in an annotation file.

    Annotation errors are collected rather than raised one by one; see
    :class:`~annosql.parse.annotations.ParseResult`.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. ``MISSING_NAME``).
        sql: The trimmed SQL body of the offending unit.
        line: 1-based line where the unit starts, if known.
        details: Extra context (offending token, query name, ...).
    """

    def __init__(
        self,
        message: str,
        code: str,
        sql: str = "",
        line: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.sql = sql
        self.line = line
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is not None:
            message = f"line {self.line}: {message}"
        if self.sql:
            message = f'{message} Query: "{self.sql}"'
        return message

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for diagnostics output."""
        return {
            "error": self.code,
            "message": self.args[0] if self.args else "",
            "line": self.line,
            "sql": self.sql,
            "details": self.details,
        }


class AnnotationParseError(AnnoSQLError):
    """Raised when an annotation file contains one or more malformed units.

    Args:
        errors: Every :class:`AnnotationError` found in the input, in source
            order.
    """

    def __init__(self, errors: list[AnnotationError]) -> None:
        self.errors = list(errors)
        count = len(self.errors)
        lines = "\n".join(f"  - {err}" for err in self.errors)
        noun = "error" if count == 1 else "errors"
        super().__init__(f"{count} annotation {noun}:\n{lines}")

    def to_error_response(self) -> list[dict[str, Any]]:
        """Returns one structured error response per malformed unit."""
        return [err.to_error_response() for err in self.errors]


class TemplateError(AnnoSQLError):
    """Base class for failures while assembling SQL from a block sequence."""


class ConditionLabelError(TemplateError):
    """Raised when condition identifiers cannot be turned into enum members.

    Args:
        message: Human-readable description.
        label: The offending member label.
        conditions: The condition identifiers involved.
    """

    def __init__(self, message: str, label: str, conditions: list[str]) -> None:
        super().__init__(message)
        self.label = label
        self.conditions = conditions


class ConditionResolutionError(TemplateError):
    """Raised when a conditional template is rendered without a decision callable."""
