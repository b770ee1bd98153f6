"""Exception types raised by the result-row builder and writer."""

from __future__ import annotations

from collections.abc import Iterable


class WorkflowError(Exception):
    """Base class for all package errors."""

    exit_code: int = 1


class InvalidFieldValue(WorkflowError, ValueError):
    """Raised when a field receives a value outside its accepted set."""

    exit_code = 2

    def __init__(
        self,
        field: str,
        value: object,
        accepted: Iterable[str] = (),
        reason: str | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.accepted = tuple(accepted)
        if reason is None:
            reason = f"expected one of: {', '.join(self.accepted)}"
        super().__init__(f"Invalid value {value!r} for '{field}': {reason}")


class OutputError(WorkflowError):
    """Raised when the Script Filter document cannot be written."""
