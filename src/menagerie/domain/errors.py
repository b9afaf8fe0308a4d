"""Failures raised by the collection loop and the line adapters.

The service layer converts these into ``ServiceResult`` errors; nothing
below the service layer swallows them.
"""

from __future__ import annotations


class CollectError(Exception):
    """Base class for collection failures.

    Attributes:
        field: The field or operation that failed (``"name"``, ``"age"``,
            ``"continue"``, ``"report"``...), or None when unknown.
    """

    code = "COLLECT_FAILURE"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class IOFailure(CollectError):
    """The input or output stream is unusable (closed, exhausted, or faulted)."""

    code = "IO_FAILURE"


class ParseFailure(CollectError):
    """A field's text did not pass validation."""

    code = "PARSE_FAILURE"

    def __init__(self, message: str, *, field: str, value: str) -> None:
        super().__init__(message, field=field)
        self.value = value
