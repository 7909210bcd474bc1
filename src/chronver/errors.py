# SPDX-License-Identifier: MIT
"""Errors raised while parsing or constructing chronologic versions.

Every failure is a ``ParseError`` (itself a ``ValueError``). The concrete
subclass, mirrored by the ``kind`` attribute, tells callers whether the
text was malformed or described an impossible value:

- ``StructuralError``: wrong number of components, trailing content, empty input
- ``NumericConversionError``: a numeric field is empty, non-digit, or out of range
- ``CalendarValidationError``: month outside 1-12, or day invalid for the month
- ``LabelValidationError``: empty label, empty segment, or disallowed characters
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Tag identifying which class of validation failed."""

    STRUCTURAL = "structural"
    NUMERIC_CONVERSION = "numeric_conversion"
    CALENDAR = "calendar"
    LABEL = "label"


class ParseError(ValueError):
    """Raised when text or components do not form a valid chronologic version.

    Attributes:
        kind: Which class of validation failed
        text: The string being parsed, or None for direct construction
        component: Component that failed ("input", "year", "month", "day",
            "changeset" or "label")
        value: The offending substring or value
        reason: Human-readable description of the failure
        segment: Index of the offending label segment, if any
    """

    kind: ErrorKind

    def __init__(
        self,
        reason: str,
        *,
        component: str = "input",
        value: Any = None,
        text: Optional[str] = None,
        segment: Optional[int] = None,
    ):
        self.reason = reason
        self.component = component
        self.value = value
        self.text = text
        self.segment = segment
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = self.component
        if self.segment is not None:
            where = f"{where} segment {self.segment}"
        message = f"Invalid {where}: {self.reason}"
        if self.text is not None:
            message += f" (in {self.text!r})"
        return message

    def __reduce__(self):
        # Keyword-only payload needs an explicit pickle recipe
        return (
            _rebuild,
            (type(self), self.reason, self.component, self.value, self.text, self.segment),
        )


def _rebuild(cls, reason, component, value, text, segment):
    return cls(reason, component=component, value=value, text=text, segment=segment)


class StructuralError(ParseError):
    """The input has the wrong shape: missing or extra components, or is empty."""

    kind = ErrorKind.STRUCTURAL


class NumericConversionError(ParseError):
    """A numeric component could not be converted to an in-range integer."""

    kind = ErrorKind.NUMERIC_CONVERSION


class CalendarValidationError(ParseError):
    """The numeric date components do not name a real calendar day."""

    kind = ErrorKind.CALENDAR


class LabelValidationError(ParseError):
    """The label is empty, has an empty segment, or contains disallowed characters."""

    kind = ErrorKind.LABEL


__all__ = [
    "ErrorKind",
    "ParseError",
    "StructuralError",
    "NumericConversionError",
    "CalendarValidationError",
    "LabelValidationError",
]
