# SPDX-License-Identifier: MIT
"""Chronologic version parsing for release identifiers.

Supports YEAR.MONTH.DAY.CHANGESET format with an optional label:
- Date: 2024.1.9, 2024.01.09 (leading zeros are accepted and dropped)
- Changeset: counts releases within one day, 2024.1.9.0, 2024.1.9.12
- Label: -alpha, -rc.1, -feature-x.2, -break
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Any, Optional

from .errors import (
    CalendarValidationError,
    NumericConversionError,
    ParseError,
    StructuralError,
)
from .label import compare_labels, validate_label

logger = logging.getLogger(__name__)

MAX_YEAR = 9999
MIN_YEAR_DIGITS = 4
MAX_DATE_FIELD_DIGITS = 2
MAX_CHANGESET = 2**32 - 1

# Label marking a release that introduces breaking changes
BREAK_LABEL = "break"

NUMERIC_COMPONENTS = ("year", "month", "day", "changeset")


class Ordering(IntEnum):
    """Result of comparing two versions."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month of the proleptic Gregorian calendar.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 2)
        28
    """
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


def _check_integer(component: str, value: Any, maximum: Optional[int] = None) -> int:
    # bool is an int subclass but never a meaningful version component
    if not isinstance(value, int) or isinstance(value, bool):
        raise NumericConversionError(
            f"must be an integer, got {type(value).__name__}",
            component=component,
            value=value,
        )
    if maximum is None:
        return value
    if value < 0:
        raise NumericConversionError("must not be negative", component=component, value=value)
    if value > maximum:
        raise NumericConversionError(
            f"must not exceed {maximum}", component=component, value=value
        )
    return value


def _check_calendar(year: int, month: int, day: int, text: Optional[str] = None) -> None:
    if not 1 <= month <= 12:
        raise CalendarValidationError(
            "month must be between 1 and 12", component="month", value=month, text=text
        )
    last_day = days_in_month(year, month)
    if not 1 <= day <= last_day:
        raise CalendarValidationError(
            f"day must be between 1 and {last_day} for {year:04d}-{month:02d}",
            component="day",
            value=day,
            text=text,
        )


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed chronologic version.

    Instances are immutable and always valid: direct construction runs the
    same range, calendar and label checks as ``parse_version``.

    Attributes:
        year: Release year (0-9999)
        month: Release month (1-12)
        day: Release day, valid for the year and month
        changeset: Release counter within the day (0 for the first release)
        label: Optional label (e.g., "alpha", "rc.1", "break")

    Raises:
        NumericConversionError: If a numeric field is not an in-range integer
        CalendarValidationError: If the date does not exist
        LabelValidationError: If the label is malformed
    """

    year: int
    month: int
    day: int
    changeset: int = 0
    label: Optional[str] = None

    def __post_init__(self) -> None:
        _check_integer("year", self.year, MAX_YEAR)
        _check_integer("month", self.month)
        _check_integer("day", self.day)
        _check_integer("changeset", self.changeset, MAX_CHANGESET)
        _check_calendar(self.year, self.month, self.day)
        if self.label is not None:
            # frozen dataclass: store the normalized label directly
            object.__setattr__(self, "label", validate_label(self.label))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return self.format()

    def format(self) -> str:
        """Render the version in canonical form.

        Numbers are written without padding, except that the year always
        has at least four digits. The label, if any, follows a hyphen.

        Examples:
            >>> Version(2024, 1, 9, 0).format()
            '2024.1.9.0'
            >>> Version(2023, 5, 17, 3, "beta.2").format()
            '2023.5.17.3-beta.2'
        """
        version = self.base_version
        if self.label is not None:
            version += f"-{self.label}"
        return version

    @property
    def base_version(self) -> str:
        """Return the version without its label."""
        return f"{self.year:04d}.{self.month}.{self.day}.{self.changeset}"

    @property
    def date(self) -> date:
        """Return the release date.

        Raises:
            ValueError: For year 0, which ``datetime.date`` cannot represent
        """
        return date(self.year, self.month, self.day)

    @property
    def label_segments(self) -> tuple[str, ...]:
        """Return the dot-separated label segments (empty when unlabeled)."""
        if self.label is None:
            return ()
        return tuple(self.label.split("."))

    @property
    def is_prerelease(self) -> bool:
        """Return True if the version carries a label."""
        return self.label is not None

    @property
    def is_breaking(self) -> bool:
        """Return True if the version is marked as introducing breaking changes."""
        return self.label == BREAK_LABEL

    # Ordering

    def compare(self, other: Version) -> Ordering:
        """Compare this version with another.

        Year, month, day and changeset are compared numerically in that
        order. On a tie, an unlabeled version is greater than a labeled one
        and two labels are compared segment by segment.

        Examples:
            >>> Version(2024, 1, 9, 0).compare(Version(2024, 1, 9, 0, "alpha"))
            <Ordering.GREATER: 1>
        """
        for attr in NUMERIC_COMPONENTS:
            val1 = getattr(self, attr)
            val2 = getattr(other, attr)
            if val1 != val2:
                return Ordering.LESS if val1 < val2 else Ordering.GREATER
        return Ordering(compare_labels(self.label, other.label))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    # Construction and transformation

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string. Alias of ``parse_version``."""
        return parse_version(version_string)

    @classmethod
    def from_date(cls, day: date, changeset: int = 0, label: Optional[str] = None) -> Version:
        """Create a version for a calendar date.

        Examples:
            >>> Version.from_date(date(2024, 4, 3))
            Version(year=2024, month=4, day=3, changeset=0, label=None)
        """
        return cls(day.year, day.month, day.day, changeset, label)

    @classmethod
    def today(cls, changeset: int = 0, label: Optional[str] = None) -> Version:
        """Create a version for the local current date."""
        today = date.today()
        logger.debug("Creating version for current date %s", today.isoformat())
        return cls.from_date(today, changeset, label)

    def with_label(self, label: Optional[str]) -> Version:
        """Return a copy of this version with the label replaced (or cleared with None)."""
        return Version(self.year, self.month, self.day, self.changeset, label)

    def without_label(self) -> Version:
        """Return a copy of this version without a label."""
        return self.with_label(None)

    def bump(self, today: Optional[date] = None) -> Version:
        """Return the next release version.

        A release on the same day increments the changeset; a release on a
        later day starts over at changeset 0. The label is always dropped.
        A version dated after ``today`` keeps its date and increments the
        changeset, so the result is always greater than ``self``.

        Args:
            today: Release date (defaults to the local current date)

        Returns:
            The next Version

        Raises:
            NumericConversionError: If the changeset would exceed MAX_CHANGESET

        Examples:
            >>> Version(2024, 4, 3, 1, "rc.1").bump(date(2024, 4, 3))
            Version(year=2024, month=4, day=3, changeset=2, label=None)
            >>> Version(2024, 4, 3, 1).bump(date(2024, 4, 5))
            Version(year=2024, month=4, day=5, changeset=0, label=None)
        """
        if today is None:
            today = date.today()
        current = (self.year, self.month, self.day)
        target = (today.year, today.month, today.day)
        if target > current:
            logger.debug("Bumping %s to new release date %s", self, today.isoformat())
            return Version.from_date(today)
        logger.debug("Bumping changeset of %s", self)
        return Version(self.year, self.month, self.day, self.changeset + 1)

    # Serialization hook for pydantic models

    @classmethod
    def _validate(cls, value: Any) -> Version:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return parse_version(value)
        raise StructuralError(
            f"version must be a string or Version, got {type(value).__name__}", value=value
        )

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        """Validate from strings and serialize to the canonical string form."""
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict[str, Any]:
        return {"type": "string", "format": "chronver", "examples": ["2024.1.9.0", "2024.1.9.1-rc.1"]}


def _convert(
    component: str,
    raw: str,
    text: str,
    min_digits: int = 1,
    max_digits: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    """Convert one numeric component of a version string."""
    if not raw:
        raise NumericConversionError("component is empty", component=component, value=raw, text=text)
    if not (raw.isascii() and raw.isdigit()):
        raise NumericConversionError(
            f"{raw!r} is not a decimal number", component=component, value=raw, text=text
        )
    if len(raw) < min_digits:
        raise NumericConversionError(
            f"must have at least {min_digits} digits", component=component, value=raw, text=text
        )
    if max_digits is not None and len(raw) > max_digits:
        raise NumericConversionError(
            f"must have at most {max_digits} digits", component=component, value=raw, text=text
        )

    digits = raw.lstrip("0") or "0"
    # Length check first keeps int() away from arbitrarily long input
    if maximum is not None and (len(digits) > len(str(maximum)) or int(digits) > maximum):
        raise NumericConversionError(
            f"must not exceed {maximum}", component=component, value=raw, text=text
        )
    return int(digits)


def parse_version(version_string: str) -> Version:
    """Parse a chronologic version string into a Version object.

    Args:
        version_string: A string in YEAR.MONTH.DAY.CHANGESET[-LABEL] format

    Returns:
        A Version object with parsed components

    Raises:
        StructuralError: If the string is empty, has the wrong number of
            components, or has trailing content
        NumericConversionError: If a numeric component is malformed or out of range
        CalendarValidationError: If the date does not exist
        LabelValidationError: If the label is malformed

    Examples:
        >>> parse_version("2024.1.9.0")
        Version(year=2024, month=1, day=9, changeset=0, label=None)

        >>> parse_version("2023.05.17.3-beta.2")
        Version(year=2023, month=5, day=17, changeset=3, label='beta.2')
    """
    if not isinstance(version_string, str):
        raise StructuralError(
            f"version must be a string, got {type(version_string).__name__}",
            value=version_string,
        )

    text = version_string.strip()
    if not text:
        raise StructuralError("version string cannot be empty", value=version_string, text=version_string)

    # Build metadata has no place in a chronologic version
    body, plus, trailing = text.partition("+")
    if plus:
        raise StructuralError(
            f"unexpected trailing content {plus + trailing!r}", value=plus + trailing, text=text
        )

    prefix, hyphen, label = body.partition("-")

    fields = prefix.split(".")
    if len(fields) < len(NUMERIC_COMPONENTS):
        raise StructuralError(
            f"too few components, expected {len(NUMERIC_COMPONENTS)} got {len(fields)}",
            value=prefix,
            text=text,
        )
    if len(fields) > len(NUMERIC_COMPONENTS):
        extra = ".".join(fields[len(NUMERIC_COMPONENTS) :])
        raise StructuralError(
            f"unexpected trailing content {extra!r}", value=extra, text=text
        )

    raw_year, raw_month, raw_day, raw_changeset = fields
    year = _convert("year", raw_year, text, min_digits=MIN_YEAR_DIGITS, maximum=MAX_YEAR)
    month = _convert("month", raw_month, text, max_digits=MAX_DATE_FIELD_DIGITS)
    day = _convert("day", raw_day, text, max_digits=MAX_DATE_FIELD_DIGITS)
    changeset = _convert("changeset", raw_changeset, text, maximum=MAX_CHANGESET)

    _check_calendar(year, month, day, text)

    normalized_label = validate_label(label, text) if hyphen else None

    return Version(
        year=year,
        month=month,
        day=day,
        changeset=changeset,
        label=normalized_label,
    )


def is_valid_chronver(version_string: str) -> bool:
    """Check if a string is a valid chronologic version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is a valid chronologic version, False otherwise

    Examples:
        >>> is_valid_chronver("2024.1.9.0")
        True
        >>> is_valid_chronver("2024.1.9")
        False
        >>> is_valid_chronver("2024.2.30.0")
        False
    """
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True


__all__ = [
    "Version",
    "Ordering",
    "parse_version",
    "is_valid_chronver",
    "days_in_month",
    "MAX_YEAR",
    "MAX_CHANGESET",
    "BREAK_LABEL",
]
