# SPDX-License-Identifier: MIT
"""Chronologic version parsing and comparison.

This package parses, compares and formats chronologic versions of the form
YEAR.MONTH.DAY.CHANGESET[-LABEL], where the changeset counts releases made
on the same day and the optional label marks a pre-release.

Example:
    >>> from chronver import parse_version, compare_versions, is_valid_chronver
    >>>
    >>> version = parse_version("2023.05.17.3-beta.2")
    >>> version.month
    5
    >>> version.label
    'beta.2'
    >>> str(version)
    '2023.5.17.3-beta.2'
    >>>
    >>> is_valid_chronver("2023.2.29.0")
    False
    >>>
    >>> compare_versions("2024.1.9.0-alpha", "2024.1.9.0") == -1
    True
"""

import logging

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    ParseError,
    StructuralError,
    NumericConversionError,
    CalendarValidationError,
    LabelValidationError,
)
from .version import (
    Version,
    Ordering,
    parse_version,
    is_valid_chronver,
    days_in_month,
    MAX_YEAR,
    MAX_CHANGESET,
    BREAK_LABEL,
)
from .compare import (
    compare_versions,
    version_key,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_chronver",
    "days_in_month",
    "MAX_YEAR",
    "MAX_CHANGESET",
    "BREAK_LABEL",
    # Version comparison
    "Ordering",
    "compare_versions",
    "version_key",
    # Errors
    "ErrorKind",
    "ParseError",
    "StructuralError",
    "NumericConversionError",
    "CalendarValidationError",
    "LabelValidationError",
]
