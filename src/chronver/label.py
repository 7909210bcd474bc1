# SPDX-License-Identifier: MIT
"""Label validation and segment ordering.

A label is a dot-separated list of segments, each made of ASCII letters,
digits and hyphens (``alpha``, ``rc.1``, ``feature-x.2``). Segments made
only of digits are numeric and compare by value; all other segments are
text and compare by codepoint. Numeric segments sort before text ones.
"""

from __future__ import annotations

import re
from typing import Optional, Union

from .errors import LabelValidationError

SEGMENT_PATTERN = re.compile(r"[0-9A-Za-z-]+")
NUMERIC_SEGMENT_PATTERN = re.compile(r"[0-9]+")

# Tags for segment_key; numeric segments sort first
NUMERIC = 0
TEXT = 1

# Numeric values are keyed as (digit count, digits without leading zeros)
SegmentKey = tuple[int, Union[tuple[int, str], str]]


def is_numeric_segment(segment: str) -> bool:
    """Return True if the segment consists only of ASCII digits."""
    return NUMERIC_SEGMENT_PATTERN.fullmatch(segment) is not None


def segment_key(segment: str) -> SegmentKey:
    """Classify a label segment for comparison.

    Returns ``(NUMERIC, (length, digits))`` for numeric segments, with
    leading zeros dropped, and ``(TEXT, str)`` otherwise, so tuples of keys
    order exactly as labels do. Comparing digit count first and then the
    digits orders numbers by value at any length.

    Examples:
        >>> segment_key("012")
        (0, (2, '12'))
        >>> segment_key("rc")
        (1, 'rc')
    """
    if is_numeric_segment(segment):
        digits = segment.lstrip("0") or "0"
        return (NUMERIC, (len(digits), digits))
    return (TEXT, segment)


def label_key(label: str) -> tuple[SegmentKey, ...]:
    """Return the comparison key of a (valid) label."""
    return tuple(segment_key(part) for part in label.split("."))


def compare_labels(label1: Optional[str], label2: Optional[str]) -> int:
    """Compare two labels.

    Returns:
        -1 if label1 < label2
        0 if label1 == label2
        1 if label1 > label2

    An absent label ranks above any label: ``2024.1.9.0`` is the release
    that ``2024.1.9.0-rc.1`` precedes.
    """
    if label1 is None and label2 is None:
        return 0
    if label1 is None:
        return 1
    if label2 is None:
        return -1

    key1 = label_key(label1)
    key2 = label_key(label2)
    for k1, k2 in zip(key1, key2):
        if k1 != k2:
            return -1 if k1 < k2 else 1

    # Shared prefix is equal, the shorter label sorts first
    if len(key1) != len(key2):
        return -1 if len(key1) < len(key2) else 1
    return 0


def validate_label(label: str, text: Optional[str] = None) -> str:
    """Validate a label and return it in normalized form.

    Numeric segments are rewritten without leading zeros, so that labels
    that compare equal are also structurally equal.

    Args:
        label: Label text without the leading hyphen
        text: Full version string the label came from, for error context

    Returns:
        The normalized label

    Raises:
        LabelValidationError: If the label or one of its segments is empty,
            or a segment contains characters other than ASCII letters,
            digits and hyphens

    Examples:
        >>> validate_label("beta.02")
        'beta.2'
    """
    if not isinstance(label, str):
        raise LabelValidationError(
            f"label must be a string, got {type(label).__name__}",
            component="label",
            value=label,
            text=text,
        )
    if not label:
        raise LabelValidationError("label cannot be empty", component="label", value=label, text=text)

    normalized = []
    for index, segment in enumerate(label.split(".")):
        if not segment:
            raise LabelValidationError(
                "segment cannot be empty",
                component="label",
                value=label,
                text=text,
                segment=index,
            )
        if not SEGMENT_PATTERN.fullmatch(segment):
            raise LabelValidationError(
                f"segment {segment!r} may only contain ASCII letters, digits and hyphens",
                component="label",
                value=segment,
                text=text,
                segment=index,
            )
        if is_numeric_segment(segment):
            segment = segment.lstrip("0") or "0"
        normalized.append(segment)

    return ".".join(normalized)
