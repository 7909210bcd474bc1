# SPDX-License-Identifier: MIT
"""Version comparison for chronologic versions.

Ordering: year, month, day, changeset, then label.
An unlabeled version ranks above the same version with any label.
"""

from __future__ import annotations

from typing import Union

from .label import label_key
from .version import Ordering, Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> Ordering:
    """Compare two chronologic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        Ordering.LESS (-1) if version1 < version2
        Ordering.EQUAL (0) if version1 == version2
        Ordering.GREATER (1) if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("2024.1.9.0", "2024.1.10.0")
        <Ordering.LESS: -1>
        >>> compare_versions("2024.01.09.0", "2024.1.9.0") == 0
        True
        >>> compare_versions("2024.1.9.0", "2024.1.9.0-rc.1") == 1
        True
    """
    return _coerce(version1).compare(_coerce(version2))


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple that can be used for sorting versions

    Examples:
        >>> sorted(["2024.1.9.0", "2024.1.8.3", "2024.1.9.0-rc.1"], key=version_key)
        ['2024.1.8.3', '2024.1.9.0-rc.1', '2024.1.9.0']
    """
    v = _coerce(version)

    # No label becomes (1,) to sort after every label
    # A label becomes (0, segment keys...)
    if v.label is None:
        label_part: tuple = (1,)
    else:
        label_part = (0, label_key(v.label))

    return (v.year, v.month, v.day, v.changeset, label_part)


__all__ = ["Ordering", "compare_versions", "version_key"]
