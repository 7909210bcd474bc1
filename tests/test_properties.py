# SPDX-License-Identifier: MIT
"""Property-based tests for parsing, formatting and ordering.

These tests verify that:
- Formatting and parsing round-trip, including through leading zeros
- Ordering is a strict total order consistent with equality and hashing
- version_key sorts exactly as the comparison operators do
- Arbitrary input either parses or fails with a ParseError
"""

from __future__ import annotations

from datetime import date, timedelta

from hypothesis import assume, given, settings, strategies as st

from chronver import (
    MAX_CHANGESET,
    Ordering,
    ParseError,
    Version,
    compare_versions,
    days_in_month,
    is_valid_chronver,
    parse_version,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numeric_segments = st.integers(min_value=0, max_value=30).map(str)
text_segments = st.from_regex(r"[A-Za-z-][0-9A-Za-z-]{0,5}", fullmatch=True)
label_segments = st.one_of(numeric_segments, text_segments)
labels = st.lists(label_segments, min_size=1, max_size=4).map(".".join)


@st.composite
def versions(draw, years=st.integers(min_value=0, max_value=9999), changesets=None):
    """Generate a valid Version."""
    year = draw(years)
    month = draw(st.integers(min_value=1, max_value=12))
    day = draw(st.integers(min_value=1, max_value=days_in_month(year, month)))
    changeset = draw(changesets or st.integers(min_value=0, max_value=MAX_CHANGESET))
    label = draw(st.none() | labels)
    return Version(year, month, day, changeset, label)


# Narrow ranges so that equal and near-equal versions are common
close_versions = st.builds(
    Version,
    year=st.sampled_from([2023, 2024]),
    month=st.sampled_from([1, 2]),
    day=st.sampled_from([1, 2]),
    changeset=st.integers(min_value=0, max_value=2),
    label=st.none() | st.sampled_from(["1", "2", "alpha", "alpha.1", "alpha.beta", "beta", "rc.1"]),
)


@st.composite
def padded_strings(draw):
    """Generate a valid version string with arbitrary leading zeros."""
    v = draw(versions())

    def pad(value: int, max_extra: int) -> str:
        return "0" * draw(st.integers(min_value=0, max_value=max_extra)) + str(value)

    year = f"{v.year:04d}"
    year = "0" * draw(st.integers(min_value=0, max_value=2)) + year
    month = pad(v.month, 2 - len(str(v.month)))
    day = pad(v.day, 2 - len(str(v.day)))
    changeset = pad(v.changeset, 3)
    text = f"{year}.{month}.{day}.{changeset}"
    if v.label is not None:
        text += "-" + v.label
    return text


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# =============================================================================
# Round-trip
# =============================================================================


class TestRoundTrip:
    """Formatting then parsing yields the same version."""

    @given(v=versions())
    @settings(max_examples=200)
    def test_parse_format_roundtrip(self, v: Version):
        assert parse_version(str(v)) == v

    @given(text=padded_strings())
    @settings(max_examples=200)
    def test_reparse_is_idempotent(self, text: str):
        parsed = parse_version(text)
        assert parse_version(str(parsed)) == parsed
        assert str(parse_version(str(parsed))) == str(parsed)

    @given(text=padded_strings())
    @settings(max_examples=100)
    def test_canonical_form_has_no_padding(self, text: str):
        canonical = str(parse_version(text))
        for field in canonical.split("-", 1)[0].split(".")[1:]:
            assert field == "0" or not field.startswith("0")


# =============================================================================
# Ordering
# =============================================================================


class TestOrdering:
    """Ordering is a strict total order."""

    @given(a=close_versions, b=close_versions)
    @settings(max_examples=300)
    def test_totality(self, a: Version, b: Version):
        assert [a < b, a == b, a > b].count(True) == 1

    @given(a=close_versions, b=close_versions)
    @settings(max_examples=300)
    def test_antisymmetry(self, a: Version, b: Version):
        assert a.compare(b) == -b.compare(a)

    @given(a=close_versions, b=close_versions, c=close_versions)
    @settings(max_examples=300)
    def test_transitivity(self, a: Version, b: Version, c: Version):
        if a <= b and b <= c:
            assert a <= c
        if a < b and b < c:
            assert a < c

    @given(a=close_versions, b=close_versions)
    @settings(max_examples=300)
    def test_equality_matches_compare(self, a: Version, b: Version):
        assert (a == b) == (a.compare(b) is Ordering.EQUAL)
        if a == b:
            assert hash(a) == hash(b)
            assert str(a) == str(b)

    @given(a=versions(), b=versions())
    @settings(max_examples=200)
    def test_version_key_matches_compare(self, a: Version, b: Version):
        expected = compare_versions(a, b)
        assert _sign((version_key(a) > version_key(b)) - (version_key(a) < version_key(b))) == expected

    @given(a=close_versions, b=close_versions)
    @settings(max_examples=200)
    def test_version_key_matches_compare_close(self, a: Version, b: Version):
        expected = a.compare(b)
        assert (version_key(a) < version_key(b)) == (expected is Ordering.LESS)
        assert (version_key(a) == version_key(b)) == (expected is Ordering.EQUAL)

    @given(v=close_versions)
    def test_unlabeled_beats_labeled(self, v: Version):
        assume(v.label is not None)
        assert v.without_label() > v

    @given(items=st.lists(versions(), max_size=20))
    @settings(max_examples=100)
    def test_sorted_agrees_with_version_key(self, items: list[Version]):
        assert sorted(items) == sorted(items, key=version_key)


# =============================================================================
# Arbitrary input
# =============================================================================


class TestArbitraryInput:
    """Parsing never fails with anything but a ParseError."""

    @given(text=st.text(max_size=40))
    @settings(max_examples=300)
    def test_parse_arbitrary_text(self, text: str):
        try:
            v = parse_version(text)
        except ParseError:
            assert is_valid_chronver(text) is False
        else:
            assert is_valid_chronver(text) is True
            assert parse_version(str(v)) == v

    @given(text=st.from_regex(r"\d+\.\d+\.\d+(\.\d+)?(-\w+)?", fullmatch=True))
    @settings(max_examples=300)
    def test_parse_version_like_text(self, text: str):
        try:
            v = parse_version(text)
        except ParseError:
            return
        assert parse_version(str(v)) == v


# =============================================================================
# Transformations
# =============================================================================


class TestBumpProperties:
    """Bumping always yields a greater, unlabeled version."""

    @given(
        v=versions(
            years=st.integers(min_value=3, max_value=9997),
            changesets=st.integers(min_value=0, max_value=1000),
        ),
        offset=st.integers(min_value=-400, max_value=400),
    )
    @settings(max_examples=200)
    def test_bump_increases(self, v: Version, offset: int):
        release_day = v.date + timedelta(days=offset)
        bumped = v.bump(release_day)
        assert bumped > v
        assert bumped.label is None
        assert bumped.date == max(v.date, release_day)

    @given(day=st.dates(min_value=date(1, 1, 1), max_value=date(9999, 12, 31)))
    def test_from_date_roundtrip(self, day: date):
        assert Version.from_date(day).date == day
