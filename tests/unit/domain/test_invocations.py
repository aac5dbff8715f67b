"""Unit tests for stunt.domain.invocations."""

import datetime

import pytest

from stunt.domain.invocations import Invocation, InvocationKind, InvocationRecord

# pylint: disable=redefined-outer-name


@pytest.fixture
def record() -> InvocationRecord:
    """A record with a call, a read and a write."""
    rec = InvocationRecord()
    rec.append("sum", InvocationKind.CALL, {"a": 1, "b": 2})
    rec.append("first_name", InvocationKind.GET, {})
    rec.append("first_name", InvocationKind.SET, {"value": "Ni!"})
    return rec


def test_append_assigns_sequential_indexes(record):
    """Indexes follow the order of recording."""
    assert [inv.index for inv in record] == [0, 1, 2]
    assert len(record) == 3


def test_entries_are_immutable(record):
    """Recorded invocations and their arguments cannot be altered."""
    invocation = record[0]
    with pytest.raises(TypeError):
        invocation.arguments["a"] = 5  # type: ignore[index]
    with pytest.raises(AttributeError):
        invocation.member = "other"  # type: ignore[misc]


def test_arguments_are_copied():
    """Mutating the caller's mapping does not change the record."""
    rec = InvocationRecord()
    arguments = {"a": 1}
    rec.append("sum", InvocationKind.CALL, arguments)
    arguments["a"] = 2
    assert rec[0].arguments["a"] == 1


def test_select_by_member_and_kind(record):
    """select filters on member and kind."""
    assert [inv.index for inv in record.select("first_name", InvocationKind.SET)] == [2]
    assert [inv.index for inv in record.select("first_name", InvocationKind.GET)] == [1]
    assert record.select("sum", InvocationKind.GET) == []


def test_select_with_filter(record):
    """An extra filter narrows the selection."""
    selected = record.select(
        "sum", InvocationKind.CALL, where=lambda inv: inv.arguments["a"] == 2
    )
    assert selected == []


def test_timestamps_are_utc(record):
    """Timestamps are timezone-aware UTC."""
    assert record[0].timestamp.tzinfo == datetime.UTC


@pytest.mark.parametrize(
    "invocation, text",
    [
        (
            Invocation(0, "sum", InvocationKind.CALL, {"a": 1, "b": 2}),
            "#0 sum(a=1, b=2)",
        ),
        (Invocation(1, "first_name", InvocationKind.GET), "#1 get first_name"),
        (
            Invocation(2, "first_name", InvocationKind.SET, {"value": "Ni!"}),
            "#2 set first_name = 'Ni!'",
        ),
    ],
)
def test_str(invocation, text):
    """Invocations render compactly for failure reports."""
    assert str(invocation) == text
