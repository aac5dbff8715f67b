"""The append-only record of invocations made against a double."""

from __future__ import annotations

import datetime
import enum
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


class InvocationKind(enum.Enum):
    """How a member was used."""

    CALL = "call"
    GET = "get"
    SET = "set"


@dataclass(frozen=True)
class Invocation:
    """A single observed use of a doubled member.

    Attributes:
        index: Position in the double's record, starting at 0.
        member: The member name.
        kind: Whether the member was called, read or written.
        arguments: Bound call arguments keyed by parameter name; ``{"value": v}``
            for writes and empty for reads.
        timestamp: UTC time at which the invocation was recorded.
    """

    index: int
    member: str
    kind: InvocationKind
    arguments: Mapping[str, Any] = field(default_factory=dict)
    timestamp: datetime.datetime = field(
        default_factory=lambda: datetime.datetime.now(datetime.UTC)
    )

    def __str__(self) -> str:
        if self.kind is InvocationKind.GET:
            return f"#{self.index} get {self.member}"
        if self.kind is InvocationKind.SET:
            return f"#{self.index} set {self.member} = {self.arguments.get('value')!r}"
        args = ", ".join(f"{k}={v!r}" for k, v in self.arguments.items())
        return f"#{self.index} {self.member}({args})"


class InvocationRecord:
    """Ordered, append-only log of invocations.

    Note: This implementation is not thread-safe; a double is owned by a
    single test.
    """

    def __init__(self) -> None:
        self._entries: list[Invocation] = []

    def append(
        self, member: str, kind: InvocationKind, arguments: Mapping[str, Any]
    ) -> Invocation:
        """Record an invocation and return it."""
        invocation = Invocation(
            index=len(self._entries),
            member=member,
            kind=kind,
            arguments=MappingProxyType(dict(arguments)),
        )
        self._entries.append(invocation)
        return invocation

    def select(
        self,
        member: str,
        kind: InvocationKind,
        where: Callable[[Invocation], bool] | None = None,
    ) -> list[Invocation]:
        """Return the invocations of ``member`` of the given kind, in order.

        Args:
            member: The member name to select.
            kind: The invocation kind to select.
            where: Optional extra filter applied to each candidate.
        """
        return [
            inv
            for inv in self._entries
            if inv.member == member
            and inv.kind is kind
            and (where is None or where(inv))
        ]

    def __iter__(self) -> Iterator[Invocation]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Invocation:
        return self._entries[index]
