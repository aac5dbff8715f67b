"""Argument matchers.

Matchers decide whether an actual argument value is acceptable for a
configuration or a verification. Three flavours exist:

* exact value: `Eq`, also produced implicitly from any plain value;
* predicate: `Satisfies`, wrapping a callable returning a bool;
* wildcard: `Anything`, optionally restricted to instances of a type.

`Args` groups per-parameter matchers for one call. It is written like the
call itself (``Args("wig")`` or ``Args(name="wig")``) and bound to the method
signature when it is used, so positional and keyword spellings of the same
call are treated alike. Parameters that `Args` does not mention match
anything.
"""

from __future__ import annotations

import abc
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any


class Matcher(abc.ABC):
    """Decides whether a single argument value is acceptable."""

    @abc.abstractmethod
    def matches(self, value: Any) -> bool:
        """Return True if ``value`` is accepted by this matcher."""

    @abc.abstractmethod
    def describe(self) -> str:
        """Return a short human-readable description used in failure reports."""


@dataclass(frozen=True, eq=True)
class Anything(Matcher):
    """Wildcard matcher, optionally restricted to instances of ``of_type``."""

    of_type: type | None = None

    def matches(self, value: Any) -> bool:
        return self.of_type is None or isinstance(value, self.of_type)

    def describe(self) -> str:
        if self.of_type is None:
            return "<any>"
        return f"<any {self.of_type.__name__}>"


@dataclass(frozen=True, eq=True)
class Eq(Matcher):
    """Matches values equal to ``expected``."""

    expected: Any

    def matches(self, value: Any) -> bool:
        return bool(value == self.expected)

    def describe(self) -> str:
        return repr(self.expected)


@dataclass(frozen=True, eq=True)
class Satisfies(Matcher):
    """Matches values for which ``predicate`` returns a truthy result."""

    predicate: Callable[[Any], bool]
    description: str | None = None

    def matches(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def describe(self) -> str:
        if self.description:
            return f"<{self.description}>"
        name = getattr(self.predicate, "__name__", repr(self.predicate))
        return f"<satisfies {name}>"


def as_matcher(value: Any) -> Matcher:
    """Return ``value`` unchanged if it is a `Matcher`, else wrap it in `Eq`."""
    if isinstance(value, Matcher):
        return value
    return Eq(value)


class Arg:
    """Factory namespace for argument matchers.

    Example:
        ```py
        double.verify("mutate_first_name", Args(Arg.that(lambda a: a == "wig")))
        double.configure_method("sum", Returns(3), Args(Arg.any(int), 2))
        ```
    """

    @staticmethod
    def any(of_type: type | None = None) -> Matcher:
        """Match any value, or any instance of ``of_type`` when given."""
        return Anything(of_type)

    @staticmethod
    def eq(expected: Any) -> Matcher:
        """Match values equal to ``expected``."""
        return Eq(expected)

    @staticmethod
    def that(predicate: Callable[[Any], bool], description: str | None = None) -> Matcher:
        """Match values for which ``predicate`` is truthy."""
        return Satisfies(predicate, description)


class Args:
    """Matchers for the arguments of one call, spelled like the call."""

    __slots__ = ("positional", "keywords")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.positional: tuple[Matcher, ...] = tuple(as_matcher(a) for a in args)
        self.keywords: tuple[tuple[str, Matcher], ...] = tuple(
            sorted((name, as_matcher(v)) for name, v in kwargs.items())
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Args):
            return NotImplemented
        return self.positional == other.positional and self.keywords == other.keywords

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Args({self.describe()})"

    @property
    def is_wildcard(self) -> bool:
        """True when no parameter is constrained."""
        return not self.positional and not self.keywords

    def bind(self, signature: inspect.Signature) -> dict[str, Any]:
        """Bind the matchers to ``signature``'s parameters.

        Returns:
            dict[str, Any]: Parameter name to matcher. Variadic parameters map
            to a tuple (``*args``) or a dict (``**kwargs``) of matchers.

        Raises:
            TypeError: If the matchers cannot be bound to the signature.
        """
        bound = signature.bind_partial(*self.positional, **dict(self.keywords))
        return dict(bound.arguments)

    def matches(self, signature: inspect.Signature, arguments: Mapping[str, Any]) -> bool:
        """Return True if the bound call ``arguments`` satisfy every matcher.

        Args:
            signature: The signature of the method the call was made on.
            arguments: The call's bound arguments, keyed by parameter name.
        """
        for name, expected in self.bind(signature).items():
            kind = signature.parameters[name].kind
            actual = arguments.get(name, _MISSING)
            if kind is inspect.Parameter.VAR_POSITIONAL:
                actual = actual if actual is not _MISSING else ()
                if len(actual) != len(expected):
                    return False
                if not all(m.matches(v) for m, v in zip(expected, actual)):
                    return False
            elif kind is inspect.Parameter.VAR_KEYWORD:
                actual = actual if actual is not _MISSING else {}
                for key, matcher in expected.items():
                    if key not in actual or not matcher.matches(actual[key]):
                        return False
            elif actual is _MISSING or not expected.matches(actual):
                return False
        return True

    def describe(self, signature: inspect.Signature | None = None) -> str:
        """Describe the matchers, by parameter name when ``signature`` is given."""
        if signature is None or self.is_wildcard:
            parts = [m.describe() for m in self.positional]
            parts.extend(f"{name}={m.describe()}" for name, m in self.keywords)
            return ", ".join(parts) if parts else "<any arguments>"
        parts = []
        for name, expected in self.bind(signature).items():
            if isinstance(expected, tuple):
                parts.extend(m.describe() for m in expected)
            elif isinstance(expected, dict):
                parts.extend(f"{k}={m.describe()}" for k, m in expected.items())
            else:
                parts.append(f"{name}={expected.describe()}")
        return ", ".join(parts)


ANY_ARGS = Args()
"""Matches every call, whatever its arguments."""

_MISSING = object()
