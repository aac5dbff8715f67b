"""Behavior configurations for doubled members.

Method policies decide what a doubled method does when a matching call
arrives; property modes decide how a doubled property answers reads and
writes.
"""

from __future__ import annotations

import abc
import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .unset import UNSET, _UnsetType, is_unset

# pylint: disable=too-few-public-methods

# ============================================================================
#                           Method policies
# ============================================================================


class MethodPolicy(abc.ABC):
    """What a doubled method does for a matching call."""

    @abc.abstractmethod
    def respond(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        """Produce the call's result (or raise) for the given arguments."""


@dataclass(frozen=True)
class Returns(MethodPolicy):
    """Return ``value`` on every matching call."""

    value: Any

    def respond(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return self.value


@dataclass(frozen=True)
class Computes(MethodPolicy):
    """Return ``rule(*args, **kwargs)`` for every matching call.

    The rule receives the call's arguments bound to the method signature,
    defaults applied.
    """

    rule: Callable[..., Any]

    def respond(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return self.rule(*args, **kwargs)


@dataclass(frozen=True)
class Raises(MethodPolicy):
    """Raise ``error`` on every matching call.

    ``error`` may be an exception instance or an exception class; a class is
    instantiated without arguments on each call.
    """

    error: BaseException | type[BaseException]

    def __post_init__(self) -> None:
        is_class = isinstance(self.error, type) and issubclass(
            self.error, BaseException
        )
        if not is_class and not isinstance(self.error, BaseException):
            raise TypeError(
                f"Raises expects an exception instance or class, got {self.error!r}"
            )

    def respond(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        if isinstance(self.error, type):
            raise self.error()
        raise self.error


# ============================================================================
#                           Property modes
# ============================================================================


class PropertyMode(abc.ABC):
    """How a doubled property answers reads and writes."""

    @property
    @abc.abstractmethod
    def tracks_writes(self) -> bool:
        """True when written values are returned by subsequent reads."""

    @abc.abstractmethod
    def initial_value(self, default: Any) -> Any:
        """Return the value a read yields before any write.

        Args:
            default: The property type's default value.
        """


@dataclass(frozen=True)
class FixedValue(PropertyMode):
    """Always read as ``value``; writes are recorded but change nothing."""

    value: Any

    @property
    def tracks_writes(self) -> bool:
        return False

    def initial_value(self, default: Any) -> Any:
        return self.value


@dataclass(frozen=True)
class Tracked(PropertyMode):
    """Store every written value and return the latest one on read.

    Before the first write the property reads as ``initial`` or, when that is
    left ``UNSET``, as the property type's default value.
    """

    initial: Any | _UnsetType = UNSET

    @property
    def tracks_writes(self) -> bool:
        return True

    def initial_value(self, default: Any) -> Any:
        if is_unset(self.initial):
            return default
        return self.initial


# ============================================================================
#                           Double behavior
# ============================================================================


class Behavior(enum.Enum):
    """How a double treats members that have no configuration.

    * ``LOOSE``: answer with defaults (type default values, last written
      property values).
    * ``STRICT``: raise `UnconfiguredMemberError`.
    """

    LOOSE = "loose"
    STRICT = "strict"
