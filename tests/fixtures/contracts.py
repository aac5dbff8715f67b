"""Example capability contracts and consumers used across the test suite.

These are the kind of dependencies a test would double: a name manager with
properties, a calculator protocol, an e-mail gateway, and a wide "Foo"
interface exercising every member shape the engine supports. The last block
holds classes that cannot be doubled.
"""

from __future__ import annotations

import abc
import functools
from typing import ClassVar, Protocol, final

# pylint: disable=missing-function-docstring, too-few-public-methods, unused-argument

# ============================================================================
#                           Doubleable contracts
# ============================================================================


class PropertyManager(abc.ABC):
    """Holds a person's name."""

    @property
    @abc.abstractmethod
    def first_name(self) -> str: ...

    @first_name.setter
    @abc.abstractmethod
    def first_name(self, value: str) -> None: ...

    @property
    @abc.abstractmethod
    def last_name(self) -> str: ...

    @last_name.setter
    @abc.abstractmethod
    def last_name(self, value: str) -> None: ...

    @abc.abstractmethod
    def mutate_first_name(self, name: str) -> None: ...


class PropertyManagerConsumer:
    """Consumer under test: drives a PropertyManager."""

    def __init__(self, property_manager: PropertyManager) -> None:
        self._property_manager = property_manager

    def change_name(self, name: str) -> None:
        self._property_manager.first_name = name

    def get_name(self) -> str:
        return self._property_manager.first_name

    def change_remote_name(self, name: str) -> None:
        self._property_manager.mutate_first_name(name)


class Calculator(Protocol):
    """Adds numbers."""

    def sum(self, a: int, b: int) -> int: ...


class RealCalculator:
    """A concrete calculator whose logic a double must never run."""

    def sum(self, a: int, b: int) -> int:
        return a + b


class EmailGateway(abc.ABC):
    """Sends e-mails."""

    @abc.abstractmethod
    def send_greetings_email(self) -> None: ...

    @abc.abstractmethod
    def get_number(self) -> int: ...


class Foo(Protocol):
    """A wide interface covering every supported member shape."""

    name: str
    value: int
    registry: ClassVar[dict[str, int]]

    def do_something(self, value: str) -> bool: ...

    async def do_something_async(self) -> bool: ...

    def do_something_stringy(self, value: str) -> str: ...

    def get_count(self) -> int: ...

    def add(self, value: int) -> bool: ...

    def tags(self) -> list[str]: ...

    def submit(self, *items: str, **options: bool) -> bool: ...

    def greet(self, name: str, greeting: str = "Hello") -> str: ...

    def _internal(self) -> None: ...


class Sensor(abc.ABC):
    """Has a read-only property."""

    @property
    @abc.abstractmethod
    def reading(self) -> float: ...

    @abc.abstractmethod
    def _calibrate(self) -> None: ...


class Repository(abc.ABC):
    """Base contract extended by ``UserRepository``."""

    @abc.abstractmethod
    def get(self, key: str) -> dict[str, str] | None: ...

    def count(self) -> int:
        return 0


class UserRepository(Repository):
    """Derived contract: overrides ``count`` and adds ``add``."""

    def count(self) -> int:
        return 42

    @abc.abstractmethod
    def add(self, user: dict[str, str]) -> str: ...


class Marker:
    """A class without public members."""


class Greeter:
    """Has an annotated attribute with a class-level value."""

    greeting: str = "hello from the real class"

    def greet(self, name: str) -> str:
        return f"{self.greeting}, {name}"


class Builder:
    """Base whose static factory is replaced by an instance method below."""

    @staticmethod
    def build() -> int:
        return 1


class InstanceBuilder(Builder):
    """Overrides the static ``build`` with an ordinary method."""

    def build(self) -> int:  # pylint: disable=arguments-differ
        return 2


# ============================================================================
#                           Unsupported contracts
# ============================================================================


class WithFinalMethod(abc.ABC):
    """Has a method that cannot be overridden."""

    @abc.abstractmethod
    def open(self) -> None: ...

    @final
    def close(self) -> None: ...


class WithStaticMethod:
    """Has a static method."""

    @staticmethod
    def build() -> WithStaticMethod:
        return WithStaticMethod()


class WithClassMethod:
    """Has a class method."""

    @classmethod
    def create(cls) -> WithClassMethod:
        return cls()


class WithCachedProperty:
    """Has a cached property, which runs real logic on first access."""

    @functools.cached_property
    def connection(self) -> str:
        raise RuntimeError("real connection opened")

    def find(self, key: str) -> str:
        return key


class WithClassAttribute:
    """Has an unannotated class attribute."""

    greeting = "hello from the real class"

    def greet(self, name: str) -> str:
        return f"{self.greeting}, {name}"


@final
class Sealed:
    """A class that cannot be subclassed."""

    def run(self) -> None: ...
