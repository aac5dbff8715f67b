"""Structural description of a capability contract.

A `Contract` is the set of member signatures a double must implement. It is
usually derived from a class with `Contract.of`, but can also be written out
explicitly when no class exists:

```py
contract = Contract.define(
    "PropertyManager",
    PropertySignature("first_name", str),
    MethodSignature.from_parameters("mutate_first_name", ["name"]),
)
```
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from stunt.domain.defaults import default_for
from stunt.domain.errors import UnknownMemberError, UnsupportedContractError


@dataclass(frozen=True)
class MethodSignature:
    """A doubled method.

    Attributes:
        name: The method name.
        signature: Call signature without the ``self`` parameter.
        is_async: True for ``async def`` methods; the double then returns an
            awaitable carrying the configured result.
    """

    name: str
    signature: inspect.Signature = field(default_factory=inspect.Signature)
    is_async: bool = False

    @classmethod
    def from_parameters(
        cls,
        name: str,
        parameters: Iterable[str] = (),
        returns: Any = inspect.Signature.empty,
        is_async: bool = False,
    ) -> MethodSignature:
        """Build a signature of positional-or-keyword parameters by name."""
        params = [
            inspect.Parameter(p, inspect.Parameter.POSITIONAL_OR_KEYWORD)
            for p in parameters
        ]
        return cls(
            name,
            inspect.Signature(params, return_annotation=returns),
            is_async=is_async,
        )

    @property
    def return_type(self) -> Any:
        """The declared return annotation, or ``inspect.Signature.empty``."""
        return self.signature.return_annotation

    def default_return(self) -> Any:
        """Default result of an unconfigured call."""
        return default_for(self.return_type)

    def bind(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> inspect.BoundArguments:
        """Bind call arguments to the signature, filling in defaults.

        Raises:
            TypeError: If the arguments do not fit the signature.
        """
        bound = self.signature.bind(*args, **kwargs)
        bound.apply_defaults()
        return bound

    def __str__(self) -> str:
        prefix = "async " if self.is_async else ""
        return f"{prefix}{self.name}{self.signature}"


@dataclass(frozen=True)
class PropertySignature:
    """A doubled property.

    Attributes:
        name: The property name.
        value_type: Declared value type, or ``inspect.Signature.empty``.
        readable: True if the property has a getter.
        writable: True if the property has a setter.
    """

    name: str
    value_type: Any = inspect.Signature.empty
    readable: bool = True
    writable: bool = True

    def default_value(self) -> Any:
        """Value read from a property that was never configured nor written."""
        return default_for(self.value_type)

    def __str__(self) -> str:
        access = {
            (True, True): "get/set",
            (True, False): "get",
            (False, True): "set",
        }[(self.readable, self.writable)]
        if self.value_type is inspect.Signature.empty:
            return f"{self.name} {{{access}}}"
        type_name = inspect.formatannotation(self.value_type)
        return f"{self.name}: {type_name} {{{access}}}"


Member: TypeAlias = MethodSignature | PropertySignature


@dataclass(frozen=True)
class Contract:
    """Named set of member signatures.

    Attributes:
        name: The contract name, used in error messages.
        members: Member name to signature.
        source: The class the contract was derived from, if any. The double's
            substitute subclasses it so ``isinstance`` checks pass.
    """

    name: str
    members: Mapping[str, Member] = field(default_factory=dict)
    source: type | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        for key, member in self.members.items():
            if not isinstance(member, (MethodSignature, PropertySignature)):
                raise UnsupportedContractError(
                    self.name, key, f"unsupported member description {member!r}"
                )
            if key != member.name:
                raise UnsupportedContractError(
                    self.name, key, f"member is registered under the name '{key}'"
                )
            if isinstance(member, PropertySignature) and not (
                member.readable or member.writable
            ):
                raise UnsupportedContractError(
                    self.name, key, "property is neither readable nor writable"
                )
        object.__setattr__(self, "members", dict(self.members))

    # --- construction ---

    @classmethod
    def define(cls, name: str, *members: Member) -> Contract:
        """Build a contract from explicit member signatures."""
        return cls(name, {m.name: m for m in members})

    @classmethod
    def of(cls, target: type | Contract) -> Contract:
        """Return the contract of a class, or ``target`` if already a contract.

        Raises:
            UnsupportedContractError: If ``target`` cannot be doubled.
        """
        # pylint: disable=import-outside-toplevel
        from .reflection import contract_of

        return contract_of(target)

    # --- lookups ---

    def get_member(self, name: str) -> Member:
        """Return the member called ``name``.

        Raises:
            UnknownMemberError: If the contract has no such member.
        """
        try:
            return self.members[name]
        except KeyError:
            raise UnknownMemberError(self.name, name) from None

    def get_method(self, name: str) -> MethodSignature:
        """Return the method called ``name``.

        Raises:
            UnknownMemberError: If the contract has no such method.
        """
        member = self.members.get(name)
        if not isinstance(member, MethodSignature):
            raise UnknownMemberError(self.name, name, kind="method")
        return member

    def get_property(self, name: str) -> PropertySignature:
        """Return the property called ``name``.

        Raises:
            UnknownMemberError: If the contract has no such property.
        """
        member = self.members.get(name)
        if not isinstance(member, PropertySignature):
            raise UnknownMemberError(self.name, name, kind="property")
        return member

    def methods(self) -> Iterator[MethodSignature]:
        """Iterate over the contract's methods in declaration order."""
        return (m for m in self.members.values() if isinstance(m, MethodSignature))

    def properties(self) -> Iterator[PropertySignature]:
        """Iterate over the contract's properties in declaration order."""
        return (m for m in self.members.values() if isinstance(m, PropertySignature))

    def __contains__(self, name: object) -> bool:
        return name in self.members

    def __len__(self) -> int:
        return len(self.members)
