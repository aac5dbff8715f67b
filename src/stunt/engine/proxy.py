"""Substitute objects for test doubles.

The substitute is an instance of a class built per double. Every contract
member becomes a slot that delegates to the owning `TestDouble`, which looks
the member up in its configuration table at call time. When the contract was
reflected from a class, the substitute's class derives from it so that
``isinstance`` checks made by the consumer under test pass.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from stunt.contracts import MethodSignature, PropertySignature

if TYPE_CHECKING:
    from .double import TestDouble


def build_substitute(double: TestDouble) -> Any:
    """Create the object that stands in for the real dependency."""
    contract = double.contract
    short_name = contract.name.rsplit(".", 1)[-1]
    namespace: dict[str, Any] = {
        "__repr__": lambda self: f"<{short_name} double>",
        "__module__": __name__,
    }
    for member in contract.members.values():
        if isinstance(member, MethodSignature):
            namespace[member.name] = _method_slot(double, member)
        else:
            namespace[member.name] = _property_slot(double, member)

    base = contract.source or object
    metaclass = type(base)
    substitute_cls = metaclass(f"{short_name}Double", (base,), namespace)
    if base is not object:
        # private abstract members are not part of the contract
        substitute_cls.__abstractmethods__ = frozenset()
    return object.__new__(substitute_cls)


def _method_slot(double: TestDouble, method: MethodSignature) -> Callable[..., Any]:
    name = method.name

    def slot(self: Any, *args: Any, **kwargs: Any) -> Any:  # pylint: disable=unused-argument
        return double.handle_call(name, args, kwargs)

    slot.__name__ = name
    slot.__qualname__ = f"{double.contract.name}Double.{name}"
    return slot


def _property_slot(double: TestDouble, prop: PropertySignature) -> property:
    name = prop.name

    def fget(self: Any) -> Any:  # pylint: disable=unused-argument
        return double.handle_get(name)

    def fset(self: Any, value: Any) -> None:  # pylint: disable=unused-argument
        double.handle_set(name, value)

    return property(
        fget if prop.readable else None,
        fset if prop.writable else None,
    )
