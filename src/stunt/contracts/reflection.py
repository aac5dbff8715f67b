"""Derive a `Contract` from a Python class.

Public members are collected along the class MRO, the most derived
definition winning:

* plain and ``async`` functions become methods;
* ``property`` objects become properties, writable when they have a setter;
* annotated attributes (protocol-style attributes, optionally with a plain
  class-level value) become read-write properties; ``ClassVar`` ones are
  skipped.

Only the winning definition of each name is checked. Members the engine
cannot override make the whole class unsupported: members marked with
``typing.final``, static methods, class methods, and any other public class
attribute such as ``functools.cached_property`` or an unannotated constant.
A class marked ``final`` cannot be doubled at all.
"""

import inspect
import logging
import typing
from typing import Any, Protocol

from stunt.domain.errors import UnsupportedContractError

from .model import Contract, Member, MethodSignature, PropertySignature

logger = logging.getLogger(__name__)

_SKIPPED_BASES = (object, Protocol, typing.Generic)
_ANNOTATION_ONLY = object()  # annotated name without a class-level value


def contract_of(target: Any) -> Contract:
    """Return the contract described by ``target``.

    Args:
        target: A class to reflect on, or an existing `Contract`.

    Returns:
        Contract: ``target`` itself for contracts, else the reflected contract.

    Raises:
        UnsupportedContractError: If ``target`` is not a class or contract, or
            if it has members that cannot be overridden.
    """
    if isinstance(target, Contract):
        return target
    if not isinstance(target, type):
        raise UnsupportedContractError(
            repr(target), None, "expected a class or a Contract"
        )
    if _is_final(target):
        raise UnsupportedContractError(
            target.__qualname__, None, "the class is marked final"
        )

    class_hints = _type_hints(target)
    members: dict[str, Member] = {}
    for name, (owner, attr) in _declarations(target).items():
        member = _member_for(target.__qualname__, owner, name, attr, class_hints)
        if member is not None:
            members[name] = member

    logger.debug(
        "Reflected contract %s with %d member(s)", target.__qualname__, len(members)
    )
    return Contract(target.__qualname__, members, source=target)


def _declarations(target: type) -> dict[str, tuple[type, Any]]:
    """Map each public name to its most derived declaring class and value."""
    declarations: dict[str, tuple[type, Any]] = {}
    for klass in reversed(target.__mro__):
        if klass in _SKIPPED_BASES:
            continue
        namespace = vars(klass)
        for name in inspect.get_annotations(klass):
            if _is_public(name) and name not in namespace:
                declarations[name] = (klass, _ANNOTATION_ONLY)
        for name, attr in namespace.items():
            if _is_public(name):
                declarations[name] = (klass, attr)
    return declarations


def _member_for(
    contract_name: str,
    owner: type,
    name: str,
    attr: Any,
    class_hints: dict[str, Any],
) -> Member | None:
    """Return the member for the winning declaration of ``name``.

    ClassVar annotations yield None. Anything the substitute cannot replace
    raises `UnsupportedContractError`.
    """
    if isinstance(attr, (staticmethod, classmethod)):
        raise UnsupportedContractError(
            contract_name, name, "static and class methods cannot be overridden"
        )
    if isinstance(attr, property):
        if _is_final(attr) or _is_final(attr.fget):
            raise UnsupportedContractError(
                contract_name, name, "the property is marked final"
            )
        return _property_signature(name, attr)
    if inspect.isfunction(attr):
        if _is_final(attr):
            raise UnsupportedContractError(
                contract_name, name, "the method is marked final"
            )
        return _method_signature(name, attr)

    annotations = inspect.get_annotations(owner)
    if name in annotations and (attr is _ANNOTATION_ONLY or _is_plain_data(attr)):
        hint = class_hints.get(name, annotations[name])
        if typing.get_origin(hint) is typing.ClassVar:
            return None
        return PropertySignature(name, hint)
    raise UnsupportedContractError(
        contract_name,
        name,
        f"{type(attr).__name__} members cannot be substituted",
    )


def _method_signature(name: str, func: Any) -> MethodSignature:
    hints = _type_hints(func)
    signature = inspect.signature(func)
    parameters = [
        param.replace(annotation=hints.get(param.name, param.annotation))
        for param in list(signature.parameters.values())[1:]  # drop self
    ]
    returns = hints.get("return", signature.return_annotation)
    if returns is type(None):
        returns = None  # get_type_hints turns "-> None" into NoneType
    return MethodSignature(
        name,
        signature.replace(parameters=parameters, return_annotation=returns),
        is_async=inspect.iscoroutinefunction(func),
    )


def _property_signature(name: str, prop: property) -> PropertySignature:
    value_type: Any = inspect.Signature.empty
    if prop.fget is not None:
        value_type = _type_hints(prop.fget).get("return", value_type)
    return PropertySignature(
        name,
        value_type,
        readable=prop.fget is not None,
        writable=prop.fset is not None,
    )


def _type_hints(obj: Any) -> dict[str, Any]:
    """Resolve annotations, falling back to the raw ones if that fails."""
    try:
        return typing.get_type_hints(obj)
    except (NameError, TypeError) as exc:
        logger.debug("Could not resolve type hints of %r: %s", obj, exc)
        return dict(getattr(obj, "__annotations__", {}))


def _is_final(obj: Any) -> bool:
    return bool(getattr(obj, "__final__", False))


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_plain_data(attr: Any) -> bool:
    return not callable(attr) and not hasattr(type(attr), "__get__")
