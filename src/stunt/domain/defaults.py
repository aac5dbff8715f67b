"""Default values for declared types.

Unconfigured doubled members answer with the default value of their declared
type: ``None`` for anything that may be ``None`` or is not recognised, the
zero value of scalar builtins and an empty instance of container types.
"""

import collections.abc
import inspect
import types
from typing import Any, Union, get_args, get_origin

_SCALARS: dict[Any, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    str: "",
    bytes: b"",
}

_CONTAINERS: dict[Any, type] = {
    list: list,
    dict: dict,
    set: set,
    frozenset: frozenset,
    tuple: tuple,
    collections.abc.Sequence: tuple,
    collections.abc.MutableSequence: list,
    collections.abc.Mapping: dict,
    collections.abc.MutableMapping: dict,
    collections.abc.Set: frozenset,
    collections.abc.MutableSet: set,
    collections.abc.Iterable: tuple,
    collections.abc.Collection: tuple,
}


def default_for(annotation: Any) -> Any:
    """Return the default value for a type annotation.

    Args:
        annotation: A resolved annotation, ``inspect.Parameter.empty`` for a
            missing one, or an unresolved string annotation.

    Returns:
        A fresh default value; containers are new instances on each call.

    Example:
        ```py
        default_for(int)             # 0
        default_for(list[str])       # []
        default_for(int | None)      # None
        default_for(SomeClass)       # None
        ```
    """
    if annotation is inspect.Parameter.empty or annotation is None:
        return None
    if annotation is type(None) or isinstance(annotation, str):
        return None

    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        if type(None) in get_args(annotation):
            return None
        return default_for(get_args(annotation)[0])
    if origin is not None:
        annotation = origin

    if annotation in _SCALARS:
        return _SCALARS[annotation]
    if annotation in _CONTAINERS:
        return _CONTAINERS[annotation]()
    return None
