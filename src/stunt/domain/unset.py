"""The ``UNSET`` sentinel.

Marks a value that was intentionally not provided, as distinct from ``None``
which is a legitimate value for a property or a return value.
"""

from dataclasses import dataclass


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel type for values that were not provided."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()


def is_unset(value: object) -> bool:
    """Return True if ``value`` is the ``UNSET`` sentinel."""
    return isinstance(value, _UnsetType)
