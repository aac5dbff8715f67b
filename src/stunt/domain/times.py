"""Call-count expectations used by verification.

A `Times` value describes how many matching invocations a verification
accepts, as an inclusive range ``[minimum, maximum]`` where a missing maximum
means "no upper bound".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Times:
    """Inclusive range of acceptable invocation counts."""

    minimum: int
    maximum: int | None

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ValueError(f"minimum must be non-negative, got {self.minimum}")
        if self.maximum is not None and self.maximum < self.minimum:
            raise ValueError(
                f"maximum ({self.maximum}) must not be less than minimum ({self.minimum})"
            )

    # --- factories ---

    @classmethod
    def exactly(cls, count: int) -> Times:
        """Accept exactly ``count`` invocations."""
        return cls(count, count)

    @classmethod
    def once(cls) -> Times:
        """Accept exactly one invocation."""
        return cls.exactly(1)

    @classmethod
    def never(cls) -> Times:
        """Accept no invocations at all."""
        return cls.exactly(0)

    @classmethod
    def at_least(cls, count: int) -> Times:
        """Accept ``count`` or more invocations."""
        return cls(count, None)

    @classmethod
    def at_least_once(cls) -> Times:
        """Accept one or more invocations."""
        return cls.at_least(1)

    @classmethod
    def at_most(cls, count: int) -> Times:
        """Accept up to ``count`` invocations (including none)."""
        return cls(0, count)

    @classmethod
    def at_most_once(cls) -> Times:
        """Accept zero or one invocation."""
        return cls.at_most(1)

    @classmethod
    def between(cls, minimum: int, maximum: int) -> Times:
        """Accept any count in the inclusive range ``[minimum, maximum]``."""
        return cls(minimum, maximum)

    @classmethod
    def coerce(cls, value: Times | int) -> Times:
        """Return ``value`` as a `Times`, treating a plain int as `exactly`.

        Raises:
            TypeError: If ``value`` is neither a `Times` nor an int.
        """
        if isinstance(value, Times):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.exactly(value)
        raise TypeError(f"Expected Times or int, got {type(value).__name__}")

    # --- evaluation ---

    def is_satisfied_by(self, count: int) -> bool:
        """Return True when ``count`` lies within the accepted range."""
        if count < self.minimum:
            return False
        return self.maximum is None or count <= self.maximum

    def __str__(self) -> str:
        if self.maximum is None:
            return f"at least {_count_text(self.minimum)}"
        if self.minimum == self.maximum:
            return f"exactly {_count_text(self.minimum)}"
        if self.minimum == 0:
            return f"at most {_count_text(self.maximum)}"
        return f"between {self.minimum} and {self.maximum} times"


def _count_text(count: int) -> str:
    if count == 1:
        return "once"
    return f"{count} times"
