"""Error definitions for the test double engine."""

from collections.abc import Sequence
from typing import Any

# ============================================================================
#                           General errors
# ============================================================================


class DoubleError(Exception):
    """Base class for test double errors."""


class InvalidBehaviorSettingError(DoubleError):
    """Raised when the configured default behavior is not a known behavior."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid double behavior '{value}'. Expected 'loose' or 'strict'."
        )
        self.value = value


# ============================================================================
#                           Contract errors
# ============================================================================


class UnsupportedContractError(DoubleError):
    """Raised when a contract contains a member that cannot be substituted.

    Attributes:
        contract (str): Name of the contract.
        member (str | None): The offending member, or None when the contract
            as a whole is unsupported.
        reason (str): Why the member cannot be substituted.
    """

    def __init__(self, contract: str, member: str | None, reason: str) -> None:
        where = f"'{contract}.{member}'" if member else f"'{contract}'"
        super().__init__(f"Cannot create a double for {where}: {reason}.")
        self.contract = contract
        self.member = member
        self.reason = reason


class UnknownMemberError(DoubleError, AttributeError):
    """Raised when configuration or verification names a member not in the contract.

    Attributes:
        contract (str): Name of the contract that was searched.
        member (str): The member name that was requested.
        kind (str): The member kind that was requested ("method", "property"
            or "member" when any kind was acceptable).
    """

    def __init__(self, contract: str, member: str, kind: str = "member") -> None:
        super().__init__(f"Contract '{contract}' has no {kind} '{member}'.")
        self.contract = contract
        self.member = member
        self.kind = kind


class UnconfiguredMemberError(DoubleError):
    """Raised by strict doubles when an unconfigured member is used."""

    def __init__(self, contract: str, member: str, action: str) -> None:
        super().__init__(
            f"Strict double for '{contract}' has no configuration to {action} "
            f"'{member}'."
        )
        self.contract = contract
        self.member = member
        self.action = action


# ============================================================================
#                           Verification errors
# ============================================================================

_VERBS = {"call": "called", "get": "read", "set": "set"}


class VerificationFailedError(DoubleError, AssertionError):
    """Raised when recorded invocations do not meet an expectation.

    Subclasses ``AssertionError`` so that test runners report it as a test
    failure.

    Attributes:
        member (str): The verified member, e.g. ``"mutate_first_name"``.
        expected (Any): The expected invocation count (a ``Times`` value).
        actual (int): The number of matching invocations that were recorded.
        arguments (str): Human-readable description of the argument matcher
            (the value matcher for property writes, empty for reads).
        performed (tuple): The invocations of the verified kind recorded on
            the member, matching or not.
        kind (str): "call", "get" or "set".
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        member: str,
        expected: Any,
        actual: int,
        arguments: str,
        performed: Sequence[Any] = (),
        kind: str = "call",
    ) -> None:
        verb = _VERBS[kind]
        if kind == "call":
            subject = f"{member}({arguments})"
        elif kind == "set":
            subject = f"{member} = {arguments}"
        else:
            subject = member
        lines = [
            f"Expected {subject} to be {verb} {expected}, "
            f"but it was {verb} {actual} time{'' if actual == 1 else 's'}."
        ]
        if performed:
            lines.append("Performed invocations:")
            lines.extend(f"  {invocation}" for invocation in performed)
        else:
            lines.append("No such invocations were performed.")
        super().__init__("\n".join(lines))
        self.member = member
        self.expected = expected
        self.actual = actual
        self.arguments = arguments
        self.performed = tuple(performed)
        self.kind = kind
