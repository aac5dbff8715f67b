"""Functional interface to the engine.

Each function forwards to the matching `TestDouble` method; they exist for
tests that prefer a procedural style:

```py
double = create_double(PropertyManager)
configure_property(double, "first_name", Tracked())
double.object.first_name = "Ni!"
verify_set(double, "first_name", "Ni!", Times.once())
```
"""

from collections.abc import Mapping
from typing import Any

from stunt.contracts import Contract
from stunt.domain.behaviors import Behavior, MethodPolicy, PropertyMode
from stunt.domain.invocations import Invocation, InvocationKind
from stunt.domain.matchers import Anything, Args
from stunt.domain.times import Times

from .double import MethodSetup, SetExpectation, TestDouble


def create_double(
    contract: type | Contract, behavior: Behavior | None = None
) -> TestDouble:
    """Build a double implementing every member of ``contract``.

    Raises:
        UnsupportedContractError: If the contract cannot be doubled.
    """
    return TestDouble(contract, behavior)


def configure_method(
    double: TestDouble,
    member: str,
    policy: MethodPolicy,
    args: Args | None = None,
    *,
    verifiable: bool = False,
) -> MethodSetup:
    """Install a method policy; see `TestDouble.configure_method`."""
    return double.configure_method(member, policy, args, verifiable=verifiable)


def configure_property(double: TestDouble, member: str, mode: PropertyMode) -> None:
    """Set a property mode; see `TestDouble.configure_property`."""
    double.configure_property(member, mode)


def expect_set(double: TestDouble, member: str, value: Any = Anything()) -> SetExpectation:
    """Register a set expectation; see `TestDouble.expect_set`."""
    return double.expect_set(member, value)


def record_invocation(
    double: TestDouble,
    member: str,
    kind: InvocationKind,
    arguments: Mapping[str, Any],
) -> Invocation:
    """Append to the double's invocation record.

    The substitute calls this automatically; direct use is only needed when
    replaying invocations.
    """
    return double.record_invocation(member, kind, arguments)


def verify(
    double: TestDouble,
    member: str,
    args: Args | None = None,
    times: Times | int = Times.at_least_once(),
) -> None:
    """Verify method calls; see `TestDouble.verify`."""
    double.verify(member, args, times)


def verify_get(
    double: TestDouble, member: str, times: Times | int = Times.at_least_once()
) -> None:
    """Verify property reads; see `TestDouble.verify_get`."""
    double.verify_get(member, times)


def verify_set(
    double: TestDouble,
    member: str,
    value: Any = Anything(),
    times: Times | int = Times.at_least_once(),
) -> None:
    """Verify property writes; see `TestDouble.verify_set`."""
    double.verify_set(member, value, times)


def verify_all_configured_setters_called(double: TestDouble) -> None:
    """Verify every set expectation of ``double``."""
    double.verify_all_configured_setters_called()


def verify_all(double: TestDouble) -> None:
    """Verify every verifiable configuration and set expectation of ``double``."""
    double.verify_all()
