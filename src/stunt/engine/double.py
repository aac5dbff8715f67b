"""The test double controller.

A `TestDouble` owns everything about one substitute: the contract it
implements, the behavior configuration of each member and the record of
every invocation made through the substitute (``double.object``).

Example:
    ```py
    double = TestDouble(PropertyManager)
    consumer = PropertyManagerConsumer(double.object)

    consumer.change_remote_name("My dear old wig")

    double.verify("mutate_first_name", Args("My dear old wig"), Times.once())
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from stunt.config import get_default_behavior
from stunt.contracts import Contract, MethodSignature
from stunt.domain.behaviors import Behavior, MethodPolicy, PropertyMode
from stunt.domain.errors import (
    UnconfiguredMemberError,
    UnknownMemberError,
    VerificationFailedError,
)
from stunt.domain.invocations import Invocation, InvocationKind, InvocationRecord
from stunt.domain.matchers import ANY_ARGS, Anything, Args, Matcher, as_matcher
from stunt.domain.times import Times

from .proxy import build_substitute

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


@dataclass
class MethodSetup:
    """A method policy installed for calls matching ``args``."""

    member: str
    args: Args
    policy: MethodPolicy
    verifiable: bool = False


@dataclass
class SetExpectation:
    """Expectation that ``member`` gets written with a matching value."""

    member: str
    value: Matcher


@dataclass
class _PropertyState:
    mode: PropertyMode | None  # None: never configured, holds last write
    value: Any


class TestDouble:
    """Controller for a substitute implementing a capability contract.

    Args:
        contract: A class to reflect on, or an explicit `Contract`.
        behavior: How unconfigured members behave. Defaults to the behavior
            configured through the environment (see `stunt.config`).

    Raises:
        UnsupportedContractError: If the contract cannot be doubled.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, contract: type | Contract, behavior: Behavior | None = None):
        self.contract = Contract.of(contract)
        self.behavior = behavior if behavior is not None else get_default_behavior()
        self.invocations = InvocationRecord()
        self._method_setups: dict[str, list[MethodSetup]] = {}
        self._properties: dict[str, _PropertyState] = {}
        self._set_expectations: list[SetExpectation] = []
        self.object = build_substitute(self)
        logger.debug(
            "Created %s double for %s", self.behavior.value, self.contract.name
        )

    def __repr__(self) -> str:
        return (
            f"<TestDouble of {self.contract.name} ({self.behavior.value}), "
            f"{len(self.invocations)} invocation(s)>"
        )

    @property
    def is_strict(self) -> bool:
        """True for doubles created with `Behavior.STRICT`."""
        return self.behavior is Behavior.STRICT

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def configure_method(
        self,
        member: str,
        policy: MethodPolicy,
        args: Args | None = None,
        *,
        verifiable: bool = False,
    ) -> MethodSetup:
        """Install ``policy`` for calls of ``member`` matching ``args``.

        A configuration for the same member whose matchers bind to the same
        parameters is replaced, however the arguments were spelled. When
        several configurations match a call, the most recently installed one
        wins.

        Args:
            member: Name of the method to configure.
            policy: What the method does (`Returns`, `Computes`, `Raises`).
            args: Argument matchers; `ANY_ARGS` (the default) matches every call.
            verifiable: Include this configuration in `verify_all`.

        Returns:
            MethodSetup: The installed configuration.

        Raises:
            UnknownMemberError: If the contract has no method ``member``.
            TypeError: If ``policy`` is not a method policy or ``args`` does
                not fit the method signature.
        """
        method = self.contract.get_method(member)
        if not isinstance(policy, MethodPolicy):
            raise TypeError(f"Expected a method policy, got {policy!r}")
        args = ANY_ARGS if args is None else args
        bound = args.bind(method.signature)
        setups = self._method_setups.setdefault(member, [])
        setups[:] = [s for s in setups if s.args.bind(method.signature) != bound]
        setup = MethodSetup(member, args, policy, verifiable)
        setups.append(setup)
        logger.debug(
            "Configured %s.%s(%s) with %r",
            self.contract.name,
            member,
            args.describe(method.signature),
            policy,
        )
        return setup

    def configure_property(self, member: str, mode: PropertyMode) -> None:
        """Put property ``member`` in ``mode`` (`FixedValue` or `Tracked`).

        Any previously tracked or written value is discarded.

        Raises:
            UnknownMemberError: If the contract has no property ``member``.
            TypeError: If ``mode`` is not a property mode.
        """
        prop = self.contract.get_property(member)
        if not isinstance(mode, PropertyMode):
            raise TypeError(f"Expected a property mode, got {mode!r}")
        self._properties[member] = _PropertyState(
            mode, mode.initial_value(prop.default_value())
        )
        logger.debug("Configured %s.%s as %r", self.contract.name, member, mode)

    def expect_set(self, member: str, value: Any = Anything()) -> SetExpectation:
        """Expect property ``member`` to be written with a matching value.

        The expectation is checked by `verify_all_configured_setters_called`
        and `verify_all`.

        Raises:
            UnknownMemberError: If the contract has no writable property ``member``.
        """
        prop = self.contract.get_property(member)
        if not prop.writable:
            raise UnknownMemberError(
                self.contract.name, member, kind="writable property"
            )
        expectation = SetExpectation(member, as_matcher(value))
        self._set_expectations.append(expectation)
        logger.debug(
            "Expecting %s.%s = %s",
            self.contract.name,
            member,
            expectation.value.describe(),
        )
        return expectation

    # ------------------------------------------------------------------
    # Invocation handling (called by the substitute)
    # ------------------------------------------------------------------

    def record_invocation(
        self, member: str, kind: InvocationKind, arguments: Mapping[str, Any]
    ) -> Invocation:
        """Append an invocation to the record and return it."""
        invocation = self.invocations.append(member, kind, arguments)
        logger.debug("%s: %s", self.contract.name, invocation)
        return invocation

    def handle_call(
        self, member: str, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Any:
        """Answer a call made through the substitute.

        Raises:
            TypeError: If the arguments do not fit the method signature; the
                call is not recorded.
            UnconfiguredMemberError: For strict doubles without a matching
                configuration.
        """
        method = self.contract.get_method(member)
        bound = method.bind(args, kwargs)
        self.record_invocation(member, InvocationKind.CALL, bound.arguments)

        setup = self._find_setup(method, bound.arguments)
        if setup is None and self.is_strict:
            raise UnconfiguredMemberError(self.contract.name, member, "call")

        def produce() -> Any:
            if setup is None:
                return method.default_return()
            return setup.policy.respond(bound.args, bound.kwargs)

        if method.is_async:
            return _resolved(produce)
        return produce()

    def handle_get(self, member: str) -> Any:
        """Answer a property read made through the substitute."""
        prop = self.contract.get_property(member)
        self.record_invocation(member, InvocationKind.GET, {})
        state = self._properties.get(member)
        if state is None or state.mode is None:
            if self.is_strict:
                raise UnconfiguredMemberError(self.contract.name, member, "read")
            if state is None:
                return prop.default_value()
        return state.value

    def handle_set(self, member: str, value: Any) -> None:
        """Apply a property write made through the substitute."""
        self.contract.get_property(member)
        self.record_invocation(member, InvocationKind.SET, {"value": value})
        state = self._properties.get(member)
        if state is None or state.mode is None:
            expected = any(e.member == member for e in self._set_expectations)
            if self.is_strict and not expected:
                raise UnconfiguredMemberError(self.contract.name, member, "write")
            self._properties[member] = _PropertyState(None, value)
        elif state.mode.tracks_writes:
            state.value = value

    def _find_setup(
        self, method: MethodSignature, arguments: Mapping[str, Any]
    ) -> MethodSetup | None:
        for setup in reversed(self._method_setups.get(method.name, [])):
            if setup.args.matches(method.signature, arguments):
                return setup
        return None

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify(
        self,
        member: str,
        args: Args | None = None,
        times: Times | int = Times.at_least_once(),
    ) -> None:
        """Verify that method ``member`` was called with matching arguments.

        Args:
            member: Name of the method to verify.
            args: Argument matchers; `ANY_ARGS` (the default) matches every call.
            times: Accepted number of matching calls; an int means exactly.

        Raises:
            UnknownMemberError: If the contract has no method ``member``.
            VerificationFailedError: If the matching call count is not accepted.
        """
        method = self.contract.get_method(member)
        args = ANY_ARGS if args is None else args
        expected = Times.coerce(times)
        performed = self.invocations.select(member, InvocationKind.CALL)
        actual = sum(
            1 for inv in performed if args.matches(method.signature, inv.arguments)
        )
        self._check(
            expected,
            actual,
            member=member,
            arguments=args.describe(method.signature),
            performed=performed,
            kind="call",
        )

    def verify_get(self, member: str, times: Times | int = Times.at_least_once()) -> None:
        """Verify how many times property ``member`` was read.

        Raises:
            UnknownMemberError: If the contract has no property ``member``.
            VerificationFailedError: If the read count is not accepted.
        """
        self.contract.get_property(member)
        performed = self.invocations.select(member, InvocationKind.GET)
        self._check(
            Times.coerce(times),
            len(performed),
            member=member,
            arguments="",
            performed=performed,
            kind="get",
        )

    def verify_set(
        self,
        member: str,
        value: Any = Anything(),
        times: Times | int = Times.at_least_once(),
    ) -> None:
        """Verify how many times property ``member`` was written with ``value``.

        Args:
            member: Name of the property to verify.
            value: Expected value or a matcher; any value by default.
            times: Accepted number of matching writes; an int means exactly.

        Raises:
            UnknownMemberError: If the contract has no property ``member``.
            VerificationFailedError: If the matching write count is not accepted.
        """
        self.contract.get_property(member)
        matcher = as_matcher(value)
        performed = self.invocations.select(member, InvocationKind.SET)
        actual = sum(
            1
            for inv in performed
            if "value" in inv.arguments and matcher.matches(inv.arguments["value"])
        )
        self._check(
            Times.coerce(times),
            actual,
            member=member,
            arguments=matcher.describe(),
            performed=performed,
            kind="set",
        )

    def verify_all_configured_setters_called(self) -> None:
        """Verify every set expectation registered with `expect_set`.

        Raises:
            VerificationFailedError: For the first expectation without a
                matching write.
        """
        for expectation in self._set_expectations:
            self.verify_set(expectation.member, expectation.value)

    def verify_all(self) -> None:
        """Verify every verifiable method configuration and set expectation.

        Raises:
            VerificationFailedError: For the first configuration that was never
                exercised with matching arguments.
        """
        for setups in self._method_setups.values():
            for setup in setups:
                if setup.verifiable:
                    self.verify(setup.member, setup.args)
        self.verify_all_configured_setters_called()

    def _check(self, expected: Times, actual: int, **details: Any) -> None:
        if expected.is_satisfied_by(actual):
            return
        error = VerificationFailedError(expected=expected, actual=actual, **details)
        logger.debug("Verification failed on %s: %s", self.contract.name, error)
        raise error


async def _resolved(produce: Callable[[], Any]) -> Any:
    """Awaitable that completes immediately with ``produce()``."""
    return produce()
