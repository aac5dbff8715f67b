"""Test double engine: builds substitutes, dispatches and verifies invocations."""

from stunt.domain.behaviors import Behavior

from .double import MethodSetup, SetExpectation, TestDouble
from .operations import (
    configure_method,
    configure_property,
    create_double,
    expect_set,
    record_invocation,
    verify,
    verify_all,
    verify_all_configured_setters_called,
    verify_get,
    verify_set,
)

__all__ = [
    "Behavior",
    "MethodSetup",
    "SetExpectation",
    "TestDouble",
    "configure_method",
    "configure_property",
    "create_double",
    "expect_set",
    "record_invocation",
    "verify",
    "verify_all",
    "verify_all_configured_setters_called",
    "verify_get",
    "verify_set",
]
