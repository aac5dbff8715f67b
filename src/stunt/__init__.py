"""STUNT

A small test double engine. Given a capability contract (an abstract class,
a protocol or an explicit contract description) it builds a substitute whose
behavior is programmed by the test and whose invocations are recorded for
later verification.
"""

from stunt.contracts import Contract, MethodSignature, PropertySignature
from stunt.domain.behaviors import Computes, FixedValue, Raises, Returns, Tracked
from stunt.domain.errors import (
    DoubleError,
    UnconfiguredMemberError,
    UnknownMemberError,
    UnsupportedContractError,
    VerificationFailedError,
)
from stunt.domain.matchers import ANY_ARGS, Arg, Args
from stunt.domain.times import Times
from stunt.engine import (
    Behavior,
    TestDouble,
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
    "__version__",
    "ANY_ARGS",
    "Arg",
    "Args",
    "Behavior",
    "Computes",
    "Contract",
    "DoubleError",
    "FixedValue",
    "MethodSignature",
    "PropertySignature",
    "Raises",
    "Returns",
    "TestDouble",
    "Times",
    "Tracked",
    "UnconfiguredMemberError",
    "UnknownMemberError",
    "UnsupportedContractError",
    "VerificationFailedError",
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
__version__ = "0.1.0"
