"""Configuration utilities for STUNT.

Settings are read from the environment so that a whole test session can be
switched to strict doubles without touching the tests.
"""

import os

from stunt.domain.behaviors import Behavior
from stunt.domain.errors import InvalidBehaviorSettingError

BEHAVIOR_ENV_VAR = "STUNT_BEHAVIOR"  # pragma: no mutate
LOGGER_LEVELS_ENV_VAR = "STUNT_LOGGER_LEVELS"  # pragma: no mutate


def get_default_behavior() -> Behavior:
    """Get the default double behavior from the environment.

    Returns:
        The behavior named by `STUNT_BEHAVIOR` (case-insensitive), or
        `Behavior.LOOSE` when the variable is unset or empty.

    Raises:
        InvalidBehaviorSettingError: If `STUNT_BEHAVIOR` names no behavior.
    """
    if not (value := os.environ.get(BEHAVIOR_ENV_VAR, "").strip()):
        return Behavior.LOOSE
    try:
        return Behavior(value.lower())
    except ValueError as e:
        raise InvalidBehaviorSettingError(value) from e
