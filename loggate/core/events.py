"""Event catalog and helpers describing log states."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any

_DEFAULT_SCALARS = (str, bytes, int, float, list, tuple, dict, set, frozenset)


class CoreEventId(IntEnum):
    """Events raised by loggate and by the applications built on it."""

    SENSITIVE_DATA_LOGGING_ENABLED_WARNING = 100000
    CONFIGURATION_LOADED = 100001
    CONFIGURATION_FALLBACK = 100002
    SCOPE_LEAKED = 100003
    EXECUTION_RETRYING = 100100
    QUERY_CLIENT_EVALUATION_WARNING = 100200
    QUERY_COMPILING = 100201
    COMMAND_EXECUTED = 100300
    UPDATE_BATCH_FAILED = 100400


def is_default_state(state: Any) -> bool:
    """True for ``None`` and the empty value of builtin scalars and containers.

    Enum members are never default, even when their value is zero.
    """
    if state is None:
        return True
    if isinstance(state, Enum):
        return False
    if isinstance(state, _DEFAULT_SCALARS):
        return not state
    return False


def state_discriminator(state: Any) -> str:
    """Key identifying the category of a state in the warning policy table."""
    discriminator = getattr(state, "discriminator", None)
    if isinstance(discriminator, str) and discriminator:
        return discriminator
    if isinstance(state, Enum):
        return f"{type(state).__name__}.{state.name}"
    return f"{type(state).__name__}.{state}"
