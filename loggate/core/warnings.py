"""Warning policy table."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from loggate.core.events import state_discriminator
from loggate.core.exceptions import ConfigurationError


class WarningBehavior(str, Enum):
    """How a warning-level event is handled."""

    IGNORE = "ignore"
    LOG = "log"
    THROW = "throw"

    @classmethod
    def parse(cls, value: str | WarningBehavior) -> WarningBehavior:
        if isinstance(value, WarningBehavior):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ConfigurationError(f"Unknown warning behavior: {value}", setting="warnings") from exc


def _key(state_or_key: Any) -> str:
    if isinstance(state_or_key, str):
        return state_or_key
    return state_discriminator(state_or_key)


class WarningsConfiguration(BaseModel):
    """Maps state discriminators to a :class:`WarningBehavior`.

    Lookups that miss fall back to ``default_behavior``.
    """

    model_config = ConfigDict(frozen=True)

    default_behavior: WarningBehavior = WarningBehavior.LOG
    explicit_behaviors: dict[str, WarningBehavior] = {}

    @field_validator("default_behavior", mode="before")
    @classmethod
    def _parse_default(cls, value: Any) -> Any:
        return WarningBehavior.parse(value) if isinstance(value, str) else value

    @field_validator("explicit_behaviors", mode="before")
    @classmethod
    def _parse_explicit(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {_key(key): WarningBehavior.parse(item) for key, item in value.items()}
        return value

    def get_behavior(self, state: Any) -> WarningBehavior:
        """Behavior configured for ``state``'s discriminator."""
        return self.explicit_behaviors.get(state_discriminator(state), self.default_behavior)

    def with_default_behavior(self, behavior: WarningBehavior | str) -> WarningsConfiguration:
        return self.model_copy(update={"default_behavior": WarningBehavior.parse(behavior)})

    def with_explicit(self, states: Iterable[Any], behavior: WarningBehavior | str) -> WarningsConfiguration:
        """Register ``behavior`` for each state.

        Strings are taken as discriminator keys, not as string states: to match
        the state ``"x"`` register ``"str.x"`` (see ``state_discriminator``).
        """
        resolved = WarningBehavior.parse(behavior)
        explicit = dict(self.explicit_behaviors)
        for state in states:
            explicit[_key(state)] = resolved
        return self.model_copy(update={"explicit_behaviors": explicit})


class WarningsConfigurationBuilder:
    """Fluent builder for :class:`WarningsConfiguration`.

    Arguments of ``throw``, ``log`` and ``ignore`` are states or discriminator
    keys; a string is always a key such as ``"CoreEventId.EXECUTION_RETRYING"``.
    """

    def __init__(self, configuration: WarningsConfiguration | None = None) -> None:
        self.configuration = configuration or WarningsConfiguration()

    def default(self, behavior: WarningBehavior | str) -> WarningsConfigurationBuilder:
        self.configuration = self.configuration.with_default_behavior(behavior)
        return self

    def throw(self, *states: Any) -> WarningsConfigurationBuilder:
        self.configuration = self.configuration.with_explicit(states, WarningBehavior.THROW)
        return self

    def log(self, *states: Any) -> WarningsConfigurationBuilder:
        self.configuration = self.configuration.with_explicit(states, WarningBehavior.LOG)
        return self

    def ignore(self, *states: Any) -> WarningsConfigurationBuilder:
        self.configuration = self.configuration.with_explicit(states, WarningBehavior.IGNORE)
        return self

    def build(self) -> WarningsConfiguration:
        return self.configuration
