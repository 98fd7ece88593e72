"""Configuration models for building a :class:`~authorizable.Manager`.

These Pydantic models describe the settings a host application hands to
``Manager.from_config``.  Rules themselves are not configuration: they are
registered in code by an ``initialize`` callback.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from authorizable.exceptions import DEFAULT_ACCESS_DENIED_MESSAGE
from authorizable.strategies.factory import StrategyFactory


class MessagesConfig(BaseModel):
    """User-facing messages.

    Attributes:
        access_denied: Message carried by ``AccessDeniedError`` when the
                       caller does not provide one.  ``{action}`` and
                       ``{resource}`` are replaced with the lower-cased
                       action and resource type.
    """

    access_denied: str = DEFAULT_ACCESS_DENIED_MESSAGE


class AuthorizableConfig(BaseModel):
    """Top-level configuration.

    Attributes:
        strategy: Name of a registered strategy ("sequential", "additive",
                  "subtractive" or a custom registration).
        messages: User-facing messages.
    """

    strategy: str = "sequential"
    messages: MessagesConfig = Field(default_factory=MessagesConfig)

    @field_validator("strategy")
    @classmethod
    def _known_strategy(cls, value: str) -> str:
        if value not in StrategyFactory.registered_types():
            available = ", ".join(sorted(StrategyFactory.registered_types()))
            raise ValueError(f"unknown strategy '{value}' (available: {available})")
        return value


def load_config(data: Mapping[str, Any] | None = None) -> AuthorizableConfig:
    """Validate a plain mapping (e.g. parsed from JSON or TOML) into a config."""
    return AuthorizableConfig.model_validate(dict(data or {}))
