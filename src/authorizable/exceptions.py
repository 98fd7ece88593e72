"""Custom exceptions for the authorizable package."""

from __future__ import annotations

from typing import Any

DEFAULT_ACCESS_DENIED_MESSAGE = "You are not authorized to access this page."


class AuthorizationError(Exception):
    """Base exception for all authorization-related errors."""


class InvalidArgumentError(AuthorizationError, ValueError):
    """Raised when an action, resource or condition has an unusable shape."""

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"Invalid '{argument}': {message}")


class AccessDeniedError(AuthorizationError):
    """Raised by :meth:`Manager.authorize` when the decision is a denial.

    Attributes:
        action:        The action that was refused.
        resource:      The resource as passed by the caller (name, class or instance).
        resource_type: Short type name of the resource, e.g. ``"Post"``.
    """

    def __init__(
        self,
        action: str,
        resource: Any,
        message: str = "",
        *,
        resource_type: str = "",
    ) -> None:
        self.action = action
        self.resource = resource
        self.resource_type = resource_type or _short_type_name(resource)
        super().__init__(
            _fill(
                message or DEFAULT_ACCESS_DENIED_MESSAGE,
                action=str(action).lower(),
                resource=self.resource_type.lower(),
            )
        )


class StrategyFactoryError(AuthorizationError):
    """Raised when a strategy cannot be created or registered."""


class _Placeholders(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _fill(template: str, **values: str) -> str:
    """Substitute ``{action}`` and ``{resource}``; unknown fields stay as written."""
    try:
        return template.format_map(_Placeholders(values))
    except (ValueError, IndexError):
        return template


def _short_type_name(resource: Any) -> str:
    if isinstance(resource, str):
        return resource.rsplit(".", 1)[-1]
    if isinstance(resource, type):
        return resource.__name__
    if resource is None:
        return ""
    return type(resource).__name__
