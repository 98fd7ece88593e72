"""Manager — the central orchestrator."""

from __future__ import annotations

import functools
import inspect
import logging
import sys
from collections.abc import Callable, Mapping
from typing import Any

from authorizable._internal.resources import is_instance, is_resource, type_of
from authorizable.config import AuthorizableConfig, load_config
from authorizable.exceptions import AccessDeniedError, InvalidArgumentError
from authorizable.rules.base import Condition, Privilege, Restriction, Rule
from authorizable.rules.collection import RuleSet
from authorizable.strategies.base import Strategy
from authorizable.strategies.factory import StrategyFactory
from authorizable.strategies.sequential import Sequential

logger = logging.getLogger(__name__)


class Manager:
    """Registers rules, tracks the active user and answers access questions.

    Rules are registered with :meth:`allow` and :meth:`deny` and evaluated
    with :meth:`can` and friends.  The relevant rules for an action/resource
    pair are combined by the configured :class:`Strategy`
    (:class:`Sequential` unless told otherwise).

    The active user is the *temporary* user when one is set, otherwise the
    *primary* user.  The temporary user only lasts for a single public
    evaluation call and is cleared when that call returns or raises.

    A manager is meant to live for one request (or similar unit of work) and
    is not safe to share between threads.

    Parameters:
        strategy: Strategy instance or registered strategy name.  Defaults to
                  :class:`Sequential`.
        user:     Initial primary user.
        access_denied_message: Message used by :meth:`authorize` on denial.
    """

    def __init__(
        self,
        strategy: Strategy | str | None = None,
        *,
        user: Any = None,
        access_denied_message: str = "",
    ) -> None:
        self._strategy: Strategy = Sequential()
        self._rules = RuleSet()
        self._primary_user: Any = user
        self._temporary_user: Any = None
        self._access_denied_message = access_denied_message
        self.set_strategy(strategy)

    @classmethod
    def from_config(
        cls,
        config: AuthorizableConfig | Mapping[str, Any] | None = None,
        initialize: Callable[[Manager], Any] | None = None,
        *,
        user: Any = None,
    ) -> Manager:
        """Build a manager from configuration.

        *initialize*, if given, is called with the new manager so it can
        register the application's rules (after the primary user is set, so
        rule registration may depend on who is logged in).
        """
        if not isinstance(config, AuthorizableConfig):
            config = load_config(config)
        manager = cls(
            config.strategy,
            user=user,
            access_denied_message=config.messages.access_denied,
        )
        if initialize is not None:
            initialize(manager)
        return manager

    # ── users ────────────────────────────────────────────────

    def get_user(self) -> Any:
        """Return the temporary user if set, otherwise the primary user."""
        if self._temporary_user is not None:
            return self._temporary_user
        return self._primary_user

    def set_primary_user(self, user: Any) -> Manager:
        self._primary_user = user
        return self

    def set_temporary_user(self, user: Any) -> Manager:
        """Act as *user* for the next evaluation call only."""
        self._temporary_user = user
        return self

    def user(self, user: Any) -> Manager:
        """Fluent alias for :meth:`set_temporary_user`: ``manager.user(bob).can(...)``."""
        return self.set_temporary_user(user)

    def _clear_temporary_user(self) -> None:
        self._temporary_user = None

    # ── strategy ─────────────────────────────────────────────

    def set_strategy(self, strategy: Strategy | str | None = None) -> Manager:
        """Swap the aggregation strategy.  ``None`` restores the default."""
        if strategy is None:
            strategy = Sequential()
        elif isinstance(strategy, str):
            strategy = StrategyFactory.create(strategy)
        elif not isinstance(strategy, Strategy):
            raise InvalidArgumentError(
                "strategy", f"expected a Strategy or strategy name, got {type(strategy).__name__}"
            )
        self._strategy = strategy
        logger.debug("strategy set to %s", strategy.name)
        return self

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    # ── registration ─────────────────────────────────────────

    def allow(
        self,
        actions: str | list[str] | tuple[str, ...],
        resources: Any,
        condition: Condition | None = None,
    ) -> RuleSet:
        """Register privileges for every combination of *actions* and *resources*.

        Returns the newly created rules.
        """
        return self._add_rules(Privilege, actions, resources, condition)

    def deny(
        self,
        actions: str | list[str] | tuple[str, ...],
        resources: Any,
        condition: Condition | None = None,
    ) -> RuleSet:
        """Register restrictions for every combination of *actions* and *resources*.

        Returns the newly created rules.
        """
        return self._add_rules(Restriction, actions, resources, condition)

    def _add_rules(
        self,
        rule_class: type[Rule],
        actions: Any,
        resources: Any,
        condition: Condition | None,
    ) -> RuleSet:
        action_list = _action_list(actions, "actions", allow_empty=True)
        resource_list = _resource_list(resources)
        if condition is not None and not callable(condition):
            raise InvalidArgumentError("condition", "must be callable or None")
        if condition is not None:
            condition = self._bind_user(condition)

        rules = RuleSet(
            rule_class(action, resource, condition)
            for resource in resource_list
            for action in action_list
        )
        self._rules = self._rules.merge(rules)
        logger.debug(
            "registered %d %s rule(s) for actions=%s",
            len(rules),
            rule_class.__name__.lower(),
            action_list,
        )
        return rules

    def _bind_user(self, condition: Condition) -> Condition:
        """Give conditions that declare a ``user`` parameter the active user."""
        slot = _user_slot(condition)
        if slot is None:
            return condition

        @functools.wraps(condition)
        def bound(*args: Any) -> Any:
            # a positional argument already fills `user`: leave it alone
            if len(args) > slot:
                return condition(*args)
            return condition(*args, user=self.get_user())

        return bound

    # ── introspection ────────────────────────────────────────

    def get_rules(self) -> RuleSet:
        return self._rules

    def get_relevant_rules(self, action: str | list[str], resource: Any) -> RuleSet:
        """Return the registered rules that match *action* and *resource*."""
        return self._rules.relevant_rules(action, resource)

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the strategy and rules."""
        rules = self._rules.export()
        return {
            "strategy": self._strategy.name,
            "rules": rules,
            "rule_count": len(rules),
        }

    # ── evaluation ───────────────────────────────────────────

    def can(self, action: str, resource: Any, *extra: Any) -> bool:
        """Decide whether the active user may perform *action* on *resource*.

        When *resource* is an instance, rules are matched against its class
        and the instance itself is the first argument given to conditions;
        otherwise the first argument is ``None``.  *extra* follows.
        """
        try:
            return self._evaluate(action, resource, extra)
        finally:
            self._clear_temporary_user()

    def cannot(self, action: str, resource: Any, *extra: Any) -> bool:
        return not self.can(action, resource, *extra)

    def can_any(self, actions: str | list[str] | tuple[str, ...], resource: Any, *extra: Any) -> bool:
        """``True`` if at least one of *actions* is allowed.  Stops at the first."""
        try:
            for action in _action_list(actions, "actions"):
                if self._evaluate(action, resource, extra):
                    return True
            return False
        finally:
            self._clear_temporary_user()

    def can_all(self, actions: str | list[str] | tuple[str, ...], resource: Any, *extra: Any) -> bool:
        """``True`` if every one of *actions* is allowed.  Stops at the first denial."""
        try:
            for action in _action_list(actions, "actions"):
                if not self._evaluate(action, resource, extra):
                    return False
            return True
        finally:
            self._clear_temporary_user()

    def authorize(self, action: str, resource: Any, *extra: Any) -> None:
        """Like :meth:`can`, but raise :class:`AccessDeniedError` on denial."""
        if not self.can(action, resource, *extra):
            raise AccessDeniedError(action, resource, self._access_denied_message)

    def _evaluate(self, action: Any, resource: Any, extra: tuple[Any, ...]) -> bool:
        if not isinstance(action, str) or not action:
            raise InvalidArgumentError("action", f"expected a non-empty string, got {action!r}")
        if not is_resource(resource):
            raise InvalidArgumentError(
                "resource",
                f"expected a name, class or object instance, got {type(resource).__name__}",
            )

        if is_instance(resource):
            args: tuple[Any, ...] = (resource, *extra)
            resource = type_of(resource)
        else:
            args = (None, *extra)

        rules = self._rules.relevant_rules(action, resource)
        allowed = self._strategy.check(rules, args)
        logger.debug(
            "%s %r on %r: %d relevant rule(s), strategy=%s",
            "allowed" if allowed else "denied",
            action,
            resource,
            len(rules),
            self._strategy.name,
        )
        return allowed


def _action_list(actions: Any, argument: str, *, allow_empty: bool = False) -> list[str]:
    if isinstance(actions, str):
        actions = [actions]
    elif not isinstance(actions, (list, tuple)):
        raise InvalidArgumentError(
            argument, f"expected a string or a list of strings, got {type(actions).__name__}"
        )
    if not actions and not allow_empty:
        raise InvalidArgumentError(argument, "at least one action is required")
    for action in actions:
        if not isinstance(action, str) or not action:
            raise InvalidArgumentError(argument, f"expected non-empty strings, got {action!r}")
    return list(actions)


def _resource_list(resources: Any) -> list[Any]:
    if isinstance(resources, (list, tuple)):
        resource_list = list(resources)
    else:
        resource_list = [resources]
    for resource in resource_list:
        if not is_resource(resource):
            raise InvalidArgumentError(
                "resources",
                f"expected names, classes or instances, got {type(resource).__name__}",
            )
    return resource_list


def _user_slot(condition: Condition) -> int | None:
    """Positional index of the condition's `user` parameter.

    Keyword-only `user` parameters can never be filled positionally and
    report `sys.maxsize`.  `None` means there is nothing to inject.
    """
    try:
        parameters = list(inspect.signature(condition).parameters.values())
    except (TypeError, ValueError):
        return None
    for index, param in enumerate(parameters):
        if param.name != "user":
            continue
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            return sys.maxsize
        if param.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD:
            return index
    return None
