"""Rule ABC and its two polarities: Privilege and Restriction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, ClassVar

from authorizable._internal.resources import WILDCARD, display_name, resources_match

Condition = Callable[..., Any]


@dataclass(frozen=True, eq=False)
class Rule(ABC):
    """A single immutable decision unit.

    A rule pairs an *action* with a *resource* and an optional *condition*.
    The concrete subclass fixes the polarity:

    * :class:`Privilege` grants when its condition holds.
    * :class:`Restriction` denies when its condition holds.

    Attributes:
        action:    Operation name, e.g. ``"update"``.
        resource:  Resource name, class or instance.  ``"all"`` matches anything.
        condition: Optional predicate called with the evaluation arguments.
                   When omitted the rule behaves as if it returned ``True``.
    """

    WILDCARD: ClassVar[str] = WILDCARD
    _rule_type: ClassVar[str] = "rule"

    action: str
    resource: Any
    condition: Condition | None = None

    # ── matching ─────────────────────────────────────────────

    def matches_action(self, action: str | Iterable[str]) -> bool:
        """``True`` if this rule's action is *action* or one of *action*."""
        if isinstance(action, str):
            return self.action == action
        return self.action in action

    def matches_resource(self, resource: Any) -> bool:
        return resources_match(self.resource, resource)

    def is_relevant(self, action: str | Iterable[str], resource: Any) -> bool:
        return self.matches_action(action) and self.matches_resource(resource)

    # ── evaluation ───────────────────────────────────────────

    @abstractmethod
    def check(self, *args: Any) -> bool:
        """Evaluate the rule against *args*.  Condition errors propagate."""
        ...

    def _check_condition(self, *args: Any) -> bool:
        if self.condition is None:
            return True
        return bool(self.condition(*args))

    def __call__(self, *args: Any) -> bool:
        return self.check(*args)

    # ── introspection ────────────────────────────────────────

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of this rule."""
        return {
            "type": self._rule_type,
            "action": self.action,
            "resource": display_name(self.resource),
            "has_condition": self.condition is not None,
        }


class Privilege(Rule):
    """Grants access when the condition holds."""

    _rule_type = "privilege"

    def check(self, *args: Any) -> bool:
        return self._check_condition(*args)


class Restriction(Rule):
    """Denies access when the condition holds."""

    _rule_type = "restriction"

    def check(self, *args: Any) -> bool:
        return not self._check_condition(*args)
