"""Additive — any passing rule grants access."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from authorizable.strategies.base import Strategy

if TYPE_CHECKING:
    from authorizable.rules.collection import RuleSet


class Additive(Strategy):
    """Allows if **at least one** rule passes.  Order does not matter.

    Restrictions never veto here; a failing rule simply casts no vote.
    """

    name = "additive"

    def apply(self, rules: RuleSet, args: Sequence[Any] = ()) -> bool:
        return any(rule.check(*args) for rule in rules)
