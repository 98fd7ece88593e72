"""Subtractive — any failing rule vetoes access."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from authorizable.strategies.base import Strategy

if TYPE_CHECKING:
    from authorizable.rules.collection import RuleSet


class Subtractive(Strategy):
    """Allows only if **no** rule fails.  Order does not matter.

    A restriction whose condition holds fails, and so does a privilege whose
    condition does not: either one denies.
    """

    name = "subtractive"

    def apply(self, rules: RuleSet, args: Sequence[Any] = ()) -> bool:
        return all(rule.check(*args) for rule in rules)
