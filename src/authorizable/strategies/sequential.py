"""Sequential — the last relevant rule has the final word."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from authorizable.strategies.base import Strategy

if TYPE_CHECKING:
    from authorizable.rules.collection import RuleSet


class Sequential(Strategy):
    """Allows when every rule passes, or when the last registered rule passes.

    The decision is ``all(rule.check(*args)) or last.check(*args)``.  Because
    the last rule is OR'ed in on its own, a privilege registered after a
    restriction for the same action and resource overrides it.  Registration
    order is therefore significant.

    This is the default strategy of :class:`~authorizable.Manager`.
    """

    name = "sequential"

    def apply(self, rules: RuleSet, args: Sequence[Any] = ()) -> bool:
        if all(rule.check(*args) for rule in rules):
            return True
        last = rules.last()
        assert last is not None
        return last.check(*args)
