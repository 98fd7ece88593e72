"""Strategy ABC — reduces a set of relevant rules to a single decision."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from authorizable.rules.collection import RuleSet


class Strategy(ABC):
    """Base class for every aggregation strategy.

    Strategies are stateless and may be shared between managers.

    ``check`` implements the common default-deny behaviour: with no relevant
    rules the answer is always ``False``.  Subclasses only implement
    ``apply``, which is guaranteed a non-empty rule set.

    Class Variables:
        name: Registry identifier (e.g. ``"sequential"``).
    """

    name: ClassVar[str] = "base"

    def check(self, rules: RuleSet, args: Sequence[Any] = ()) -> bool:
        if rules.is_empty():
            return False
        return self.apply(rules, args)

    @abstractmethod
    def apply(self, rules: RuleSet, args: Sequence[Any] = ()) -> bool:
        """Combine the ``check`` results of a non-empty *rules*."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
