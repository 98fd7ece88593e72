"""RuleSet — ordered, append-only collection of rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, overload

from authorizable.exceptions import InvalidArgumentError
from authorizable.rules.base import Rule


class RuleSet:
    """Insertion-ordered sequence of :class:`Rule` objects.

    Rules are never deduplicated: several rules for the same action and
    resource are expected, and the active strategy decides how they combine.
    Filtering and merging return new ``RuleSet`` objects that share the
    (immutable) rules with their source.
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: list[Rule] = []
        for rule in rules:
            self.add(rule)

    # ── mutation ─────────────────────────────────────────────

    def add(self, rule: Rule) -> None:
        """Append *rule* at the end of the set."""
        if not isinstance(rule, Rule):
            raise InvalidArgumentError("rule", f"expected a Rule, got {type(rule).__name__}")
        self._rules.append(rule)

    # ── queries ──────────────────────────────────────────────

    def relevant_rules(self, action: str | Iterable[str], resource: Any) -> RuleSet:
        """Return the rules matching *action* and *resource*, in order."""
        if not isinstance(action, str):
            action = list(action)
        return RuleSet(rule for rule in self._rules if rule.is_relevant(action, resource))

    def merge(self, other: Iterable[Rule]) -> RuleSet:
        """Return a new set holding this set's rules followed by *other*'s."""
        return RuleSet([*self._rules, *other])

    def first(self) -> Rule | None:
        return self._rules[0] if self._rules else None

    def last(self) -> Rule | None:
        return self._rules[-1] if self._rules else None

    def is_empty(self) -> bool:
        return not self._rules

    def export(self) -> list[dict[str, Any]]:
        """Return a JSON-serializable snapshot of every rule, in order."""
        return [rule.export() for rule in self._rules]

    # ── sequence protocol ────────────────────────────────────

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule: object) -> bool:
        return any(r is rule for r in self._rules)

    @overload
    def __getitem__(self, index: int) -> Rule: ...

    @overload
    def __getitem__(self, index: slice) -> RuleSet: ...

    def __getitem__(self, index: int | slice) -> Rule | RuleSet:
        if isinstance(index, slice):
            return RuleSet(self._rules[index])
        return self._rules[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return len(self) == len(other) and all(a is b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RuleSet({self._rules!r})"
