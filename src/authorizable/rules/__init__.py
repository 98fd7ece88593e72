"""Rules and rule collections."""

from authorizable.rules.base import Condition, Privilege, Restriction, Rule
from authorizable.rules.collection import RuleSet

__all__ = [
    "Condition",
    "Privilege",
    "Restriction",
    "Rule",
    "RuleSet",
]
