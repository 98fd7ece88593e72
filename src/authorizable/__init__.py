"""authorizable — a small, embeddable authorization-decision engine.

Rules pair an action with a resource and an optional condition.  A manager
collects them and, for each question, hands the relevant ones to a strategy
that reduces them to a single yes/no.  No relevant rules means no.
"""

from authorizable.config import AuthorizableConfig, MessagesConfig, load_config
from authorizable.exceptions import (
    AccessDeniedError,
    AuthorizationError,
    InvalidArgumentError,
    StrategyFactoryError,
)
from authorizable.manager import Manager
from authorizable.rules import Privilege, Restriction, Rule, RuleSet
from authorizable.strategies import Additive, Sequential, Strategy, StrategyFactory, Subtractive
from authorizable.user import AuthorizableUser

__all__ = [
    "AccessDeniedError",
    "Additive",
    "AuthorizableConfig",
    "AuthorizableUser",
    "AuthorizationError",
    "InvalidArgumentError",
    "Manager",
    "MessagesConfig",
    "Privilege",
    "Restriction",
    "Rule",
    "RuleSet",
    "Sequential",
    "Strategy",
    "StrategyFactory",
    "StrategyFactoryError",
    "Subtractive",
    "load_config",
]
