"""Built-in aggregation strategies."""

from authorizable.strategies.additive import Additive
from authorizable.strategies.base import Strategy
from authorizable.strategies.factory import StrategyFactory
from authorizable.strategies.sequential import Sequential
from authorizable.strategies.subtractive import Subtractive

__all__ = [
    "Additive",
    "Sequential",
    "Strategy",
    "StrategyFactory",
    "Subtractive",
]
