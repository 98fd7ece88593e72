"""Strategy registry for creating strategies by name.

Uses the Registry pattern to map names to strategy classes so that
configuration can select a strategy without importing it.
"""

from __future__ import annotations

from typing import ClassVar

from authorizable.exceptions import StrategyFactoryError
from authorizable.strategies.additive import Additive
from authorizable.strategies.base import Strategy
from authorizable.strategies.sequential import Sequential
from authorizable.strategies.subtractive import Subtractive


class StrategyFactory:
    """Creates strategy instances from their registered names.

    Example:
        strategy = StrategyFactory.create("subtractive")
        StrategyFactory.register("my_strategy", MyStrategy)
    """

    _registry: ClassVar[dict[str, type[Strategy]]] = {
        "sequential": Sequential,
        "additive": Additive,
        "subtractive": Subtractive,
    }

    @classmethod
    def register(cls, name: str, strategy_class: type[Strategy]) -> None:
        """Register a custom strategy class under *name*.

        Raises:
            StrategyFactoryError: If *strategy_class* is not a Strategy, or
                declares a different ``name``.
        """
        if not (isinstance(strategy_class, type) and issubclass(strategy_class, Strategy)):
            raise StrategyFactoryError(f"Cannot register {strategy_class!r}: not a Strategy subclass")
        declared = strategy_class.name
        if declared != "base" and declared != name:
            raise StrategyFactoryError(
                f"Strategy {strategy_class.__name__} has name='{declared}' "
                f"but is being registered as '{name}'"
            )
        cls._registry[name] = strategy_class

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return the names of all registered strategies."""
        return list(cls._registry.keys())

    @classmethod
    def create(cls, name: str) -> Strategy:
        """Instantiate the strategy registered as *name*.

        Raises:
            StrategyFactoryError: If *name* is not registered.
        """
        strategy_class = cls._registry.get(name)
        if strategy_class is None:
            available = ", ".join(sorted(cls.registered_types()))
            raise StrategyFactoryError(
                f"Unknown strategy: '{name}'. Available strategies: {available}"
            )
        return strategy_class()
