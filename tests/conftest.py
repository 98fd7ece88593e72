"""Shared test fixtures."""

from dataclasses import dataclass

import pytest

from authorizable import Manager, Privilege, Restriction, RuleSet


@dataclass(eq=False)
class Account:
    id: int
    name: str = ""


@pytest.fixture
def manager():
    return Manager()


@pytest.fixture
def alice():
    return Account(id=1, name="alice")


@pytest.fixture
def bob():
    return Account(id=2, name="bob")


@pytest.fixture
def user_rules():
    """The mixed rule set used to compare strategies."""
    return RuleSet(
        [
            Restriction("create", "User"),
            Privilege("create", "User"),
            Privilege("read", "User"),
            Privilege("update", "User"),
            Restriction("update", "User"),
            Restriction("delete", "User"),
        ]
    )
