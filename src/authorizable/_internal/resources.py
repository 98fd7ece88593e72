"""Resource representation helpers shared by rules and the manager.

A resource is one of three things:

* a **name** — any ``str`` (``"Post"``, ``"blog.models.Post"``, ``"all"``);
* a **type** — a class object (``Post``);
* an **instance** — anything else that is a valid resource (``Post(id=1)``).
"""

from __future__ import annotations

from numbers import Number
from typing import Any

WILDCARD = "all"

# Values that are objects in Python but never identify a resource.
_NON_RESOURCE_TYPES: tuple[type, ...] = (
    Number,
    bytes,
    bytearray,
    list,
    tuple,
    dict,
    set,
    frozenset,
)


def is_resource(value: Any) -> bool:
    """Return ``True`` if *value* can stand for a resource."""
    if isinstance(value, (str, type)):
        return True
    if value is None:
        return False
    return not isinstance(value, _NON_RESOURCE_TYPES)


def is_instance(value: Any) -> bool:
    """Return ``True`` if *value* is a resource instance (not a name, not a type)."""
    return is_resource(value) and not isinstance(value, (str, type))


def type_names(cls: type) -> set[str]:
    """All the names a string may use to refer to *cls*."""
    return {
        cls.__name__,
        cls.__qualname__,
        f"{cls.__module__}.{cls.__qualname__}",
    }


def type_of(resource: Any) -> type | None:
    """Type identity of a class or instance resource; ``None`` for names."""
    if isinstance(resource, str):
        return None
    if isinstance(resource, type):
        return resource
    return type(resource)


def display_name(resource: Any) -> str:
    """JSON-friendly label for *resource*."""
    if isinstance(resource, str):
        return resource
    cls = type_of(resource)
    assert cls is not None
    return f"{cls.__module__}.{cls.__qualname__}"


def resources_match(stored: Any, queried: Any) -> bool:
    """Compare a rule's stored resource against a queried one.

    Same representation compares by value (instances) or identity (types);
    a name against a type or instance compares against the class names.
    Any other mix does not match.
    """
    if isinstance(stored, str) and stored == WILDCARD:
        return True

    if isinstance(stored, str) and isinstance(queried, str):
        return stored == queried
    if isinstance(stored, str):
        cls = type_of(queried) if is_resource(queried) else None
        return cls is not None and stored in type_names(cls)
    if isinstance(queried, str):
        cls = type_of(stored) if is_resource(stored) else None
        return cls is not None and queried in type_names(cls)

    if not (is_resource(stored) and is_resource(queried)):
        return False

    stored_is_type = isinstance(stored, type)
    queried_is_type = isinstance(queried, type)
    if stored_is_type and queried_is_type:
        return stored is queried
    if stored_is_type:
        return type(queried) is stored
    if queried_is_type:
        return type(stored) is queried
    return bool(stored == queried)
