"""AuthorizableUser — mixin that lets user objects ask their own questions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from authorizable.exceptions import AuthorizationError

if TYPE_CHECKING:
    from authorizable.manager import Manager


class AuthorizableUser:
    """Mix into a host user class to call ``user.can(...)`` directly.

    Every call sets the user as the manager's temporary user, so conditions
    see *this* user as the active one regardless of who the primary user
    is.  The manager must be attached with :meth:`set_authorizable_manager`.

    Example::

        class User(AuthorizableUser):
            def __init__(self, id):
                self.id = id

        bob = User(2).set_authorizable_manager(manager)
        bob.can("update", post)
    """

    _authorizable_manager: Manager | None = None

    def get_authorizable_manager(self) -> Manager:
        if self._authorizable_manager is None:
            raise AuthorizationError(f"No authorizable manager attached to {self!r}")
        return self._authorizable_manager

    def set_authorizable_manager(self, manager: Manager) -> Self:
        self._authorizable_manager = manager
        return self

    def can(self, action: str, resource: Any, *extra: Any) -> bool:
        return self.get_authorizable_manager().user(self).can(action, resource, *extra)

    def cannot(self, action: str, resource: Any, *extra: Any) -> bool:
        return self.get_authorizable_manager().user(self).cannot(action, resource, *extra)

    def can_any(self, actions: str | list[str], resource: Any, *extra: Any) -> bool:
        return self.get_authorizable_manager().user(self).can_any(actions, resource, *extra)

    def can_all(self, actions: str | list[str], resource: Any, *extra: Any) -> bool:
        return self.get_authorizable_manager().user(self).can_all(actions, resource, *extra)
