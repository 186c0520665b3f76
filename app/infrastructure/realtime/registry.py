"""Registry mapping live connections to authenticated user identities."""

from __future__ import annotations

import logging
import threading

from .groups import GroupKey, GroupMembership, user_group

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Multiplex connection ids onto user identities and back.

    A connection belongs to at most one user; a user may hold any number of
    connections. Every operation is idempotent and runs under one lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, str] = {}
        self._groups = GroupMembership()

    def register(self, connection_id: str, user_id: str | None) -> None:
        """Bind ``connection_id`` to ``user_id``, replacing any previous binding."""

        if not connection_id or not user_id:
            return

        with self._lock:
            previous = self._users.get(connection_id)
            if previous == user_id:
                return
            if previous is not None:
                self._groups.remove_member(connection_id)
                logger.debug(
                    "Connection %s moved from user %s to user %s",
                    connection_id,
                    previous,
                    user_id,
                )
            self._users[connection_id] = user_id
            self._groups.add_member(connection_id, user_group(user_id))

    def unregister(self, connection_id: str) -> str | None:
        """Forget ``connection_id`` and return the user it belonged to, if any."""

        with self._lock:
            user_id = self._users.pop(connection_id, None)
            if user_id is not None:
                self._groups.remove_member(connection_id)
            return user_id

    def connections_for(self, user_id: str) -> frozenset[str]:
        """Return a snapshot of the live connection ids for ``user_id``."""

        if not user_id:
            return frozenset()
        return self.members_of(user_group(user_id))

    def members_of(self, group: GroupKey) -> frozenset[str]:
        with self._lock:
            return self._groups.members_of(group)


__all__ = ["ConnectionRegistry"]
