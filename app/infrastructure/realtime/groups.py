"""Group membership bookkeeping for realtime connections."""

from __future__ import annotations

from collections import defaultdict
from typing import DefaultDict, NamedTuple, Set

USER_GROUP = "user"


class GroupKey(NamedTuple):
    """Address of a push target; a user is one kind of group."""

    kind: str
    name: str


def user_group(user_id: str) -> GroupKey:
    """Return the group every connection of ``user_id`` belongs to."""

    return GroupKey(USER_GROUP, user_id)


class GroupMembership:
    """Track which connections belong to which groups.

    Not synchronized; callers sharing an instance across threads must hold
    their own lock.
    """

    def __init__(self) -> None:
        self._members: DefaultDict[GroupKey, Set[str]] = defaultdict(set)
        self._groups: DefaultDict[str, Set[GroupKey]] = defaultdict(set)

    def add_member(self, connection_id: str, group: GroupKey) -> None:
        self._members[group].add(connection_id)
        self._groups[connection_id].add(group)

    def remove_member(self, connection_id: str) -> None:
        """Drop ``connection_id`` from every group it joined."""

        for group in self._groups.pop(connection_id, set()):
            members = self._members.get(group)
            if members is None:
                continue
            members.discard(connection_id)
            if not members:
                self._members.pop(group, None)

    def members_of(self, group: GroupKey) -> frozenset[str]:
        return frozenset(self._members.get(group, ()))


__all__ = ["GroupKey", "GroupMembership", "USER_GROUP", "user_group"]
