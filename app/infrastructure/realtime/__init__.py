"""Realtime connection tracking and push helpers for the infrastructure layer."""

from .groups import GroupKey, GroupMembership, user_group
from .manager import PushTransport, RealtimeConnectionManager
from .registry import ConnectionRegistry

__all__ = [
    "ConnectionRegistry",
    "GroupKey",
    "GroupMembership",
    "PushTransport",
    "RealtimeConnectionManager",
    "user_group",
]
