"""Names of the frames exchanged with realtime clients."""

RECEIVE_MESSAGE = "ReceiveMessage"
MESSAGE_DELIVERED = "MessageDelivered"
MESSAGE_SEEN = "MessageSeen"
RECEIVE_NOTIFICATION = "ReceiveNotification"
NOTIFICATION_MARKED_AS_READ = "NotificationMarkedAsRead"

__all__ = [
    "RECEIVE_MESSAGE",
    "MESSAGE_DELIVERED",
    "MESSAGE_SEEN",
    "RECEIVE_NOTIFICATION",
    "NOTIFICATION_MARKED_AS_READ",
]
