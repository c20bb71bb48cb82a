from .notification_sender import NotificationSender

__all__ = ["NotificationSender"]
