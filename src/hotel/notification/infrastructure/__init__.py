from .logging_notification_sender import LoggingNotificationSender

__all__ = ["LoggingNotificationSender"]
