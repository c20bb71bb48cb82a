from aws_lambda_powertools import Logger

from hotel.notification.domain import NotificationSender
from hotel.shared.domain import CustomerId
from hotel.shared.utils import get_logger


class LoggingNotificationSender(NotificationSender):
    """通知内容を構造化ログに出力する NotificationSender の具象実装"""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or get_logger()

    def send(self, customer_id: CustomerId, message: str) -> None:
        self._logger.info(
            "Notification sent",
            extra={"customer_id": str(customer_id), "notification": message},
        )
