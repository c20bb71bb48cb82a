from abc import ABC, abstractmethod

from hotel.shared.domain import CustomerId


class NotificationSender(ABC):
    """顧客通知のインターフェース"""

    @abstractmethod
    def send(self, customer_id: CustomerId, message: str) -> None:
        """顧客にメッセージを送る（結果は返さない）"""
        raise NotImplementedError
