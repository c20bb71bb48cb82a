from abc import abstractmethod

from hotel.booking.domain.entity.booking import Booking
from hotel.booking.domain.value_object.booking_id import BookingId
from hotel.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """有効な予約を保持するレポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を追加する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId | None) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def remove(self, booking: Booking) -> None:
        """予約を取り除く"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> tuple[Booking, ...]:
        """全予約のスナップショットを返す"""
        raise NotImplementedError
