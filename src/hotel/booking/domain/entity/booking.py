from datetime import date

from hotel.booking.domain.value_object import BookingId
from hotel.room.domain.value_object import RoomId
from hotel.shared.domain import CustomerId, Entity


class Booking(Entity[BookingId]):
    """予約エンティティ

    日付の前後関係は BookingLedger が作成時に検証する。
    setter は値をそのまま書き換え、再検証は行わない。
    """

    def __init__(
        self,
        id: BookingId,
        room_id: RoomId,
        customer_id: CustomerId,
        start_date: date,
        end_date: date,
    ) -> None:
        super().__init__(id)
        self._room_id = room_id
        self._customer_id = customer_id
        self._start_date = start_date
        self._end_date = end_date

    @property
    def id(self) -> BookingId:
        return self._id

    @id.setter
    def id(self, value: BookingId) -> None:
        self._id = value

    @property
    def room_id(self) -> RoomId:
        return self._room_id

    @room_id.setter
    def room_id(self, value: RoomId) -> None:
        self._room_id = value

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @customer_id.setter
    def customer_id(self, value: CustomerId) -> None:
        self._customer_id = value

    @property
    def start_date(self) -> date:
        return self._start_date

    @start_date.setter
    def start_date(self, value: date) -> None:
        self._start_date = value

    @property
    def end_date(self) -> date:
        return self._end_date

    @end_date.setter
    def end_date(self, value: date) -> None:
        self._end_date = value

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self._end_date - self._start_date).days

    def __repr__(self) -> str:
        return (
            f"Booking(booking_id={self._id}, room_id={self._room_id}, "
            f"customer_id={self._customer_id}, start_date={self._start_date}, "
            f"end_date={self._end_date})"
        )
