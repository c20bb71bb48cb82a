from hotel.booking.domain import Booking, BookingId, BookingRepository


class InMemoryBookingRepository(BookingRepository):
    """メモリ上で予約を保持する BookingRepository の具象実装

    登録順のリストで保持する。同一IDの重複登録は拒否しない
    （拒否するかどうかは BookingLedger の設定で決まる）。
    """

    def __init__(self) -> None:
        self._bookings: list[Booking] = []

    def save(self, booking: Booking) -> None:
        self._bookings.append(booking)

    def find_by_id(self, booking_id: BookingId | None) -> Booking | None:
        if booking_id is None:
            return None
        return next(
            (booking for booking in self._bookings if booking.id == booking_id),
            None,
        )

    def remove(self, booking: Booking) -> None:
        for index, stored in enumerate(self._bookings):
            if stored is booking:
                del self._bookings[index]
                return

    def list_all(self) -> tuple[Booking, ...]:
        return tuple(self._bookings)
