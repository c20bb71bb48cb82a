from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar


@dataclass(frozen=True)
class MessageCatalog:
    """予約台帳が利用者に返す文言（ロケール別）

    サポート対象: en, ru
    """

    locale: str
    invalid_parameters: str
    invalid_dates: str
    room_unavailable: str
    booking_not_found: str
    duplicate_booking: str
    booking_confirmed: str
    booking_cancelled: str

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"en", "ru"})

    @classmethod
    def for_locale(cls, code: str) -> MessageCatalog:
        """ロケールコードから文言セットを取得する"""
        normalized = code.strip().lower()
        if normalized not in cls.SUPPORTED:
            raise ValueError(
                f"Unsupported locale: {code}. "
                f"Supported: {', '.join(sorted(cls.SUPPORTED))}"
            )
        return _CATALOGS[normalized]

    def room_unavailable_for(self, room_id: object) -> str:
        return self.room_unavailable.format(room_id=room_id)

    def booking_not_found_for(self, booking_id: object) -> str:
        return self.booking_not_found.format(booking_id=booking_id)

    def duplicate_booking_for(self, booking_id: object) -> str:
        return self.duplicate_booking.format(booking_id=booking_id)

    def confirmation(
        self, booking_id: object, room_id: object, start_date: date, end_date: date
    ) -> str:
        return self.booking_confirmed.format(
            booking_id=booking_id,
            room_id=room_id,
            start_date=start_date.isoformat(),
            end_date=end_date.isoformat(),
        )

    def cancellation(self, booking_id: object, room_id: object) -> str:
        return self.booking_cancelled.format(booking_id=booking_id, room_id=room_id)


_CATALOGS: dict[str, MessageCatalog] = {
    "en": MessageCatalog(
        locale="en",
        invalid_parameters="Invalid booking parameters",
        invalid_dates="Booking start date must be before end date",
        room_unavailable="Room {room_id} is unavailable for booking.",
        booking_not_found="Booking with ID {booking_id} not found.",
        duplicate_booking="Booking with ID {booking_id} already exists.",
        booking_confirmed=(
            "Your booking #{booking_id} for room {room_id} "
            "from {start_date} to {end_date} is confirmed."
        ),
        booking_cancelled=(
            "Your booking #{booking_id} for room {room_id} has been cancelled."
        ),
    ),
    "ru": MessageCatalog(
        locale="ru",
        invalid_parameters="Недопустимые параметры бронирования",
        invalid_dates="Дата начала бронирования должна быть раньше даты окончания",
        room_unavailable="Номер {room_id} недоступен для бронирования.",
        booking_not_found="Бронирование с ID {booking_id} не найдено.",
        duplicate_booking="Бронирование с ID {booking_id} уже существует.",
        booking_confirmed=(
            "Ваше бронирование №{booking_id} номера {room_id} "
            "с {start_date} по {end_date} подтверждено."
        ),
        booking_cancelled=(
            "Ваше бронирование №{booking_id} номера {room_id} отменено."
        ),
    ),
}
