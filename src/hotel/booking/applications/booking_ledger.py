from datetime import date
from typing import NoReturn

from hotel.booking.domain import (
    Booking,
    BookingId,
    BookingRepository,
    MessageCatalog,
)
from hotel.notification.domain import NotificationSender
from hotel.room.domain import RoomDirectory, RoomId
from hotel.shared.config import BookingSettings
from hotel.shared.domain import CustomerId, InvalidOperationException
from hotel.shared.utils import get_logger

logger = get_logger()


class BookingLedger:
    """予約台帳のユースケース

    - 有効な予約を保持し、作成・キャンセル時の不変条件を守る
    - 客室の空室フラグと予約の有無を同期させる
    - 状態が変わるたびに顧客へ通知する
    """

    def __init__(
        self,
        room_directory: RoomDirectory,
        notification_sender: NotificationSender,
        repository: BookingRepository,
        settings: BookingSettings | None = None,
    ) -> None:
        self._room_directory = room_directory
        self._notification_sender = notification_sender
        self._repository = repository
        self._settings = settings or BookingSettings()
        self._messages = MessageCatalog.for_locale(self._settings.locale)

    @property
    def messages(self) -> MessageCatalog:
        return self._messages

    def create_booking(
        self,
        booking_id: BookingId | None,
        room_id: RoomId | None,
        customer_id: CustomerId | None,
        start_date: date | None,
        end_date: date | None,
    ) -> Booking:
        """予約を作成し、客室を埋めて確認通知を送る"""
        params = (booking_id, room_id, customer_id, start_date, end_date)
        if any(param is None for param in params):
            self._reject(self._messages.invalid_parameters)
        if start_date >= end_date:
            self._reject(self._messages.invalid_dates)
        if (
            self._settings.reject_duplicate_ids
            and self._repository.find_by_id(booking_id) is not None
        ):
            self._reject(self._messages.duplicate_booking_for(booking_id))

        room = self._room_directory.find_by_id(room_id)
        if room is None or not room.available:
            self._reject(self._messages.room_unavailable_for(room_id))

        booking = Booking(
            id=booking_id,
            room_id=room_id,
            customer_id=customer_id,
            start_date=start_date,
            end_date=end_date,
        )
        self._repository.save(booking)
        try:
            self._room_directory.update_availability(room_id, False)
            self._notification_sender.send(
                customer_id,
                self._messages.confirmation(booking_id, room_id, start_date, end_date),
            )
        except Exception:
            if self._settings.rollback_on_failure:
                logger.exception(
                    "Rolling back booking creation",
                    extra={"booking_id": str(booking_id)},
                )
                self._repository.remove(booking)
                self._room_directory.update_availability(room_id, True)
            raise

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(booking_id),
                "room_id": str(room_id),
                "customer_id": str(customer_id),
            },
        )
        return booking

    def cancel_booking(self, booking_id: BookingId | None) -> None:
        """予約をキャンセルし、客室を空けて取消通知を送る"""
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            self._reject(self._messages.booking_not_found_for(booking_id))

        self._repository.remove(booking)
        try:
            self._room_directory.update_availability(booking.room_id, True)
            self._notification_sender.send(
                booking.customer_id,
                self._messages.cancellation(booking.id, booking.room_id),
            )
        except Exception:
            if self._settings.rollback_on_failure:
                logger.exception(
                    "Rolling back booking cancellation",
                    extra={"booking_id": str(booking_id)},
                )
                self._repository.save(booking)
                self._room_directory.update_availability(booking.room_id, False)
            raise

        logger.info(
            "Booking cancelled",
            extra={"booking_id": str(booking_id), "room_id": str(booking.room_id)},
        )

    def get_all_bookings(self) -> tuple[Booking, ...]:
        """有効な予約の読み取り専用スナップショットを返す"""
        return self._repository.list_all()

    def _reject(self, message: str) -> NoReturn:
        logger.warning("Booking operation rejected", extra={"reason": message})
        raise InvalidOperationException(message)
