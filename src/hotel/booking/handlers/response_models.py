from __future__ import annotations

from pydantic import BaseModel

from hotel.booking.domain import Booking
from hotel.room.domain import Room


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: int
    room_id: int
    customer_id: int
    start_date: str
    end_date: str
    nights: int


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    room_id: int
    room_type: str
    price_amount: str
    price_currency: str
    available: bool


def to_booking_data(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingData(
        booking_id=booking.id.value,
        room_id=booking.room_id.value,
        customer_id=booking.customer_id.value,
        start_date=booking.start_date.isoformat(),
        end_date=booking.end_date.isoformat(),
        nights=booking.nights(),
    ).model_dump()


def to_room_data(room: Room) -> dict:
    """Room エンティティをレスポンス辞書に変換する"""
    return RoomData(
        room_id=room.id.value,
        room_type=room.room_type,
        price_amount=str(room.price.amount),
        price_currency=str(room.price.currency),
        available=room.available,
    ).model_dump()
