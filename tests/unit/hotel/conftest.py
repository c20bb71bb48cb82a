from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hotel.booking.domain.entity.booking import Booking
from hotel.booking.domain.value_object.booking_id import BookingId
from hotel.room.domain.entity.room import Room
from hotel.room.domain.value_object.room_id import RoomId
from hotel.shared.domain import CustomerId, Money


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_id: int = 10,
        room_type: str = "Standard",
        price_amount: Decimal = Decimal("120"),
        available: bool = True,
    ) -> Room:
        return Room(
            id=RoomId(value=room_id),
            room_type=room_type,
            price=Money.usd(price_amount),
            available=available,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: int = 1,
        room_id: int = 10,
        customer_id: int = 100,
        start_date: date = date(2023, 11, 1),
        end_date: date = date(2023, 11, 5),
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            room_id=RoomId(value=room_id),
            customer_id=CustomerId(value=customer_id),
            start_date=start_date,
            end_date=end_date,
        )

    return _factory


@pytest.fixture
def mock_room_directory():
    """客室台帳のモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_notification_sender():
    """通知送信のモックフィクスチャ"""
    return MagicMock()
