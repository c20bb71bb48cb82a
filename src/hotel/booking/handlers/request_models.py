from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from hotel.shared.utils import to_decimal


class CreateBookingRequest(BaseModel):
    """予約作成リクエストモデル

    欠けている項目は BookingLedger 側で「Invalid booking parameters」として扱う。
    """

    booking_id: int | None = Field(default=None, gt=0)
    room_id: int | None = Field(default=None, gt=0)
    customer_id: int | None = Field(default=None, gt=0)
    start_date: date | None = Field(
        default=None,
        description="開始日（YYYY-MM-DD形式）",
        examples=["2024-01-01"],
    )
    end_date: date | None = Field(
        default=None,
        description="終了日（YYYY-MM-DD形式）",
        examples=["2024-01-03"],
    )


class AddRoomRequest(BaseModel):
    """客室登録リクエストモデル"""

    room_id: int = Field(..., gt=0)
    room_type: str = Field(..., min_length=1, max_length=50)
    price_amount: Decimal = Field(..., ge=0, description="一泊あたりの料金")
    price_currency: str = Field(
        default="USD",
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
    )
    available: bool = True

    @field_validator("price_amount", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)
