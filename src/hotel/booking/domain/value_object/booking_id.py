from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（呼び出し元が採番する）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Booking ID must be an integer")
        if self.value <= 0:
            raise ValueError("Booking ID must be positive")

    def __str__(self) -> str:
        return str(self.value)
