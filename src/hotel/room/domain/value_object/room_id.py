from dataclasses import dataclass


@dataclass(frozen=True)
class RoomId:
    """客室ID"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Room ID must be an integer")
        if self.value <= 0:
            raise ValueError("Room ID must be positive")

    def __str__(self) -> str:
        return str(self.value)
