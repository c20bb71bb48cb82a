from hotel.room.domain.value_object import RoomId
from hotel.shared.domain import Entity, Money


class Room(Entity[RoomId]):
    """客室エンティティ"""

    def __init__(
        self,
        id: RoomId,
        room_type: str,
        price: Money,
        available: bool = True,
    ) -> None:
        super().__init__(id)
        if not room_type or not room_type.strip():
            raise ValueError("Room type cannot be empty")
        self._room_type = room_type
        self._price = price
        self._available = available

    @property
    def room_type(self) -> str:
        return self._room_type

    @property
    def price(self) -> Money:
        return self._price

    @property
    def available(self) -> bool:
        return self._available

    def change_availability(self, available: bool) -> None:
        """空室状態を切り替える"""
        self._available = available

    def __repr__(self) -> str:
        return (
            f"Room(id={self.id}, room_type={self._room_type!r}, "
            f"price={self._price}, available={self._available})"
        )
