from typing import Callable

from hotel.room.domain import Room, RoomDirectory, RoomId

RoomFilter = Callable[[Room], bool]


class InMemoryRoomDirectory(RoomDirectory):
    """メモリ上で客室を管理する RoomDirectory の具象実装"""

    def __init__(self, rooms: list[Room] | None = None) -> None:
        self._rooms: dict[RoomId, Room] = {}
        for room in rooms or []:
            self.add_room(room)

    def add_room(self, room: Room | None) -> None:
        """客室を登録する（None は無視）"""
        if room is None:
            return
        self._rooms[room.id] = room

    def find_by_id(self, room_id: RoomId | None) -> Room | None:
        if room_id is None:
            return None
        return self._rooms.get(room_id)

    def update_availability(self, room_id: RoomId, available: bool) -> None:
        room = self.find_by_id(room_id)
        if room is None:
            return
        room.change_availability(available)

    def list_all(self) -> tuple[Room, ...]:
        return tuple(self._rooms.values())

    def find_available(self, room_filter: RoomFilter | None) -> tuple[Room, ...]:
        """空室のうち条件に合うものを返す（条件が None なら空）"""
        if room_filter is None:
            return ()
        return tuple(
            room
            for room in self._rooms.values()
            if room.available and room_filter(room)
        )
