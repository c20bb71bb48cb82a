from abc import ABC, abstractmethod

from hotel.room.domain.entity import Room
from hotel.room.domain.value_object import RoomId


class RoomDirectory(ABC):
    """客室台帳のインターフェース（予約台帳から参照される）"""

    @abstractmethod
    def find_by_id(self, room_id: RoomId | None) -> Room | None:
        """客室IDで検索する。見つからなければ None"""
        raise NotImplementedError

    @abstractmethod
    def update_availability(self, room_id: RoomId, available: bool) -> None:
        """空室状態を更新する。存在しない客室は何もしない"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> tuple[Room, ...]:
        """全客室を返す"""
        raise NotImplementedError
