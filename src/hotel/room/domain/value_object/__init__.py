from .room_id import RoomId

__all__ = ["RoomId"]
