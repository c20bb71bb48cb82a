from .entity import Room
from .repository import RoomDirectory
from .value_object import RoomId

__all__ = [
    "Room",
    "RoomId",
    "RoomDirectory",
]
