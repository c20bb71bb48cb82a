from .room_directory import RoomDirectory

__all__ = ["RoomDirectory"]
