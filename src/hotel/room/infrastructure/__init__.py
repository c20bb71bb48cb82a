from .in_memory_room_directory import InMemoryRoomDirectory

__all__ = ["InMemoryRoomDirectory"]
