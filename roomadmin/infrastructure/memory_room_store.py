import threading
from dataclasses import replace
from typing import Iterable

from roomadmin.domain.models import Room


class MemoryRoomStore:
    """Ordered room records behind a single lock.

    Records never leave the store: reads return copies, and names change
    only through ``rename``.
    """

    def __init__(self, rooms: Iterable[Room] = ()):
        self._rooms: list[Room] = []
        self._lock = threading.Lock()
        for room in rooms:
            self.add(room)

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    def all(self) -> list[Room]:
        with self._lock:
            return [replace(room) for room in self._rooms]

    def get(self, room_id: str) -> Room | None:
        with self._lock:
            room = self._find(room_id)
            return replace(room) if room is not None else None

    def add(self, room: Room) -> None:
        with self._lock:
            if self._find(room.room_id) is not None:
                raise ValueError(f"duplicate room id {room.room_id!r}")
            self._rooms.append(replace(room))

    def rename(self, room_id: str, name: str) -> Room | None:
        with self._lock:
            room = self._find(room_id)
            if room is None:
                return None
            room.name = name
            return replace(room)

    def remove(self, room_id: str) -> bool:
        with self._lock:
            for index, room in enumerate(self._rooms):
                if room.room_id == room_id:
                    del self._rooms[index]
                    return True
            return False

    def _find(self, room_id: str) -> Room | None:
        for room in self._rooms:
            if room.room_id == room_id:
                return room
        return None
