from typing import Protocol

from roomadmin.domain.models import Room


class RoomStore(Protocol):
    def all(self) -> list[Room]: ...

    def get(self, room_id: str) -> Room | None: ...

    def add(self, room: Room) -> None: ...

    def rename(self, room_id: str, name: str) -> Room | None: ...

    def remove(self, room_id: str) -> bool: ...
