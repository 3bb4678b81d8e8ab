import logging
import uuid

from roomadmin.application.errors import RoomNotFoundError
from roomadmin.application.ports import RoomStore
from roomadmin.domain.models import Room

logger = logging.getLogger(__name__)


class RoomService:
    """Registry of chat rooms held for the lifetime of the process."""

    def __init__(self, store: RoomStore):
        self._store = store

    def _make_room_id(self) -> str:
        return str(uuid.uuid4())

    def list_rooms(self) -> list[Room]:
        return self._store.all()

    def create_room(self, name: str) -> Room:
        room = Room(self._make_room_id(), name)
        self._store.add(room)
        logger.info("Created room %s", room.room_id)
        return room

    def get_room(self, room_id: str) -> Room:
        room = self._store.get(room_id)
        if room is None:
            raise RoomNotFoundError(room_id)
        return room

    def rename_room(self, room_id: str, name: str) -> Room:
        room = self._store.rename(room_id, name)
        if room is None:
            raise RoomNotFoundError(room_id)
        logger.info("Renamed room %s", room_id)
        return room

    def delete_room(self, room_id: str) -> None:
        if self._store.remove(room_id):
            logger.info("Deleted room %s", room_id)
        else:
            logger.debug("Delete of unknown room %s ignored", room_id)
