import pytest

from roomadmin.domain.models import Room
from roomadmin.infrastructure.memory_room_store import MemoryRoomStore


def test_add_preserves_insertion_order():
    store = MemoryRoomStore()

    store.add(Room("b", "Second"))
    store.add(Room("a", "First"))

    assert [room.room_id for room in store.all()] == ["b", "a"]
    assert len(store) == 2


def test_seeded_rooms_are_listed_in_order():
    store = MemoryRoomStore([Room("room-1", "Lobby"), Room("room-2", "Random")])

    assert store.all() == [Room("room-1", "Lobby"), Room("room-2", "Random")]


def test_add_rejects_duplicate_id():
    store = MemoryRoomStore([Room("room-1", "Lobby")])

    with pytest.raises(ValueError):
        store.add(Room("room-1", "Other"))

    assert store.all() == [Room("room-1", "Lobby")]


def test_get_uses_exact_match():
    store = MemoryRoomStore([Room("room-1", "Lobby")])

    assert store.get("room-1") == Room("room-1", "Lobby")
    assert store.get("ROOM-1") is None
    assert store.get("room-1 ") is None


def test_get_returns_a_copy():
    store = MemoryRoomStore([Room("room-1", "Lobby")])

    store.get("room-1").name = "Changed"

    assert store.get("room-1").name == "Lobby"


def test_listed_rooms_are_copies():
    store = MemoryRoomStore([Room("room-1", "Lobby")])

    store.all()[0].name = "Changed"

    assert store.get("room-1").name == "Lobby"


def test_add_keeps_its_own_record():
    room = Room("room-1", "Lobby")
    store = MemoryRoomStore([room])

    room.name = "Changed"

    assert store.get("room-1").name == "Lobby"


def test_rename_in_place_keeps_position():
    store = MemoryRoomStore([Room("room-1", "Lobby"), Room("room-2", "Random")])

    renamed = store.rename("room-1", "Main Lobby")

    assert renamed == Room("room-1", "Main Lobby")
    assert store.all() == [Room("room-1", "Main Lobby"), Room("room-2", "Random")]


def test_rename_missing_returns_none():
    store = MemoryRoomStore([Room("room-1", "Lobby")])

    assert store.rename("room-404", "Nope") is None
    assert store.all() == [Room("room-1", "Lobby")]


def test_all_returns_a_copy():
    store = MemoryRoomStore([Room("room-1", "Lobby")])

    store.all().clear()

    assert len(store) == 1


def test_remove_in_place():
    store = MemoryRoomStore(
        [Room("room-1", "Lobby"), Room("room-2", "Random"), Room("room-3", "Help")]
    )

    assert store.remove("room-2") is True

    assert [room.room_id for room in store.all()] == ["room-1", "room-3"]


def test_remove_missing_returns_false():
    store = MemoryRoomStore([Room("room-1", "Lobby")])

    assert store.remove("room-404") is False
    assert store.all() == [Room("room-1", "Lobby")]
