class RoomNotFoundError(LookupError):
    def __init__(self, room_id: str):
        super().__init__(f"room {room_id!r} not found")
        self.room_id = room_id
