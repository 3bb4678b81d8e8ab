from pydantic import BaseModel


class RoomForm(BaseModel):
    """Fields posted by the add and edit room forms.

    ``name`` is taken as sent, without trimming; a missing field reads as "".
    """

    name: str = ""
