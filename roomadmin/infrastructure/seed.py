import json
import logging
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError

from roomadmin.domain.models import Room

logger = logging.getLogger(__name__)


class RoomSeed(BaseModel):
    id: str
    name: str


_seed_adapter = TypeAdapter(list[RoomSeed])


def load_seed(path: Path | str) -> list[Room]:
    """Read the initial rooms from a JSON array of ``{"id", "name"}`` objects.

    A missing file yields no rooms. Anything else that is not a list of such
    objects raises ``ValueError``.
    """
    seed_path = Path(path)
    if not seed_path.exists():
        logger.warning("Seed file %s not found, starting with no rooms", seed_path)
        return []
    try:
        raw = json.loads(seed_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"{seed_path} is not valid JSON") from exc
    try:
        seeds = _seed_adapter.validate_python(raw)
    except ValidationError as exc:
        raise ValueError(f"{seed_path} must contain a list of rooms") from exc
    return [Room(seed.id, seed.name) for seed in seeds]
