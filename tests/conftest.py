import json

import pytest
from fastapi.testclient import TestClient

from roomadmin.config import Config
from roomadmin.main import app_factory

SEED_ROOMS = [
    {"id": "room-1", "name": "Lobby"},
    {"id": "room-2", "name": "Random"},
]


@pytest.fixture
def seed_path(tmp_path):
    path = tmp_path / "rooms.json"
    path.write_text(json.dumps(SEED_ROOMS))
    return path


@pytest.fixture
def config(seed_path):
    return Config(seed_path=seed_path)


@pytest.fixture
def app(config):
    return app_factory(config)


@pytest.fixture
def client(app):
    with TestClient(app) as tc:
        yield tc
