import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from roomadmin.api.routes.admin import admin_router
from roomadmin.api.routes.home import home_router
from roomadmin.application.room_service import RoomService
from roomadmin.config import Config
from roomadmin.infrastructure.memory_room_store import MemoryRoomStore
from roomadmin.infrastructure.seed import load_seed

PACKAGE_DIR = Path(__file__).resolve().parent

logger = logging.getLogger(__name__)


def app_factory(config: Config) -> FastAPI:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        rooms = load_seed(config.seed_path)
        app.state.config = config
        app.state.templates = Jinja2Templates(directory=PACKAGE_DIR / "templates")
        app.state.room_store = MemoryRoomStore(rooms)
        app.state.room_service = RoomService(app.state.room_store)
        logger.info("Loaded %d rooms from %s", len(rooms), config.seed_path)
        try:
            yield
        finally:
            logger.info(
                "Discarding %d rooms on shutdown", len(app.state.room_store)
            )

    app = FastAPI(title=config.site_title, lifespan=lifespan)
    app.mount("/static", StaticFiles(directory=PACKAGE_DIR / "static"), name="static")
    app.include_router(home_router)
    app.include_router(admin_router, prefix=config.admin_prefix)

    return app


CONFIG_PATH = os.getenv("ROOMADMIN_CONFIG")

app = app_factory(Config.load(CONFIG_PATH))


def run() -> None:
    uvicorn.run(
        "roomadmin.main:app",
        host=os.getenv("ROOMADMIN_HOST", "127.0.0.1"),
        port=int(os.getenv("ROOMADMIN_PORT", "8000")),
    )
