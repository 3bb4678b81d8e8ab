from typing import Annotated

from fastapi import Depends
from fastapi.requests import HTTPConnection
from fastapi.templating import Jinja2Templates

from roomadmin.application.room_service import RoomService
from roomadmin.config import Config


def get_config(conn: HTTPConnection) -> Config:
    return conn.app.state.config


def get_room_service(conn: HTTPConnection) -> RoomService:
    return conn.app.state.room_service


def get_templates(conn: HTTPConnection) -> Jinja2Templates:
    return conn.app.state.templates


ConfigDep = Annotated[Config, Depends(get_config)]
RoomServiceDep = Annotated[RoomService, Depends(get_room_service)]
TemplatesDep = Annotated[Jinja2Templates, Depends(get_templates)]
