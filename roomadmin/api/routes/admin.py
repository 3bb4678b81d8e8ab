from typing import Annotated

from fastapi import APIRouter, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from roomadmin.api.deps import RoomServiceDep, TemplatesDep
from roomadmin.api.forms import RoomForm
from roomadmin.application.errors import RoomNotFoundError

admin_router = APIRouter(tags=["admin"])


def _redirect_to_rooms(request: Request) -> RedirectResponse:
    return RedirectResponse(
        request.url_for("list_rooms"), status_code=status.HTTP_302_FOUND
    )


@admin_router.get("/rooms", response_class=HTMLResponse, name="list_rooms")
async def list_rooms(
    request: Request, room_service: RoomServiceDep, templates: TemplatesDep
):
    return templates.TemplateResponse(
        request,
        "rooms.html",
        {"title": "Admin Rooms", "rooms": room_service.list_rooms()},
    )


@admin_router.get("/rooms/add", response_class=HTMLResponse, name="add_room_form")
async def add_room_form(request: Request, templates: TemplatesDep):
    return templates.TemplateResponse(request, "add.html", {"title": "Add Room"})


@admin_router.post("/rooms/add", name="add_room")
async def add_room(
    request: Request,
    room_form: Annotated[RoomForm, Form()],
    room_service: RoomServiceDep,
):
    room_service.create_room(room_form.name)
    return _redirect_to_rooms(request)


@admin_router.get(
    "/rooms/edit/{room_id}", response_class=HTMLResponse, name="edit_room_form"
)
async def edit_room_form(
    request: Request,
    room_id: str,
    room_service: RoomServiceDep,
    templates: TemplatesDep,
):
    try:
        room = room_service.get_room(room_id)
    except RoomNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return templates.TemplateResponse(
        request, "edit.html", {"title": "Edit Room", "room": room}
    )


@admin_router.post("/rooms/edit/{room_id}", name="edit_room")
async def edit_room(
    request: Request,
    room_id: str,
    room_form: Annotated[RoomForm, Form()],
    room_service: RoomServiceDep,
):
    try:
        room_service.rename_room(room_id, room_form.name)
    except RoomNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _redirect_to_rooms(request)


@admin_router.get("/rooms/delete/{room_id}", name="delete_room")
async def delete_room(request: Request, room_id: str, room_service: RoomServiceDep):
    room_service.delete_room(room_id)
    return _redirect_to_rooms(request)
