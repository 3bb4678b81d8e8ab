from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from roomadmin.api.deps import ConfigDep, TemplatesDep

home_router = APIRouter()


@home_router.get("/", response_class=HTMLResponse, name="home")
async def home(request: Request, config: ConfigDep, templates: TemplatesDep):
    return templates.TemplateResponse(
        request, "index.html", {"title": config.site_title}
    )
