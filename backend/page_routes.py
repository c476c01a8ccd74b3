"""
HTML page routes
"""
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

import host_manager
from config_manager import Settings, get_settings
from host_routes import base_url
from models import Route
from route_client import RouteClient, get_route_client

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: RouteClient = Depends(get_route_client),
):
    """Host listing with a route toggle per host"""
    hosts = await host_manager.list_hosts(settings, client, base_url(request))
    return templates.TemplateResponse(
        request, "index.html", {"hosts": hosts, "routes": list(Route)}
    )
