"""
Host-related API routes
"""
from typing import List

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

import host_manager
from config_manager import Settings, get_settings
from models import HostView, LeaseRecord, Route
from route_client import RouteClient, get_route_client

router = APIRouter()

# Accept entries that cover HTML, most specific first
HTML_TYPES = ("text/html", "text/*", "*/*")


def base_url(request: Request) -> str:
    """Scheme and hostname the client used to reach us"""
    hostname = request.url.hostname or ""
    if ":" in hostname:
        hostname = f"[{hostname}]"
    return f"{request.url.scheme}://{hostname}"


def accepts_html(request: Request) -> bool:
    """
    True unless the Accept header rules HTML out.

    The most specific entry covering text/html decides, so
    ``text/html;q=0, */*`` refuses HTML.
    """
    accept = request.headers.get("accept")
    if not accept:
        return True

    qualities = {}
    for item in accept.split(","):
        media, _, params = item.partition(";")
        media = media.strip().lower()
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.partition("=")
            if key.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        qualities[media] = max(quality, qualities.get(media, 0.0))

    for media in HTML_TYPES:
        if media in qualities:
            return qualities[media] > 0
    return False


@router.get("/hosts", response_model=List[HostView])
async def list_hosts(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: RouteClient = Depends(get_route_client),
):
    """List all leased hosts and their route"""
    return await host_manager.list_hosts(settings, client, base_url(request))


@router.get("/hosts/{ip}", response_model=HostView)
@router.get("/hosts/{ip}/", response_model=HostView, include_in_schema=False)
async def get_host(
    ip: str,
    request: Request,
    settings: Settings = Depends(get_settings),
    client: RouteClient = Depends(get_route_client),
):
    """Get a single leased host"""
    return await host_manager.get_host(settings, client, base_url(request), ip)


@router.post("/hosts/{ip}", response_model=HostView)
@router.post("/hosts/{ip}/", response_model=HostView, include_in_schema=False)
async def set_host_route(
    ip: str,
    request: Request,
    route: str = Form(""),
    settings: Settings = Depends(get_settings),
    client: RouteClient = Depends(get_route_client),
):
    """Route a host via the alternate ("usa") or primary ("can") path"""
    host = await host_manager.set_host_route(
        settings, client, base_url(request), ip, Route.from_form(route)
    )
    if accepts_html(request):
        return RedirectResponse("/", status_code=302)
    return host


@router.get("/me", response_model=LeaseRecord)
async def whoami(request: Request, settings: Settings = Depends(get_settings)):
    """Lease of the calling client"""
    leases = await host_manager.load_leases(settings)
    return host_manager.whoami(leases, request.client.host if request.client else "")
