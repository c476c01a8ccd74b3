"""
Host listing and route switching
"""
import asyncio
import logging
from typing import Dict, Iterable, List

from config_manager import Settings
from errors import HostNotFoundError
from lease_reader import read_leases
from models import HostView, LeaseRecord, Route
from route_client import RouteClient

logger = logging.getLogger("uvicorn")


def host_url(base_url: str, ip: str) -> str:
    return f"{base_url}/hosts/{ip}/"


def build_host_view(base_url: str, lease: LeaseRecord, alternate: Iterable[str]) -> HostView:
    """Combine a lease with its membership in the alternate-route set"""
    return HostView(
        url=host_url(base_url, lease.ip),
        ip=lease.ip,
        mac=lease.mac,
        hostname=lease.hostname,
        route=Route.ALTERNATE if lease.ip in alternate else Route.PRIMARY,
    )


def merge_hosts(base_url: str, leases: Dict[str, LeaseRecord], alternate: Iterable[str]) -> List[HostView]:
    alternate = set(alternate)
    return [build_host_view(base_url, lease, alternate) for lease in leases.values()]


def lookup_lease(leases: Dict[str, LeaseRecord], ip: str) -> LeaseRecord:
    try:
        return leases[ip]
    except KeyError:
        raise HostNotFoundError(ip) from None


async def load_leases(settings: Settings) -> Dict[str, LeaseRecord]:
    """Read the lease file off the event loop"""
    return await asyncio.to_thread(read_leases, settings.leases_file)


async def list_hosts(settings: Settings, client: RouteClient, base_url: str) -> List[HostView]:
    """All leased hosts and the path each one takes"""
    leases = await load_leases(settings)
    alternate = await client.list_alternate()
    return merge_hosts(base_url, leases, alternate)


async def get_host(settings: Settings, client: RouteClient, base_url: str, ip: str) -> HostView:
    """A single leased host; unknown IPs are not looked up in the route set"""
    lease = lookup_lease(await load_leases(settings), ip)
    alternate = await client.list_alternate()
    return build_host_view(base_url, lease, alternate)


async def set_host_route(settings: Settings, client: RouteClient, base_url: str, ip: str, route: Route) -> HostView:
    """
    Move a leased host onto the requested path.

    The returned view reports the requested route; the route set is not
    read back after the tool succeeds.
    """
    lease = lookup_lease(await load_leases(settings), ip)
    logger.info(f"Setting route for {ip} ({lease.hostname}) to {route.value}")
    await client.set_route(ip, route)
    return HostView(
        url=host_url(base_url, ip),
        ip=ip,
        mac=lease.mac,
        hostname=lease.hostname,
        route=route,
    )


def whoami(leases: Dict[str, LeaseRecord], client_ip: str) -> LeaseRecord:
    """The lease held by the calling client"""
    return lookup_lease(leases, client_ip)
