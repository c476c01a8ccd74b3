"""
Client for the privileged route tool

All reads and writes of the alternate-route set go through RouteClient,
which only ever runs ``show --json``, ``add --ip <ip>`` and
``remove --ip <ip>``.
"""
import ipaddress
import json
import logging
from typing import List

from fastapi import Depends

from config_manager import Settings, get_settings
from errors import InvalidAddressError, RouteCommandError
from models import Route
from utils import run_command

logger = logging.getLogger("uvicorn")


def validate_ip(ip: str) -> str:
    """Return the address unchanged if it is a valid IPv4/IPv6 address"""
    try:
        ipaddress.ip_address(ip)
    except ValueError as e:
        raise InvalidAddressError(f"Invalid IP address: {ip!r}") from e
    return ip


class RouteClient:
    def __init__(self, settings: Settings):
        self.routes_cmd = settings.routes_cmd
        self.sudo_cmd = settings.sudo_cmd
        self.timeout = settings.command_timeout

    async def _run(self, *args: str) -> str:
        success, output = await run_command(
            [self.routes_cmd, *args], sudo_cmd=self.sudo_cmd, timeout=self.timeout
        )
        if not success:
            logger.error(f"Route command '{' '.join(args)}' failed: {output}")
            raise RouteCommandError(output.strip())
        return output

    async def list_alternate(self) -> List[str]:
        """IPs currently routed via the alternate path"""
        output = await self._run("show", "--json")
        try:
            ips = json.loads(output)
        except json.JSONDecodeError as e:
            logger.error(f"Route command printed invalid JSON: {e}")
            raise RouteCommandError(f"invalid JSON from route tool: {e}") from e

        if not isinstance(ips, list) or not all(isinstance(ip, str) for ip in ips):
            raise RouteCommandError("route tool did not return a list of IP strings")
        return ips

    async def add(self, ip: str):
        await self._run("add", "--ip", validate_ip(ip))
        logger.info(f"Routed {ip} via the alternate path")

    async def remove(self, ip: str):
        await self._run("remove", "--ip", validate_ip(ip))
        logger.info(f"Routed {ip} via the primary path")

    async def set_route(self, ip: str, route: Route):
        if route is Route.ALTERNATE:
            await self.add(ip)
        else:
            await self.remove(ip)


def get_route_client(settings: Settings = Depends(get_settings)) -> RouteClient:
    return RouteClient(settings)
