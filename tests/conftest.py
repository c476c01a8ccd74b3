from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from config_manager import Settings, get_settings
from errors import RouteCommandError
from main import app
from models import Route
from route_client import get_route_client

LEASES = (
    "1700000000 aa:bb:cc:dd:ee:ff 10.0.0.5 myhost *\n"
    "1700000100 11:22:33:44:55:66 10.0.0.6 laptop 01:11:22:33:44:55:66\n"
)


class FakeRouteClient:
    """Stands in for the privileged route tool"""

    def __init__(self, alternate: Optional[List[str]] = None):
        self.alternate = list(alternate or [])
        self.calls: List[Tuple[str, str]] = []
        self.error: Optional[str] = None
        self.apply_changes = True

    async def list_alternate(self) -> List[str]:
        self.calls.append(("show", ""))
        if self.error:
            raise RouteCommandError(self.error)
        return list(self.alternate)

    async def set_route(self, ip: str, route: Route):
        action = "add" if route is Route.ALTERNATE else "remove"
        self.calls.append((action, ip))
        if self.error:
            raise RouteCommandError(self.error)
        if not self.apply_changes:
            return
        if route is Route.ALTERNATE and ip not in self.alternate:
            self.alternate.append(ip)
        elif route is Route.PRIMARY and ip in self.alternate:
            self.alternate.remove(ip)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("HOSTROUTES_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def leases_file(tmp_path):
    path = tmp_path / "dnsmasq.leases"
    path.write_text(LEASES)
    return path


@pytest.fixture
def settings(leases_file):
    return Settings(leases_file=leases_file, sudo_cmd=None)


@pytest.fixture
def route_client():
    return FakeRouteClient(alternate=["10.0.0.5"])


@pytest.fixture
def client(settings, route_client):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_route_client] = lambda: route_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def routes_tool(tmp_path):
    """Shell stand-in for the route tool, logging each invocation to calls.log"""
    script = tmp_path / "routesrules"
    script.write_text(
        "#!/bin/sh\n"
        'echo "$@" >> "$(dirname "$0")/calls.log"\n'
        'if [ "$1" = show ]; then echo "[]"; fi\n'
    )
    script.chmod(0o755)
    return script


@pytest.fixture
def tool_client(leases_file, routes_tool):
    """App client backed by the real RouteClient running routes_tool"""
    settings = Settings(leases_file=leases_file, routes_cmd=str(routes_tool), sudo_cmd=None)
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
