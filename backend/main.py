"""
Host Routes - Main Web Server

A FastAPI-based control panel listing dnsmasq DHCP leases and switching
each host between the primary and alternate network path.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

# Import route handlers
import host_routes
import page_routes
from errors import HostNotFoundError, InvalidAddressError, LeaseFileError, RouteCommandError

logger = logging.getLogger("uvicorn")

# Create FastAPI app
app = FastAPI(
    title="Host Routes",
    version="1.0.0",
    description="View DHCP leases and choose which hosts use the alternate route"
)


@app.exception_handler(HostNotFoundError)
async def host_not_found_handler(request: Request, exc: HostNotFoundError):
    return PlainTextResponse("Not found", status_code=404)


@app.exception_handler(InvalidAddressError)
async def invalid_address_handler(request: Request, exc: InvalidAddressError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse({"detail": str(exc)}, status_code=400)


@app.exception_handler(LeaseFileError)
async def lease_file_handler(request: Request, exc: LeaseFileError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse({"detail": str(exc)}, status_code=500)


@app.exception_handler(RouteCommandError)
async def route_command_handler(request: Request, exc: RouteCommandError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse({"detail": f"Upstream command failed: {exc}"}, status_code=502)


# Include routers
app.include_router(page_routes.router, tags=["Pages"])
app.include_router(host_routes.router, tags=["Hosts"])


if __name__ == "__main__":
    import uvicorn
    from config_manager import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, proxy_headers=True)
