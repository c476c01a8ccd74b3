"""
Errors raised while serving host route requests
"""


class HostRoutesError(Exception):
    """Base class for panel errors"""


class LeaseFileError(HostRoutesError):
    """The lease file exists but could not be read"""


class RouteCommandError(HostRoutesError):
    """The route tool exited non-zero, could not start, or printed bad output"""


class InvalidAddressError(HostRoutesError, ValueError):
    """An IP address was rejected before reaching the route tool"""


class HostNotFoundError(HostRoutesError):
    """The IP has no lease"""

    def __init__(self, ip: str):
        super().__init__(f"No lease for {ip}")
        self.ip = ip
