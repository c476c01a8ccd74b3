"""
Data models for the Host Routes panel
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Route(str, Enum):
    """Network path a host's traffic takes"""
    ALTERNATE = "usa"
    PRIMARY = "can"

    @classmethod
    def from_form(cls, value: Optional[str]) -> "Route":
        # Anything but the alternate label means the primary path
        return cls.ALTERNATE if value == cls.ALTERNATE.value else cls.PRIMARY


class LeaseRecord(BaseModel):
    model_config = {"frozen": True}

    ip: str
    mac: Optional[str] = None
    hostname: Optional[str] = None


class HostView(BaseModel):
    url: str
    ip: str
    mac: Optional[str] = None
    hostname: Optional[str] = None
    route: Route
