"""
Configuration management for the Host Routes panel
"""
import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

CONFIG_ENV_VAR = "HOSTROUTES_CONFIG"
DEFAULT_CONFIG_FILE = Path("/etc/hostroutes/config.json")


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    leases_file: Path = Path("/var/lib/misc/dnsmasq.leases")
    routes_cmd: str = "/usr/local/share/routes/bin/routesrules"
    sudo_cmd: Optional[str] = "/usr/bin/sudo"
    command_timeout: Optional[float] = Field(default=None, gt=0)
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


def config_path() -> Path:
    """Config file location, overridable through HOSTROUTES_CONFIG"""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config(path: Path) -> Settings:
    """Load settings from a JSON file, falling back to defaults when it is absent"""
    if not path.exists():
        return Settings()
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

    try:
        return Settings.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Invalid config file {path}:\n{e}") from e


@lru_cache
def get_settings() -> Settings:
    return load_config(config_path())
