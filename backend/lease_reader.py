"""
dnsmasq lease file reading

Each line of the lease file looks like::

    <expiry> <mac> <ip> <hostname> <client-id>

and is split on single spaces. Only the ip, mac and hostname columns are used.
"""
import logging
from pathlib import Path
from typing import Dict

from errors import LeaseFileError
from models import LeaseRecord

logger = logging.getLogger("uvicorn")

MAC_FIELD = 1
IP_FIELD = 2
HOSTNAME_FIELD = 3


def parse_leases(contents: str) -> Dict[str, LeaseRecord]:
    """Map each leased IP to its record, later lines replacing earlier ones"""
    leases: Dict[str, LeaseRecord] = {}
    for line in contents.splitlines():
        parts = line.split(' ')
        if len(parts) <= IP_FIELD:
            continue
        ip = parts[IP_FIELD]
        leases[ip] = LeaseRecord(
            ip=ip,
            mac=parts[MAC_FIELD],
            hostname=parts[HOSTNAME_FIELD] if len(parts) > HOSTNAME_FIELD else None,
        )
    return leases


def read_leases(leases_file: Path) -> Dict[str, LeaseRecord]:
    """Read and parse the lease file; a missing file means no hosts are known"""
    try:
        contents = leases_file.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning(f"Lease file {leases_file} not found, no hosts known")
        return {}
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read lease file {leases_file}: {e}")
        raise LeaseFileError(f"Failed to read lease file {leases_file}: {e}") from e

    return parse_leases(contents)
