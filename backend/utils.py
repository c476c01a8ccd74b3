"""
System command utilities for the Host Routes panel
"""
import asyncio
import logging
from typing import List, Optional, Tuple

logger = logging.getLogger("uvicorn")


async def run_command(
    cmd: List[str],
    sudo_cmd: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Tuple[bool, str]:
    """
    Execute a system command without blocking the event loop

    Args:
        cmd: Command and arguments as list
        sudo_cmd: Privilege wrapper to prepend to the command, if any
        timeout: Seconds to wait before killing the command (None waits forever)

    Returns:
        Tuple of (success: bool, output: str). On success the output is
        stdout, otherwise stderr or a description of the failure.
    """
    if sudo_cmd:
        cmd = [sudo_cmd] + cmd

    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        return False, f"failed to start {cmd[0]}: {e}"

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        return False, f"{cmd[0]} timed out after {timeout}s"

    if proc.returncode != 0:
        err = stderr.decode(errors="replace").strip()
        return False, err or f"{cmd[0]} exited with status {proc.returncode}"
    return True, stdout.decode(errors="replace")
