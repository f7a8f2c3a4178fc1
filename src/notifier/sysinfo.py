"""
OTUN - System Information
Gathers the host identity shown at the top of every report.
"""

import logging
import platform
import socket
from dataclasses import dataclass
from typing import Optional

import requests

from notifier.notifications import HTTP_TIMEOUT
from notifier.runner import ShellCommandRunner

logger = logging.getLogger(__name__)


PUBLIC_IP_URL = "https://ifconfig.me"


@dataclass(frozen=True)
class SystemInfo:
    """Identity of the checked host."""
    hostname: str
    os_description: str
    os_release: str
    architecture: str
    public_ip: str

    @property
    def os_name(self) -> str:
        """Description plus release, unless the description already has it."""
        if not self.os_release or self.os_release in self.os_description:
            return self.os_description
        return f"{self.os_description} {self.os_release}"


def _lsb_release(runner, flag: str) -> str:
    """Read one field from lsb_release, stripped of quotes and whitespace."""
    result = runner.run(f"lsb_release -s {flag}")
    if not result.success:
        logger.warning(f"lsb_release {flag} exited with {result.exit_status}")
    return result.stdout.replace("\n", "").replace('"', "").strip()


def fetch_public_ip(session: Optional[requests.Session] = None) -> str:
    """
    Look up the public IP address of the host.

    Returns:
        The address, or "unknown" if the lookup fails.
    """
    session = session or requests.Session()
    try:
        response = session.get(PUBLIC_IP_URL, timeout=HTTP_TIMEOUT)
        response.raise_for_status()
        return response.text.strip() or "unknown"
    except requests.RequestException as e:
        logger.warning(f"Failed to fetch public IP: {e}")
        return "unknown"


def gather_system_info(runner=None, session: Optional[requests.Session] = None) -> SystemInfo:
    """
    Gather hostname, OS, architecture and public IP.

    Args:
        runner: Command runner used for lsb_release.
        session: HTTP session used for the public IP lookup.
    """
    runner = runner or ShellCommandRunner()
    info = SystemInfo(
        hostname=socket.gethostname(),
        os_description=_lsb_release(runner, "-d"),
        os_release=_lsb_release(runner, "-r").replace(" ", ""),
        architecture=platform.machine(),
        public_ip=fetch_public_ip(session),
    )
    logger.info(f"System: {info.hostname}, {info.os_name} ({info.architecture})")
    return info
