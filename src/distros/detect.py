"""
OTUN - Distro Detection
Finds the distribution family from os-release metadata.
"""

import logging
from pathlib import Path
from typing import Optional

from distros.profiles import supported_families
from notifier.errors import NotSupportedError

logger = logging.getLogger(__name__)


OS_RELEASE = Path("etc") / "os-release"


def parse_os_release(text: str) -> dict[str, str]:
    """Parse KEY=value lines of an os-release file."""
    values = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip().strip('"').strip("'")
    return values


def detect_family(prefix: Optional[Path] = None) -> str:
    """
    Detect the distribution family of the host.

    ID_LIKE wins over ID. When ID_LIKE lists several identifiers
    (e.g., "ubuntu debian") the last one is the family.

    Args:
        prefix: Root of the system to inspect. Defaults to "/".

    Returns:
        Lowercase family identifier, not yet validated against the profiles.

    Raises:
        NotSupportedError: If no identifier can be read.
    """
    path = (prefix or Path("/")) / OS_RELEASE
    try:
        values = parse_os_release(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        raise NotSupportedError("", supported_families()) from e

    id_like = values.get("ID_LIKE", "").split()
    family = id_like[-1] if id_like else values.get("ID", "")
    family = family.lower()
    if not family:
        raise NotSupportedError(family, supported_families())

    logger.info(f"Detected distro family '{family}' from {path}")
    return family
