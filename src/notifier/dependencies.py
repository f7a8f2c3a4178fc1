"""
OTUN - Dependency Check
Verifies the external commands a run needs are installed.
"""

import logging
import shutil
from typing import Iterable

from notifier.errors import MissingDependencyError

logger = logging.getLogger(__name__)


def missing_dependencies(names: Iterable[str]) -> list[str]:
    """Get the commands not found on PATH, sorted."""
    return sorted({name for name in names if shutil.which(name) is None})


def check_dependencies(names: Iterable[str]) -> None:
    """
    Check that every command is available.

    Raises:
        MissingDependencyError: Listing all missing commands at once.
    """
    names = set(names)
    missing = missing_dependencies(names)
    if missing:
        logger.error(f"Missing dependencies: {', '.join(missing)}")
        raise MissingDependencyError(missing)
    logger.info(f"All {len(names)} dependencies found")
