"""
OTUN - Distros Package
"""

from distros.base import DistroProfile, UpdateResult
from distros.profiles import (
    ALIASES,
    BASELINE_DEPENDENCIES,
    PROFILES,
    resolve_profile,
    supported_families,
)
from distros.detect import detect_family

__all__ = [
    "DistroProfile",
    "UpdateResult",
    "ALIASES",
    "BASELINE_DEPENDENCIES",
    "PROFILES",
    "resolve_profile",
    "supported_families",
    "detect_family",
]
