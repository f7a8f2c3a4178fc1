"""
OTUN - Distro Profiles
Built-in table of update check procedures, one per distribution family.
"""

import logging

from distros.base import DistroProfile
from notifier.errors import NotSupportedError

logger = logging.getLogger(__name__)


# Tools the family commands and the system info gathering shell out to
BASELINE_DEPENDENCIES = ("awk", "head", "lsb_release", "sed", "tr")


PROFILES: dict[str, DistroProfile] = {
    "arch": DistroProfile(
        family_id="arch",
        update_check_command="checkupdates & pacman -Qm | aur vercmp & wait",
        required_dependencies=frozenset({"aur", "checkupdates", "pacman"}),
    ),
    "debian": DistroProfile(
        family_id="debian",
        update_check_command="aptitude search '~U' -F '%p %v -> %V' | tr -s ' '",
        required_dependencies=frozenset({"aptitude"}),
    ),
    "gentoo": DistroProfile(
        family_id="gentoo",
        pre_check_command=(
            "emerge-webrsync -q >/dev/null 2>&1 && eix-update -q >/dev/null 2>&1"
        ),
        update_check_command=(
            r'NAMEVERSION="<category>/<name> <version>" INSTFORMAT="{last}<version>" '
            r"eix --upgrade --format '<installedversions:NAMEVERSION> -> "
            r"<bestslotupgradeversions:INSTFORMAT>\n' | head -n -1"
        ),
        required_dependencies=frozenset({"eix", "emerge-webrsync"}),
    ),
    "rhel": DistroProfile(
        family_id="rhel",
        # dnf check-update exits with 100 when updates are available
        pre_check_command=(
            "dnf list --installed > installed_packages.txt && "
            "dnf check-update > available_packages.txt"
        ),
        update_check_command=(
            "awk 'NR==FNR{a[$1]=$2;next} $1 in a{print $1, a[$1], \"->\", $2}' "
            "installed_packages.txt available_packages.txt"
        ),
        required_dependencies=frozenset({"dnf"}),
    ),
    "suse": DistroProfile(
        family_id="suse",
        update_check_command=(
            r"zypper list-updates | sed '1,/^Reading installed packages...$/d' | sed '1,2d' | "
            r"sed -n 's/.*| \([^ ]*\) *| \([^ ]*\) *| \([^ ]*\) *| [^|]*$/\1 \2 -> \3/p'"
        ),
        required_dependencies=frozenset({"zypper"}),
    ),
}

# Distro identifiers that share a family procedure
ALIASES = {
    "centos": "rhel",
    "fedora": "rhel",
    "opensuse": "suse",
}


def supported_families() -> list[str]:
    """Get the canonical family identifiers, sorted."""
    return sorted(PROFILES)


def resolve_profile(family_id: str) -> DistroProfile:
    """
    Resolve a distribution family to its update check profile.

    Args:
        family_id: Family or distro identifier, any case (e.g., "Debian", "fedora").

    Returns:
        The DistroProfile for the family.

    Raises:
        NotSupportedError: If the identifier is not in the table.
    """
    key = (family_id or "").strip().lower()
    key = ALIASES.get(key, key)
    profile = PROFILES.get(key)
    if profile is None:
        raise NotSupportedError(family_id, supported_families())
    logger.debug(f"Resolved '{family_id}' to family '{profile.family_id}'")
    return profile
