"""
OTUN - Distro Base
Records shared by the distro profiles and the update check engine.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class DistroProfile:
    """How to check for updates on one distribution family."""
    family_id: str                              # Canonical family (e.g., "debian")
    update_check_command: str                   # Prints one "name old -> new" line per update
    pre_check_command: Optional[str] = None     # Refreshes the package index first
    required_dependencies: frozenset[str] = field(default_factory=frozenset)

    @property
    def has_pre_check(self) -> bool:
        """Check if the package index must be refreshed before querying."""
        return self.pre_check_command is not None


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of an update check."""
    lines: tuple[str, ...] = ()
    count: int = 0

    @property
    def found(self) -> bool:
        """Check if any update is available."""
        return self.count > 0

    @classmethod
    def from_output(cls, output: str) -> "UpdateResult":
        """
        Build a result from the captured output of an update-check command.

        Args:
            output: Raw stdout, one upgradable package per line.

        Returns:
            UpdateResult with every line kept in its original order.
        """
        # Trailing line breaks carry no package, same as shell command substitution
        text = output.rstrip("\n")
        if not text:
            return cls()
        lines = tuple(text.split("\n"))
        return cls(lines=lines, count=len(lines))
