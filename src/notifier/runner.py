"""
OTUN - Command Runner
Runs shell command strings and captures their output.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Result of running a shell command."""
    command: str
    exit_status: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.exit_status == 0


class ShellCommandRunner:
    """Runs profile commands through the shell, pipelines and redirections included."""

    def __init__(self, cwd: Optional[Path] = None):
        """
        Initialize the runner.

        Args:
            cwd: Working directory for every command. Commands that write
                 scratch files (e.g., the rhel family) write them here.
        """
        self.cwd = cwd

    def run(self, command: str) -> CommandResult:
        """
        Run a command and wait for it to finish.

        Args:
            command: Shell command string.

        Returns:
            CommandResult with captured stdout/stderr and the exit status.

        Raises:
            OSError: If the shell itself cannot be started.
        """
        logger.debug(f"Running: {command}")
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            cwd=self.cwd,
            env={**os.environ, "LC_ALL": "C"},
        )
        if result.returncode != 0:
            logger.debug(f"'{command}' exited with {result.returncode}: {result.stderr.strip()}")
        return CommandResult(
            command=command,
            exit_status=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
