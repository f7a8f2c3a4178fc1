"""
OTUN - Update Check Engine
Runs a distro profile's two-phase update check and classifies the outcome.
"""

import logging

from distros.base import DistroProfile, UpdateResult
from notifier.errors import PreCheckFailedError, UpdateCheckFailedError
from notifier.runner import ShellCommandRunner

logger = logging.getLogger(__name__)


# Some package managers exit with 100 to say "ran fine" (e.g., dnf check-update)
PRE_CHECK_OK_STATUSES = frozenset({0, 100})

# Shell statuses for "command not executable" and "command not found"
SHELL_CANNOT_EXECUTE = frozenset({126, 127})


class UpdateCheckEngine:
    """
    Executes the pre-check and update-check commands of a profile.

    The engine only splits the update-check output into lines; each profile
    command is responsible for printing "name old -> new" itself.
    """

    def __init__(self, runner=None):
        """
        Initialize the engine.

        Args:
            runner: Object with a run(command) -> CommandResult method.
                    Defaults to a ShellCommandRunner in the current directory.
        """
        self.runner = runner or ShellCommandRunner()

    def run(self, profile: DistroProfile) -> UpdateResult:
        """
        Check for updates with the given profile.

        Args:
            profile: The distro profile to run.

        Returns:
            UpdateResult with one line per upgradable package.

        Raises:
            PreCheckFailedError: If the pre-check cannot run or exits with an
                                 unexpected status.
            UpdateCheckFailedError: If the update-check command cannot run.
        """
        if profile.has_pre_check:
            self._run_pre_check(profile.pre_check_command)

        command = profile.update_check_command
        try:
            result = self.runner.run(command)
        except OSError as e:
            logger.error(f"Could not run update check '{command}': {e}")
            raise UpdateCheckFailedError(command, None) from e

        # Exit status is not trusted here: some tools exit non-zero when updates exist
        if result.exit_status in SHELL_CANNOT_EXECUTE and not result.stdout.strip():
            logger.error(f"Update check could not be executed: {result.stderr.strip()}")
            raise UpdateCheckFailedError(command, result.exit_status)

        updates = UpdateResult.from_output(result.stdout)
        logger.info(
            f"Update check for {profile.family_id} found {updates.count} update(s) "
            f"(exit status {result.exit_status})"
        )
        return updates

    def _run_pre_check(self, command: str) -> None:
        """Run the pre-check command, failing the run on unexpected statuses."""
        try:
            result = self.runner.run(command)
        except OSError as e:
            logger.error(f"Could not run pre-check '{command}': {e}")
            raise PreCheckFailedError(command, None) from e

        if result.exit_status not in PRE_CHECK_OK_STATUSES:
            logger.error(f"Pre-check '{command}' failed with exit status {result.exit_status}")
            raise PreCheckFailedError(command, result.exit_status)
        logger.info(f"Pre-check finished with exit status {result.exit_status}")
