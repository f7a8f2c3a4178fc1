"""
OTUN - Errors
Fatal failures of a run. Each one knows how to explain itself to the operator.
"""

from pathlib import Path
from typing import Iterable, Optional


class OtunError(Exception):
    """Base class for failures that stop the run with exit status 1."""

    def __init__(self, message: str, guidance: str = ""):
        super().__init__(message)
        self.message = message
        self.guidance = guidance

    def __str__(self) -> str:
        return self.message


class NotSupportedError(OtunError):
    """The distribution family is unknown or not (yet) supported."""

    def __init__(self, family: str, supported: Iterable[str] = ()):
        self.family = family
        self.supported = tuple(supported)
        choices = ", ".join(self.supported)
        super().__init__(
            f"the distro '{family}' is not (yet) supported.",
            f"The possible distro/family values are {choices}.\n"
            "Make sure your distro or distro family is specified on /etc/os-release "
            "via ID_LIKE or ID variables,\n"
            "or specify it manually via the --distro or -d parameter.",
        )


class PreCheckFailedError(OtunError):
    """The pre-check command could not run or exited with an unexpected status."""

    def __init__(self, command: str, exit_status: Optional[int]):
        self.command = command
        self.exit_status = exit_status
        super().__init__(
            f"something went wrong running '{command}' (exit status {exit_status}).",
            "Ensure this pre-update check command runs to be able to check for updates.",
        )


class UpdateCheckFailedError(OtunError):
    """The update-check command could not be invoked."""

    def __init__(self, command: str, exit_status: Optional[int]):
        self.command = command
        self.exit_status = exit_status
        super().__init__(
            f"could not run the updates check command '{command}' (exit status {exit_status}).",
            "Ensure the package manager tools of your distro are installed and runnable.",
        )


class MissingDependencyError(OtunError):
    """One or more required external commands are absent."""

    def __init__(self, missing: Iterable[str]):
        self.missing = sorted(set(missing))
        super().__init__(
            "to run this script, you need the following commands/dependencies:",
            " ".join(self.missing),
        )


SAMPLE_CONFIG = """telegram_config.yaml
====================
bot_token: "yourtoken"
chat_id: "-yourchatid"

telegram_config.json
====================
{
    "bot_token": "yourtoken",
    "chat_id": "-yourchatid"
}"""


class ConfigError(OtunError):
    """The Telegram bot configuration is missing or unusable."""

    def __init__(self, path: Optional[Path], reason: str):
        self.path = path
        self.reason = reason
        if path is None:
            message = f"no config file (telegram_config.yaml/json) was found: {reason}"
        else:
            message = f"invalid config file '{path}': {reason}"
        super().__init__(
            message,
            "Make sure you have your telegram bot config file with the following content:\n\n"
            + SAMPLE_CONFIG,
        )


class PrefixPathError(OtunError):
    """The --prefix path does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"the specified prefix path '{path}' does not exist.",
            "Ensure the specified prefix path exists to be able to run the script.",
        )
