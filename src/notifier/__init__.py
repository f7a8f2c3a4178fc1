"""
OTUN - Notifier Package
"""

from notifier.errors import (
    OtunError,
    NotSupportedError,
    PreCheckFailedError,
    UpdateCheckFailedError,
    MissingDependencyError,
    ConfigError,
    PrefixPathError,
)
from notifier.runner import CommandResult, ShellCommandRunner
from notifier.engine import UpdateCheckEngine
from notifier.chunker import Chunk, chunk_message
from notifier.notifications import (
    TelegramCredentials,
    DispatchOutcome,
    NotificationDispatcher,
)
from notifier.sysinfo import SystemInfo, gather_system_info
from notifier.report import compose_report, render_body
from notifier.progress import ProgressReporter

__all__ = [
    "OtunError",
    "NotSupportedError",
    "PreCheckFailedError",
    "UpdateCheckFailedError",
    "MissingDependencyError",
    "ConfigError",
    "PrefixPathError",
    "CommandResult",
    "ShellCommandRunner",
    "UpdateCheckEngine",
    "Chunk",
    "chunk_message",
    "TelegramCredentials",
    "DispatchOutcome",
    "NotificationDispatcher",
    "SystemInfo",
    "gather_system_info",
    "compose_report",
    "render_body",
    "ProgressReporter",
]
