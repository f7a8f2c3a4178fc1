"""
OTUN - Report Composer
Builds the notification text from the system identity and the update result.
"""

from distros.base import UpdateResult
from notifier.sysinfo import SystemInfo


UP_TO_DATE_LINE = "No updates were found. This system is up to date."


def summary_line(count: int) -> str:
    """Get the "updates available" line with correct pluralization."""
    if count == 1:
        return "There is 1 update available:"
    return f"There are {count} updates available:"


def compose_report(system_info: SystemInfo, result: UpdateResult) -> list[str]:
    """
    Compose the report body.

    Args:
        system_info: Identity of the checked host.
        result: Outcome of the update check.

    Returns:
        Report lines, in order: host identity, a blank separator, then
        either the up-to-date line or the summary and every update line.
    """
    lines = [
        f"HOSTNAME: {system_info.hostname}",
        f"OS: {system_info.os_name} ({system_info.architecture})",
        f"IP: {system_info.public_ip}",
        "",
    ]
    if not result.found:
        lines.append(UP_TO_DATE_LINE)
        return lines

    lines.append(summary_line(result.count))
    lines.extend(result.lines)
    return lines


def render_body(lines: list[str]) -> str:
    """Join report lines into the text sent and printed."""
    return "\n".join(lines)
