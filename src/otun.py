#!/usr/bin/env python3
"""
OTUN (On-Telegram Updates Notifier) - Update Check Script
Checks the host for package updates and reports them via a Telegram bot.
Meant to be run on demand or from a scheduler (cron, systemd timer).
"""

import argparse
import logging
import signal
import sys
import tempfile
from pathlib import Path
from typing import Optional

import requests

from distros import BASELINE_DEPENDENCIES, detect_family, resolve_profile, supported_families
from notifier.chunker import chunk_message
from notifier.config import cache_dir, find_config, load_credentials
from notifier.dependencies import check_dependencies
from notifier.engine import UpdateCheckEngine
from notifier.errors import OtunError, PrefixPathError
from notifier.notifications import NotificationDispatcher
from notifier.progress import ProgressReporter
from notifier.report import compose_report, render_body
from notifier.runner import ShellCommandRunner
from notifier.sysinfo import gather_system_info

logger = logging.getLogger("otun")


PROGNAME = "otun (On-Telegram Updates Notifier)"
SCRIPTNAME = "otun"
__version__ = "1.0"


def setup_logging() -> None:
    """Setup logging to ~/.cache/otun/otun.log."""
    log_dir = cache_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.FileHandler(log_dir / "otun.log")],
    )


class OtunArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on invalid usage."""

    def error(self, message: str):
        self.exit(
            1,
            f"{self.prog}: {message}\n"
            f"Try '{self.prog} --help' or '{self.prog} -h' for more information.\n",
        )


def build_parser() -> argparse.ArgumentParser:
    families = ", ".join(supported_families())
    parser = OtunArgumentParser(
        prog=SCRIPTNAME,
        allow_abbrev=False,
        description=f"{PROGNAME} v{__version__}\n\n"
                    "Check for updates and notify them (if any) via Telegram bot.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c", "--config", type=Path, metavar="PATH",
        help="Telegram bot configuration file (default: telegram_config.yaml/json "
             "in the current directory or ~/.config/otun).",
    )
    parser.add_argument(
        "-d", "--distro", metavar="FAMILY",
        help=f"Linux family distro, disabling auto-detection (supported: {families}).",
    )
    parser.add_argument(
        "-p", "--prefix", type=Path, metavar="PATH",
        help="Prefix path (location) of the system to check, e.g. a local prefix.",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"{PROGNAME} {__version__}",
        help="Display script version.",
    )
    return parser


def check_prefix_path(prefix: Optional[Path]) -> Optional[Path]:
    """Validate the --prefix path."""
    if prefix is not None and not prefix.exists():
        raise PrefixPathError(prefix)
    return prefix


def report_error(error: OtunError) -> None:
    """Print a one-line failure plus corrective guidance."""
    print(f"{SCRIPTNAME}: {error.message}", file=sys.stderr)
    if error.guidance:
        print(f"\n{error.guidance}", file=sys.stderr)


def run(args: argparse.Namespace, progress: ProgressReporter) -> int:
    """
    Run the whole check and notify pipeline.

    Returns:
        Process exit status.
    """
    with tempfile.TemporaryDirectory(prefix="otun-") as workdir:
        try:
            progress.start("Checking the command-line options...")
            prefix = check_prefix_path(args.prefix)
            if args.distro is not None:
                profile = resolve_profile(args.distro)
            else:
                progress.set_label("Detecting the Linux distro/family...")
                profile = resolve_profile(detect_family(prefix))

            progress.set_label("Checking if Telegram config file (YAML/JSON) exists...")
            config_path = find_config(args.config)

            progress.set_label("Checking the required dependencies...")
            check_dependencies(set(BASELINE_DEPENDENCIES) | profile.required_dependencies)

            progress.set_label("Reading the Telegram bot configuration...")
            credentials = load_credentials(config_path)

            runner = ShellCommandRunner(cwd=Path(workdir))
            with requests.Session() as session:
                progress.set_label("Fetching the system information...")
                system_info = gather_system_info(runner, session)

                progress.set_label("Checking for updates...")
                result = UpdateCheckEngine(runner).run(profile)
                body = compose_report(system_info, result)

                progress.set_label("Sending the updates notification via Telegram...")
                NotificationDispatcher(credentials, session).dispatch(chunk_message(body))
        except OtunError as e:
            progress.stop()
            logger.error(f"Run failed: {e}")
            report_error(e)
            return 1

    progress.stop()
    print("Process completed!\n")
    print(render_body(body))
    return 0


def _terminate(signum, frame):
    """Turn SIGTERM into SystemExit so cleanup scopes unwind."""
    raise SystemExit(128 + signum)


def main(argv: Optional[list[str]] = None) -> int:
    """Check for updates and send the report."""
    args = build_parser().parse_args(argv)
    setup_logging()
    signal.signal(signal.SIGTERM, _terminate)

    with ProgressReporter() as progress:
        try:
            return run(args, progress)
        except KeyboardInterrupt:
            progress.stop()
            logger.warning("Interrupted")
            return 130
        except Exception as e:
            progress.stop()
            logger.exception("Update check failed")
            print(f"{SCRIPTNAME}: unexpected error: {e}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
