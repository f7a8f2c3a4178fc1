"""
Tests for notifier.report and notifier.sysinfo — report body composition.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import unittest
from unittest import mock

import requests

from distros.base import UpdateResult
from notifier.report import UP_TO_DATE_LINE, compose_report, render_body, summary_line
from notifier.runner import CommandResult
from notifier.sysinfo import SystemInfo, fetch_public_ip, gather_system_info


def _info(**kwargs):
    defaults = dict(
        hostname="box",
        os_description="Debian GNU/Linux 12 (bookworm)",
        os_release="12",
        architecture="x86_64",
        public_ip="203.0.113.7",
    )
    defaults.update(kwargs)
    return SystemInfo(**defaults)


class TestSummaryLine(unittest.TestCase):
    """Tests for summary_line() pluralization."""

    def test_one(self):
        self.assertEqual(summary_line(1), "There is 1 update available:")

    def test_five(self):
        self.assertEqual(summary_line(5), "There are 5 updates available:")


class TestComposeReport(unittest.TestCase):
    """Tests for compose_report()."""

    def test_up_to_date(self):
        lines = compose_report(_info(), UpdateResult())
        self.assertEqual(lines, [
            "HOSTNAME: box",
            "OS: Debian GNU/Linux 12 (bookworm) (x86_64)",
            "IP: 203.0.113.7",
            "",
            UP_TO_DATE_LINE,
        ])

    def test_single_update(self):
        result = UpdateResult.from_output("vim 9.0 -> 9.1\n")
        lines = compose_report(_info(), result)
        self.assertEqual(lines[4], "There is 1 update available:")
        self.assertEqual(lines[5:], ["vim 9.0 -> 9.1"])

    def test_many_updates_verbatim(self):
        output = "".join(f"pkg{i} 1.{i} -> 2.{i}\n" for i in range(5))
        lines = compose_report(_info(), UpdateResult.from_output(output))
        self.assertEqual(lines[4], "There are 5 updates available:")
        self.assertEqual(lines[5:], output.splitlines())

    def test_deterministic(self):
        result = UpdateResult.from_output("a 1 -> 2\n")
        self.assertEqual(compose_report(_info(), result), compose_report(_info(), result))

    def test_render_body(self):
        self.assertEqual(render_body(["a", "", "b"]), "a\n\nb")


class TestSystemInfo(unittest.TestCase):
    """Tests for SystemInfo and its gathering."""

    def test_os_name_release_already_in_description(self):
        self.assertEqual(_info().os_name, "Debian GNU/Linux 12 (bookworm)")

    def test_os_name_appends_release(self):
        info = _info(os_description="Arch Linux", os_release="rolling")
        self.assertEqual(info.os_name, "Arch Linux rolling")

    def test_os_name_empty_release(self):
        info = _info(os_description="Gentoo", os_release="")
        self.assertEqual(info.os_name, "Gentoo")

    def test_public_ip_failure_is_unknown(self):
        session = mock.Mock()
        session.get.side_effect = requests.ConnectionError("offline")
        self.assertEqual(fetch_public_ip(session), "unknown")

    def test_public_ip_stripped(self):
        session = mock.Mock()
        session.get.return_value.text = "198.51.100.1\n"
        self.assertEqual(fetch_public_ip(session), "198.51.100.1")

    @mock.patch("notifier.sysinfo.platform.machine", return_value="aarch64")
    @mock.patch("notifier.sysinfo.socket.gethostname", return_value="pi")
    def test_gather(self, _hostname, _machine):
        outputs = {
            "lsb_release -s -d": '"Fedora Linux 39"\n',
            "lsb_release -s -r": "39\n",
        }
        runner = mock.Mock()
        runner.run.side_effect = lambda cmd: CommandResult(cmd, 0, outputs[cmd])
        session = mock.Mock()
        session.get.return_value.text = "192.0.2.4"

        info = gather_system_info(runner, session)

        self.assertEqual(info.hostname, "pi")
        self.assertEqual(info.os_description, "Fedora Linux 39")
        self.assertEqual(info.os_release, "39")
        self.assertEqual(info.architecture, "aarch64")
        self.assertEqual(info.public_ip, "192.0.2.4")


if __name__ == "__main__":
    unittest.main()
