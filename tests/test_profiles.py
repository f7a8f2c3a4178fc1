"""
Tests for distros.profiles — family to profile resolution.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import unittest
from distros.profiles import PROFILES, resolve_profile, supported_families
from notifier.errors import NotSupportedError


class TestResolveProfile(unittest.TestCase):
    """Tests for resolve_profile()."""

    def test_all_families_resolve(self):
        for family in ("arch", "debian", "gentoo", "rhel", "suse"):
            with self.subTest(family=family):
                self.assertEqual(resolve_profile(family).family_id, family)

    def test_case_insensitive(self):
        self.assertIs(resolve_profile("Debian"), resolve_profile("debian"))
        self.assertIs(resolve_profile("ARCH"), PROFILES["arch"])

    def test_deterministic(self):
        self.assertIs(resolve_profile("gentoo"), resolve_profile("gentoo"))

    def test_aliases(self):
        self.assertEqual(resolve_profile("fedora").family_id, "rhel")
        self.assertEqual(resolve_profile("centos").family_id, "rhel")
        self.assertEqual(resolve_profile("opensuse").family_id, "suse")

    def test_unknown_family(self):
        with self.assertRaises(NotSupportedError) as ctx:
            resolve_profile("slackware")
        self.assertEqual(ctx.exception.family, "slackware")
        self.assertIn("debian", ctx.exception.guidance)

    def test_empty_family(self):
        with self.assertRaises(NotSupportedError):
            resolve_profile("")

    def test_partial_name_not_matched(self):
        with self.assertRaises(NotSupportedError):
            resolve_profile("deb")


class TestProfileTable(unittest.TestCase):
    """Tests for the built-in profile table."""

    def test_supported_families_sorted(self):
        self.assertEqual(supported_families(), ["arch", "debian", "gentoo", "rhel", "suse"])

    def test_pre_check_only_where_index_refresh_needed(self):
        with_pre_check = {f for f, p in PROFILES.items() if p.has_pre_check}
        self.assertEqual(with_pre_check, {"gentoo", "rhel"})

    def test_update_check_always_present(self):
        for profile in PROFILES.values():
            self.assertTrue(profile.update_check_command)

    def test_gentoo_format_keeps_literal_newline_escape(self):
        self.assertIn(r"\n'", PROFILES["gentoo"].update_check_command)

    def test_debian_dependencies(self):
        self.assertEqual(PROFILES["debian"].required_dependencies, frozenset({"aptitude"}))


if __name__ == "__main__":
    unittest.main()
