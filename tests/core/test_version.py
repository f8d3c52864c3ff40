"""
Tests for core.version module.
"""

import unittest

from core.version import is_compatible, normalize_version


class TestNormalizeVersion(unittest.TestCase):
    """Test cases for release version normalization."""

    def test_strips_noise_tokens(self):
        """Test resolution, encoder and flags are removed."""
        self.assertEqual(normalize_version("Version 720p.HDTV.x264-LOL"), "LOL")
        self.assertEqual(normalize_version("HDTV.x.264-DIMENSION"), "DIMENSION")
        self.assertEqual(normalize_version("PROPER.REPACK-KILLERS"), "REPACK-KILLERS")
        self.assertEqual(normalize_version("rerip 2HD"), "2HD")

    def test_case_insensitive(self):
        """Test noise tokens are matched whatever their case."""
        expected = "GROUP"
        self.assertEqual(normalize_version("Version 720p.PROPER-GROUP"), expected)
        self.assertEqual(normalize_version("720P.Proper-group"), expected)
        self.assertEqual(normalize_version("-GROUP-"), expected)
        self.assertEqual(normalize_version("version group"), expected)

    def test_trims_separators(self):
        """Test leading and trailing separators are trimmed."""
        self.assertEqual(normalize_version(" .-LOL-. "), "LOL")
        self.assertEqual(normalize_version("WEB-DL"), "WEB-DL")

    def test_empty_and_none(self):
        """Test absent or noise-only labels normalize to an empty string."""
        self.assertEqual(normalize_version(None), "")
        self.assertEqual(normalize_version(""), "")
        self.assertEqual(normalize_version("720p HDTV x264"), "")

    def test_idempotent(self):
        """Test normalizing twice gives the same result."""
        labels = [
            "Version 720p.HDTV.x264-LOL",
            "720P.Proper-group",
            "-GROUP-",
            "Version KILLERS, 0.00 MBs",
            "",
            None,
            "web-dl.x.264",
            "Rerip.hdtv-ASAP",
        ]
        for label in labels:
            once = normalize_version(label)
            self.assertEqual(normalize_version(once), once, label)

    def test_repeated_version_prefix(self):
        """Test only one leading "Version" is stripped per pass."""
        once = normalize_version("Version Version")

        self.assertEqual(once, "VERSION")
        self.assertEqual(normalize_version(once), "")


class TestIsCompatible(unittest.TestCase):
    """Test cases for version compatibility."""

    def setUp(self):
        """Set up test fixtures."""
        self.table = {"LOL": "DIMENSION", "XII": "IMMERSE"}

    def test_same_version(self):
        """Test equal versions are compatible."""
        self.assertTrue(is_compatible("LOL", "LOL", self.table))
        self.assertTrue(is_compatible("", "", self.table))

    def test_table_both_directions(self):
        """Test table pairs are compatible in both directions."""
        self.assertTrue(is_compatible("LOL", "DIMENSION", self.table))
        self.assertTrue(is_compatible("DIMENSION", "LOL", self.table))

    def test_unrelated_versions(self):
        """Test versions without a pair are not compatible."""
        self.assertFalse(is_compatible("LOL", "IMMERSE", self.table))
        self.assertFalse(is_compatible("", "LOL", self.table))
        self.assertFalse(is_compatible("DIMENSION", "IMMERSE", self.table))

    def test_symmetric(self):
        """Test compatibility does not depend on argument order."""
        versions = ["LOL", "DIMENSION", "XII", "IMMERSE", "KILLERS", ""]
        for version in versions:
            for other in versions:
                self.assertEqual(
                    is_compatible(version, other, self.table),
                    is_compatible(other, version, self.table),
                )

    def test_default_table(self):
        """Test the default table knows the usual pairs."""
        self.assertTrue(is_compatible("SYS", "DIMENSION"))
        self.assertTrue(is_compatible("IMMERSE", "ASAP"))


if __name__ == "__main__":
    unittest.main()
