"""
Tests for core.config module.
"""

import configparser
import dataclasses
import logging
import logging.handlers
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from core.config import Config, create_default_config, load_config, setup_logging


class TestConfig(unittest.TestCase):
    """Test cases for configuration management."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_file = Path(self.temp_dir) / "test_config.cfg"
        self.config_dir = Path(self.temp_dir) / ".config" / "addic7ed-subtitles"

    def tearDown(self):
        """Clean up test fixtures."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_create_default_config(self):
        """Test creating a default configuration file."""
        create_default_config(self.config_file)

        self.assertTrue(self.config_file.exists())

        config = configparser.ConfigParser()
        config.read(self.config_file)

        for section in ["addic7ed", "subtitles", "compatibility", "logging"]:
            self.assertIn(section, config.sections())

        self.assertEqual(config.get("addic7ed", "base_url"), "http://www.addic7ed.com")
        self.assertEqual(config.get("addic7ed", "featured_via"), "http://addic7ed.com")
        self.assertEqual(config.get("subtitles", "language"), "fr")
        self.assertEqual(config.get("compatibility", "lol"), "DIMENSION")

    @patch("core.config.Path.home")
    def test_load_config_creates_default_when_missing(self, mock_home):
        """Test that load_config writes a default file and uses it."""
        mock_home.return_value = Path(self.temp_dir)

        result = load_config()

        self.assertTrue((self.config_dir / "config.cfg").exists())
        self.assertIsInstance(result, Config)
        self.assertEqual(result.language, "fr")
        self.assertEqual(result.extension, ".srt")
        self.assertEqual(result.base_url, "http://www.addic7ed.com")
        self.assertEqual(result.log_file, str(self.config_dir / "addic7ed.log"))

    @patch("core.config.Path.home")
    def test_load_config_success(self, mock_home):
        """Test loading a customized configuration file."""
        mock_home.return_value = Path(self.temp_dir)
        self.config_dir.mkdir(parents=True)
        with open(self.config_dir / "config.cfg", "w") as f:
            f.write(
                "[addic7ed]\n"
                "base_url = https://mirror.example.com/\n"
                "timeout = 5\n"
                "[subtitles]\n"
                "language = en\n"
                "[compatibility]\n"
                "fov = 720p.x264-killers\n"
                "[logging]\n"
                "level = DEBUG\n"
                "file = /tmp/addic7ed-test.log\n"
            )

        result = load_config()

        self.assertEqual(result.base_url, "https://mirror.example.com")
        self.assertEqual(result.timeout, 5)
        self.assertEqual(result.language, "en")
        self.assertEqual(dict(result.compatibility), {"FOV": "KILLERS"})
        self.assertEqual(result.log_level, "DEBUG")
        self.assertEqual(result.log_file, "/tmp/addic7ed-test.log")
        self.assertEqual(result.featured_via, "http://addic7ed.com")

    @patch("core.config.Path.home")
    def test_load_config_default_compatibility(self, mock_home):
        """Test the default compatibility table without a section."""
        mock_home.return_value = Path(self.temp_dir)
        self.config_dir.mkdir(parents=True)
        with open(self.config_dir / "config.cfg", "w") as f:
            f.write("[subtitles]\nlanguage = de\n")

        result = load_config()

        self.assertEqual(result.compatibility["LOL"], "DIMENSION")
        self.assertEqual(result.compatibility["ASAP"], "IMMERSE")

    @patch("core.config.Path.home")
    def test_config_is_read_only(self, mock_home):
        """Test the loaded configuration cannot be modified."""
        mock_home.return_value = Path(self.temp_dir)

        result = load_config()

        with self.assertRaises(dataclasses.FrozenInstanceError):
            result.language = "en"
        with self.assertRaises(TypeError):
            result.compatibility["NEW"] = "GROUP"

    @patch("core.config.Path.home")
    @patch("sys.exit")
    def test_load_config_handles_config_error(self, mock_exit, mock_home):
        """Test load_config handles configuration errors."""
        mock_home.return_value = Path(self.temp_dir)
        self.config_dir.mkdir(parents=True)

        with open(self.config_dir / "config.cfg", "w") as f:
            f.write("invalid config content")

        load_config()

        mock_exit.assert_called_once_with(1)

    @patch("core.config.Path.home")
    @patch("sys.exit")
    def test_load_config_handles_bad_timeout(self, mock_exit, mock_home):
        """Test load_config rejects a non numeric timeout."""
        mock_home.return_value = Path(self.temp_dir)
        self.config_dir.mkdir(parents=True)

        with open(self.config_dir / "config.cfg", "w") as f:
            f.write("[addic7ed]\ntimeout = soon\n")

        load_config()

        mock_exit.assert_called_once_with(1)

    def test_setup_logging(self):
        """Test logging setup."""
        log_file = os.path.join(self.temp_dir, "logs", "test.log")

        setup_logging("INFO", log_file)

        root_logger = logging.getLogger()
        self.assertTrue(
            any(
                isinstance(handler, logging.FileHandler)
                for handler in root_logger.handlers
            )
        )

        test_logger = logging.getLogger("test")
        test_logger.info("Test message")

        self.assertTrue(os.path.exists(log_file))
        with open(log_file, "r") as f:
            self.assertIn("Test message", f.read())

    def test_setup_logging_different_levels(self):
        """Test logging setup with different log levels."""
        setup_logging("DEBUG", os.path.join(self.temp_dir, "test_debug.log"))
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

        setup_logging("nonsense", os.path.join(self.temp_dir, "test_debug.log"))
        self.assertEqual(logging.getLogger().level, logging.WARNING)

    def test_setup_logging_suppresses_requests(self):
        """Test that requests library logging is suppressed."""
        setup_logging("DEBUG", os.path.join(self.temp_dir, "test_requests.log"))

        self.assertEqual(logging.getLogger("urllib3").level, logging.WARNING)
        self.assertEqual(logging.getLogger("requests").level, logging.WARNING)

    def test_setup_logging_rotation(self):
        """Test that log rotation is properly configured."""
        setup_logging("INFO", os.path.join(self.temp_dir, "test_rotation.log"))

        root_logger = logging.getLogger()
        self.assertEqual(len(root_logger.handlers), 1)

        handler = root_logger.handlers[0]
        self.assertIsInstance(handler, logging.handlers.RotatingFileHandler)
        self.assertEqual(handler.maxBytes, 10 * 1024 * 1024)
        self.assertEqual(handler.backupCount, 5)


if __name__ == "__main__":
    unittest.main()
