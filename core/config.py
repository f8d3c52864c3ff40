"""
Configuration management for addic7ed subtitle downloads.
"""

import configparser
import logging
import logging.handlers
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from core.languages import DEFAULT_COMPATIBILITY_720P, DEFAULT_LANGUAGE
from core.subtitle import FEATURED_VIA
from core.version import normalize_version

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://www.addic7ed.com"


@dataclass(frozen=True)
class Config:
    """Settings shared by every file of a run. Read-only once loaded."""

    base_url: str = DEFAULT_BASE_URL
    featured_via: str = FEATURED_VIA
    timeout: float = 30
    language: str = DEFAULT_LANGUAGE
    extension: str = ".srt"
    compatibility: Mapping[str, str] = field(
        default_factory=lambda: DEFAULT_COMPATIBILITY_720P
    )
    log_level: str = "WARNING"
    log_file: str = "addic7ed.log"


def get_config_dir() -> Path:
    return Path.home() / ".config" / "addic7ed-subtitles"


def load_config() -> Config:
    """
    Load configuration from config file.

    A default file is written on first run; its values are usable as-is.

    Returns:
        Configuration object
    """
    config_dir = get_config_dir()
    config_file = config_dir / "config.cfg"

    config_dir.mkdir(parents=True, exist_ok=True)

    if not config_file.exists():
        create_default_config(config_file)
        logger.info(f"Created default config file at: {config_file}")

    config = configparser.ConfigParser()
    try:
        config.read(config_file, encoding="utf-8")

        if config.has_section("compatibility"):
            compatibility = {
                normalize_version(sd_group): normalize_version(hd_group)
                for sd_group, hd_group in config.items("compatibility")
            }
        else:
            compatibility = dict(DEFAULT_COMPATIBILITY_720P)

        loaded = Config(
            base_url=config.get(
                "addic7ed", "base_url", fallback=DEFAULT_BASE_URL
            ).rstrip("/"),
            featured_via=config.get("addic7ed", "featured_via", fallback=FEATURED_VIA),
            timeout=config.getfloat("addic7ed", "timeout", fallback=30),
            language=config.get("subtitles", "language", fallback=DEFAULT_LANGUAGE),
            extension=config.get("subtitles", "extension", fallback=".srt"),
            compatibility=MappingProxyType(compatibility),
            log_level=config.get("logging", "level", fallback="WARNING"),
            log_file=str(
                Path(
                    config.get(
                        "logging", "file", fallback=str(config_dir / "addic7ed.log")
                    )
                ).expanduser()
            ),
        )

        logger.info(f"Configuration loaded from: {config_file}")
        return loaded

    except (configparser.Error, ValueError) as e:
        print(f"Error loading configuration: {e}")
        sys.exit(1)


def create_default_config(config_file: Path):
    """Create a default configuration file."""
    log_file = config_file.parent / "addic7ed.log"

    with open(config_file, "w", encoding="utf-8") as f:
        f.write("# addic7ed subtitles configuration\n")
        f.write("# Edit this file to change the defaults\n\n")

        f.write("[addic7ed]\n")
        f.write(f"base_url = {DEFAULT_BASE_URL}\n")
        f.write("# Subtitles attributed to this host are always preferred\n")
        f.write(f"featured_via = {FEATURED_VIA}\n")
        f.write("timeout = 30\n\n")

        f.write("[subtitles]\n")
        f.write("# Language code, see --list-languages\n")
        f.write(f"language = {DEFAULT_LANGUAGE}\n")
        f.write("extension = .srt\n\n")

        f.write("[compatibility]\n")
        f.write("# SD release group = group releasing the matching 720p version\n")
        for sd_group, hd_group in DEFAULT_COMPATIBILITY_720P.items():
            f.write(f"{sd_group} = {hd_group}\n")
        f.write("\n")

        f.write("[logging]\n")
        f.write("level = WARNING\n")
        f.write(f"file = {log_file}\n")


def setup_logging(log_level: str, log_file: str):
    """
    Setup logging with a rotating log file.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Log file path
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # 10MB max, keep 5 old files
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(detailed_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(file_handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
