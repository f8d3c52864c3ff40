"""
Release version normalization and compatibility checks.
"""

import re
from typing import Mapping, Optional

from core.languages import DEFAULT_COMPATIBILITY_720P

# Applied in order, each on the output of the previous one. A single pass, so
# a label made of the prefix twice ("Version Version") keeps one "VERSION".
_VERSION_CLEANUPS = (
    re.compile(r"^Version *", re.IGNORECASE),
    re.compile(r"720p", re.IGNORECASE),
    re.compile(r"hdtv", re.IGNORECASE),
    re.compile(r"proper", re.IGNORECASE),
    re.compile(r"rerip", re.IGNORECASE),
    re.compile(r"x\.?264", re.IGNORECASE),
    re.compile(r"^[- .]*"),
    re.compile(r"[- .]*$"),
)


def normalize_version(raw: Optional[str]) -> str:
    """
    Turn a free-text release label into a comparable token.

    Encoder tags, resolution/HDTV markers and proper/rerip flags are dropped,
    surrounding separators trimmed and the rest upper-cased, so that
    "Version 720p.HDTV.x264-LOL" becomes "LOL".

    Args:
        raw: Version label as scraped, may be None

    Returns:
        Normalized version, possibly empty
    """
    version = raw or ""
    for pattern in _VERSION_CLEANUPS:
        version = pattern.sub("", version)
    return version.upper()


def is_compatible(
    version: str,
    other_version: str,
    compatibility: Mapping[str, str] = DEFAULT_COMPATIBILITY_720P,
) -> bool:
    """
    Check whether two normalized versions share the same timing.

    Args:
        version: Normalized version
        other_version: Normalized version to compare with
        compatibility: SD group -> 720p group table, looked up both ways

    Returns:
        True if a subtitle for one fits the other
    """
    return (
        version == other_version
        or compatibility.get(version) == other_version
        or compatibility.get(other_version) == version
    )
