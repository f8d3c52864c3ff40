"""
Subtitle candidates and the rules used to pick the best one.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Union

from core.languages import DEFAULT_COMPATIBILITY_720P
from core.version import is_compatible, normalize_version

logger = logging.getLogger(__name__)

COMPLETED = "Completed"
FEATURED_VIA = "http://addic7ed.com"


class Subtitle:
    """One subtitle offered for an episode."""

    def __init__(
        self,
        version: Optional[str] = None,
        language: Optional[str] = None,
        status: Optional[str] = None,
        url: Optional[str] = None,
        via: Optional[str] = None,
        downloads: Union[int, str, None] = 0,
        compatibility: Mapping[str, str] = DEFAULT_COMPATIBILITY_720P,
        featured_via: str = FEATURED_VIA,
    ):
        self._version = normalize_version(version)
        self._language = language
        self._status = status
        self.url = url
        self._via = via
        self._downloads = _parse_downloads(downloads)
        self._compatibility = compatibility
        self._featured_via = featured_via

    @property
    def version(self) -> str:
        return self._version

    @property
    def language(self) -> Optional[str]:
        return self._language

    @property
    def status(self) -> Optional[str]:
        return self._status

    @property
    def via(self) -> Optional[str]:
        return self._via

    @property
    def downloads(self) -> int:
        return self._downloads

    def __str__(self) -> str:
        text = (
            f"{self.url}\t->\t{self.version} ({self.language}, {self.status}) "
            f"[{self.downloads} downloads]"
        )
        if self.via:
            text += f" (via {self.via})"
        return text

    def __repr__(self) -> str:
        return (
            f"Subtitle(version={self.version!r}, language={self.language!r}, "
            f"status={self.status!r}, downloads={self.downloads})"
        )

    def is_completed(self) -> bool:
        return self.status == COMPLETED

    def is_featured(self) -> bool:
        return self.via == self._featured_via

    def is_compatible_with(self, other_version: str) -> bool:
        return is_compatible(self.version, other_version, self._compatibility)

    def works_for(self, version: Optional[str] = "") -> bool:
        """Whether this subtitle is complete and fits the given release."""
        return self.is_completed() and self.is_compatible_with(
            normalize_version(version)
        )

    def can_replace(self, other: Optional["Subtitle"]) -> bool:
        """
        Check whether this subtitle should take the place of another one.

        A featured incumbent is never replaced and a featured subtitle always
        replaces a non-featured one; otherwise the most downloaded subtitle
        wins and ties keep the incumbent.

        Args:
            other: Current best subtitle, or None if there is none yet

        Returns:
            True if this subtitle is a better pick than ``other``
        """
        if not self.is_completed():
            return False
        if other is None:
            return True
        return (
            self.language == other.language
            and self.is_compatible_with(other.version)
            and self.is_more_popular_than(other)
        )

    def is_more_popular_than(self, other: Optional["Subtitle"]) -> bool:
        if other is None:
            return True
        if other.is_featured():
            return False
        if self.is_featured():
            return True
        return self.downloads > other.downloads


def _parse_downloads(value) -> int:
    try:
        downloads = int(value)
    except (TypeError, ValueError):
        return 0
    return max(downloads, 0)


def best_subtitle(
    subtitles: Iterable[Subtitle],
    version: Optional[str],
    language: Optional[str] = None,
) -> Optional[Subtitle]:
    """
    Pick the best subtitle for a release among candidates.

    Args:
        subtitles: Candidates, in the order they were found
        version: Release version the subtitle must fit (e.g. the release group)
        language: Only consider candidates in this language, if given

    Returns:
        Best subtitle, or None if no candidate is usable
    """
    best = None
    for subtitle in usable_subtitles(subtitles, version, language):
        if subtitle.can_replace(best):
            best = subtitle

    if best is None:
        logger.debug(f"No usable subtitle for version {version!r}")
    else:
        logger.debug(f"Best subtitle for version {version!r}: {best!r}")
    return best


def usable_subtitles(
    subtitles: Iterable[Subtitle],
    version: Optional[str],
    language: Optional[str] = None,
) -> List[Subtitle]:
    """Candidates in the language that are complete and fit the release."""
    return [
        subtitle
        for subtitle in subtitles
        if (language is None or subtitle.language == language)
        and subtitle.works_for(version)
    ]
