"""
Subtitle lookup for a single episode file.
"""

import logging
from typing import Dict, List

from core.config import Config
from core.errors import NoSubtitleFound, SubtitleCannotBeSaved
from core.filename import Filename
from core.subtitle import Subtitle, best_subtitle, usable_subtitles

logger = logging.getLogger(__name__)


class Episode:
    """
    One episode file and its subtitles on Addic7ed.

    Subtitle lists are fetched at most once per language and kept for the
    lifetime of the object.
    """

    def __init__(self, filename: str, client, config: Config):
        self.filename = Filename(filename)
        self.client = client
        self.config = config
        self._subtitles: Dict[str, List[Subtitle]] = {}
        self._best_subtitle: Dict[str, Subtitle] = {}

    def url(self, language: str) -> str:
        return self.client.episode_url(self.filename, language)

    def subtitles(self, language: str) -> List[Subtitle]:
        """
        List subtitles available in a language.

        Args:
            language: Language code

        Returns:
            Subtitles in the order Addic7ed lists them
        """
        if language not in self._subtitles:
            self._subtitles[language] = self.client.find_subtitles(
                self.filename, language
            )
            logger.info(
                f"Found {len(self._subtitles[language])} {language} subtitle(s) "
                f"for {self.filename.basename}"
            )
        return self._subtitles[language]

    def usable_subtitles(self, language: str) -> List[Subtitle]:
        """Subtitles in the language that are complete and fit the release."""
        return usable_subtitles(
            self.subtitles(language), self.filename.group, language
        )

    def best_subtitle(self, language: str) -> Subtitle:
        """
        Pick the subtitle to download for this episode's release.

        Args:
            language: Language code

        Returns:
            Best subtitle
        """
        if language not in self._best_subtitle:
            best = best_subtitle(
                self.subtitles(language), self.filename.group, language
            )
            if best is None:
                raise NoSubtitleFound(
                    f"No {language} subtitle for {self.filename.basename}"
                )
            self._best_subtitle[language] = best
        return self._best_subtitle[language]

    @property
    def subtitle_path(self) -> str:
        return self.filename.subtitle_path(self.config.extension)

    def download_best_subtitle(self, language: str) -> str:
        """
        Download the best subtitle and save it next to the video file.

        Args:
            language: Language code

        Returns:
            Path of the saved subtitle
        """
        subtitle = self.best_subtitle(language)
        content = self.client.download(subtitle.url, self.url(language))

        path = self.subtitle_path
        try:
            with open(path, "wb") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Could not write subtitle to {path}: {e}")
            raise SubtitleCannotBeSaved(path) from e

        logger.info(f"Saved subtitle to: {path}")
        return path
