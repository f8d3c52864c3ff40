"""
Episode identification from video filenames.
"""

import os
import re
from typing import List
from urllib.parse import quote

from core.errors import InvalidFilename

EPISODE_PATTERN = re.compile(
    r"^(?P<showname>.*\w)[\[. ]+S?(?P<season>\d{1,2})[-. ]?[EX]?(?P<episode>\d{2})"
    r"([-. ]?[EX]?\d{2})*[\]. ]+(?P<tags>.*)-(?P<group>\w*)(\.\w{3})?$",
    re.IGNORECASE,
)


class Filename:
    """Show, season, episode and release details guessed from a path."""

    def __init__(self, filename: str):
        self.filename = filename
        self.basename = os.path.basename(filename)

        match = EPISODE_PATTERN.match(self.basename)
        if not match:
            raise InvalidFilename(f"Cannot parse episode from {self.basename}")

        self.showname = match.group("showname").replace(".", " ")
        self.season = int(match.group("season"))
        self.episode = int(match.group("episode"))
        self.tags: List[str] = [
            tag.upper() for tag in re.split(r"[. ]", match.group("tags")) if tag
        ]
        self.group = match.group("group").upper()

    @property
    def encoded_showname(self) -> str:
        return quote(self.showname)

    def subtitle_path(self, extension: str = ".srt") -> str:
        """Path the subtitle should be saved to, next to the video."""
        return re.sub(r"\.\w{3}$", extension, self.filename)

    def inspect(self) -> str:
        return (
            f"Guesses for {self.basename}:\n"
            f"  show:    {self.showname}\n"
            f"  season:  {self.season}\n"
            f"  episode: {self.episode}\n"
            f"  tags:    {self.tags}\n"
            f"  group:   {self.group}"
        )

    def __str__(self) -> str:
        return self.filename
