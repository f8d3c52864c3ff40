"""
Error taxonomy for addic7ed subtitle lookups.

Each failure a file can run into has its own exception class carrying an
``ErrorKind``, so the batch loop can decide whether to skip the file or stop
processing altogether.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure a single file can end with."""

    INVALID_FILENAME = "invalid_filename"
    SHOW_NOT_FOUND = "show_not_found"
    EPISODE_NOT_FOUND = "episode_not_found"
    LANGUAGE_NOT_SUPPORTED = "language_not_supported"
    PARSING_ERROR = "parsing_error"
    NO_SUBTITLE_FOUND = "no_subtitle_found"
    DOWNLOAD_ERROR = "download_error"
    SUBTITLE_CANNOT_BE_SAVED = "subtitle_cannot_be_saved"
    WTF = "wtf"

    @property
    def aborts_batch(self) -> bool:
        """Whether the remaining files must be abandoned after this error."""
        return self is ErrorKind.LANGUAGE_NOT_SUPPORTED


class Addic7edError(Exception):
    """Base class for every error raised while handling one episode."""

    kind = ErrorKind.WTF


class InvalidFilename(Addic7edError):
    kind = ErrorKind.INVALID_FILENAME


class ShowNotFound(Addic7edError):
    kind = ErrorKind.SHOW_NOT_FOUND


class EpisodeNotFound(Addic7edError):
    kind = ErrorKind.EPISODE_NOT_FOUND


class LanguageNotSupported(Addic7edError):
    kind = ErrorKind.LANGUAGE_NOT_SUPPORTED


class ParsingError(Addic7edError):
    kind = ErrorKind.PARSING_ERROR


class NoSubtitleFound(Addic7edError):
    kind = ErrorKind.NO_SUBTITLE_FOUND


class DownloadError(Addic7edError):
    kind = ErrorKind.DOWNLOAD_ERROR


class SubtitleCannotBeSaved(Addic7edError):
    kind = ErrorKind.SUBTITLE_CANNOT_BE_SAVED


class WTFError(Addic7edError):
    """Anything nobody saw coming."""

    kind = ErrorKind.WTF
