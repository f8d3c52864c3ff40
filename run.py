#!/usr/bin/env python3
"""
Addic7ed Subtitles Downloader

This script guesses the TV show, season, episode and release group of each
video file given on the command line, looks up the subtitles Addic7ed offers
for that episode, picks the one best matching the release and saves it next
to the video file.

Features:
- Picks subtitles matching the release group, including known 720p/SD pairs
- Prefers subtitles hosted by Addic7ed itself, then the most downloaded ones
- Lists every available subtitle with --all-subtitles
- Quiet mode for cron jobs

Usage:
    python run.py [options] <file1> [<file2>, <file3>, ...]

Configuration:
    Defaults are read from ~/.config/addic7ed-subtitles/config.cfg, created on
    first run. Command line options take precedence.
"""

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from api.addic7ed import Addic7ed
from core.config import Config, load_config, setup_logging
from core.episode import Episode
from core.errors import Addic7edError, ErrorKind
from utils import format_languages, format_subtitles, indent

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    ErrorKind.INVALID_FILENAME: (
        "{filename} does not seem to be a valid TV show filename. Skipping."
    ),
    ErrorKind.SHOW_NOT_FOUND: "Show not found on Addic7ed : {show}. Skipping.",
    ErrorKind.EPISODE_NOT_FOUND: (
        "Episode not found on Addic7ed : {show} S{season}E{episode}. Skipping."
    ),
    ErrorKind.LANGUAGE_NOT_SUPPORTED: (
        "Addic7ed does not support language '{language}'. Exiting."
    ),
    ErrorKind.PARSING_ERROR: (
        "HTML parsing failed. Either you've found a bug (please submit an issue) "
        "or Addic7ed website has been updated and cannot be crawled anymore. "
        "Skipping."
    ),
    ErrorKind.NO_SUBTITLE_FOUND: (
        "No (acceptable) subtitle has been found on Addic7ed for {filename}. "
        "Maybe try again later."
    ),
    ErrorKind.DOWNLOAD_ERROR: "The subtitle could not be downloaded. Skipping.",
    ErrorKind.SUBTITLE_CANNOT_BE_SAVED: (
        "The downloaded subtitle could not be saved as {subtitle_path}. Skipping."
    ),
    ErrorKind.WTF: "WTF (I sincerely have no idea what I'm doing): {detail}",
}


@dataclass
class FileResult:
    """Outcome of processing one file."""

    filename: str
    kind: Optional[ErrorKind] = None
    message: str = ""
    subtitle_path: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind is None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="addic7ed",
        usage="%(prog)s [options] <file1> [<file2>, <file3>, ...]",
        description="Download the best matching Addic7ed subtitle for TV episodes",
    )
    parser.add_argument("filenames", nargs="*", help="Episode video files")
    parser.add_argument(
        "-l",
        "--language",
        help="Language code to look subtitles for (default: French)",
    )
    parser.add_argument(
        "-a",
        "--all-subtitles",
        dest="all",
        action="store_true",
        help="Display all available subtitles",
    )
    parser.add_argument(
        "-n",
        "--do-not-download",
        dest="no_download",
        action="store_true",
        help="Do not download the subtitle",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Run verbosely"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Run without output (cron-mode)"
    )
    parser.add_argument("-d", "--debug", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument(
        "-L",
        "--list-languages",
        action="store_true",
        help="List all available languages",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=(
            f"This is addic7ed-subtitles version {__version__}\n"
            "Licensed under the terms of the MIT License"
        ),
        help="Show version number",
    )
    return parser


def error_message(
    kind: ErrorKind,
    filename: str,
    episode: Optional[Episode],
    language: str,
    detail: str,
) -> str:
    fields = {
        "filename": filename,
        "language": language,
        "detail": detail,
        "show": "",
        "season": "",
        "episode": "",
        "subtitle_path": "",
    }
    if episode is not None:
        fields.update(
            show=episode.filename.showname,
            season=episode.filename.season,
            episode=episode.filename.episode,
            subtitle_path=episode.subtitle_path,
        )
    return ERROR_MESSAGES[kind].format(**fields)


def process_file(
    filename: str,
    options: argparse.Namespace,
    client: Addic7ed,
    config: Config,
    language: str,
) -> FileResult:
    """
    Find, and unless told otherwise download, the best subtitle for a file.

    Args:
        filename: Episode video file
        options: Parsed command line options
        client: Addic7ed client
        config: Loaded configuration
        language: Language code to look subtitles for

    Returns:
        Outcome of the processing, never raises
    """
    verbose = options.verbose and not options.quiet
    prefix = "  " if verbose else ""
    episode = None

    try:
        episode = Episode(filename, client, config)
        if verbose:
            print(f"Searching subtitles for {episode.filename.basename}")
            print(indent(episode.filename.inspect(), "  "))

        if options.all:
            print(indent("Available subtitles:", prefix))
            print(
                format_subtitles(
                    episode.usable_subtitles(language), "    " if verbose else "  "
                )
            )
            return FileResult(filename)

        if verbose:
            print("  Available subtitles:")
            print(format_subtitles(episode.subtitles(language), "    "))

        best = episode.best_subtitle(language)
        if verbose:
            print("  Best subtitle:")
            print(f"    {best}")

        if options.no_download:
            return FileResult(filename)

        path = episode.download_best_subtitle(language)
        if not options.quiet:
            print(
                indent(
                    f"New subtitle downloaded for {filename}.\nEnjoy your show :-)",
                    prefix,
                )
            )
        return FileResult(filename, subtitle_path=path)

    except Addic7edError as e:
        logger.warning(f"{filename}: {e.kind.value} ({e})")
        kind = e.kind
        detail = str(e)
    except Exception as e:
        logger.error(f"Unexpected error processing {filename}: {e}", exc_info=True)
        kind = ErrorKind.WTF
        detail = str(e)

    return FileResult(
        filename, kind, error_message(kind, filename, episode, language, detail)
    )


def run(
    filenames: List[str],
    options: argparse.Namespace,
    client: Addic7ed,
    config: Config,
    language: str,
) -> List[FileResult]:
    """Process files one after the other, stopping on batch-fatal errors."""
    prefix = "  " if options.verbose and not options.quiet else ""
    results = []

    for filename in filenames:
        if not options.debug and not os.path.isfile(filename):
            if not options.quiet:
                print(
                    f"Warning: {filename} does not exist or is not a regular file. "
                    "Skipping."
                )
            results.append(
                FileResult(filename, ErrorKind.INVALID_FILENAME, "Not a regular file")
            )
            continue

        result = process_file(filename, options, client, config, language)
        results.append(result)

        if result.ok:
            continue
        if not options.quiet:
            print(indent(result.message, prefix))
        if result.kind.aborts_batch:
            break

    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to look up and download subtitles for every file."""
    parser = build_parser()
    options = parser.parse_args(argv)

    if options.list_languages:
        print(format_languages())
        return 0

    try:
        config = load_config()
        setup_logging("DEBUG" if options.verbose else config.log_level, config.log_file)

        language = options.language or config.language
        logger.info(
            f"Looking for {language} subtitles for {len(options.filenames)} file(s)"
        )

        client = Addic7ed(config)
        results = run(options.filenames, options, client, config, language)

        failures = [result for result in results if not result.ok]
        logger.info(
            f"Execution finished: {len(results) - len(failures)} succeeded, "
            f"{len(failures)} failed"
        )
        return 1 if failures else 0

    except KeyboardInterrupt:
        logger.info("Execution interrupted by user")
        if not options.quiet:
            print("\nExecution interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
