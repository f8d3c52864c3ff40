"""
Output formatting helpers for the addic7ed command line.
"""

from typing import Iterable

from core.languages import LANGUAGES


def indent(text: str, prefix: str) -> str:
    """Prefix every line of a text."""
    return "\n".join(prefix + line for line in text.split("\n"))


def format_subtitles(subtitles: Iterable, prefix: str = "  ") -> str:
    """
    Format a subtitles list for display.

    Args:
        subtitles: Subtitles to list
        prefix: Indentation for each line

    Returns:
        One line per subtitle
    """
    return "\n".join(indent(str(subtitle), prefix) for subtitle in subtitles)


def format_languages() -> str:
    lines = ["All available languages (with their corresponding ISO code):"]
    for code, language in LANGUAGES.items():
        lines.append(f"{code}:\t{language.name}")
    return "\n".join(lines)
