"""
Static reference data: languages supported by Addic7ed and the default
720p/SD release compatibility pairs.
"""

from types import MappingProxyType
from typing import NamedTuple, Optional


class Language(NamedTuple):
    name: str
    id: int


# ISO-ish code -> (name displayed by Addic7ed, Addic7ed language id)
LANGUAGES = MappingProxyType(
    {
        "ar": Language("Arabic", 38),
        "az": Language("Azerbaijani", 48),
        "bn": Language("Bengali", 47),
        "bs": Language("Bosnian", 44),
        "bg": Language("Bulgarian", 35),
        "ca": Language("Català", 12),
        "cn": Language("Chinese (Simplified)", 41),
        "zh": Language("Chinese (Traditional)", 24),
        "hr": Language("Croatian", 31),
        "cs": Language("Czech", 14),
        "da": Language("Danish", 30),
        "nl": Language("Dutch", 17),
        "en": Language("English", 1),
        "eu": Language("Euskera", 13),
        "fa": Language("Persian", 43),
        "fi": Language("Finnish", 28),
        "fr": Language("French", 8),
        "gl": Language("Galego", 15),
        "de": Language("German", 11),
        "el": Language("Greek", 27),
        "he": Language("Hebrew", 23),
        "hu": Language("Hungarian", 20),
        "id": Language("Indonesian", 37),
        "it": Language("Italian", 7),
        "ja": Language("Japanese", 32),
        "ko": Language("Korean", 42),
        "mk": Language("Macedonian", 49),
        "ms": Language("Malay", 40),
        "no": Language("Norwegian", 29),
        "pl": Language("Polish", 21),
        "pt": Language("Portuguese", 9),
        "pt-br": Language("Portuguese (Brazilian)", 10),
        "ro": Language("Romanian", 26),
        "ru": Language("Russian", 19),
        "sr": Language("Serbian (Latin)", 36),
        "sr-cyrl": Language("Serbian (Cyrillic)", 39),
        "sk": Language("Slovak", 25),
        "sl": Language("Slovenian", 22),
        "es": Language("Spanish", 4),
        "es-la": Language("Spanish (Latin America)", 6),
        "es-es": Language("Spanish (Spain)", 5),
        "sv": Language("Swedish", 18),
        "th": Language("Thai", 46),
        "tr": Language("Turkish", 16),
        "uk": Language("Ukrainian", 51),
        "vi": Language("Vietnamese", 45),
    }
)

DEFAULT_LANGUAGE = "fr"

# SD release group -> group releasing the matching 720p version
DEFAULT_COMPATIBILITY_720P = MappingProxyType(
    {
        "LOL": "DIMENSION",
        "SYS": "DIMENSION",
        "XII": "IMMERSE",
        "ASAP": "IMMERSE",
    }
)


def is_supported(code: str) -> bool:
    return code in LANGUAGES


def code_for_name(name: str) -> Optional[str]:
    """
    Find the language code matching a name as displayed on Addic7ed.

    Args:
        name: Language name, e.g. "French"

    Returns:
        Language code or None if the name is unknown
    """
    wanted = name.strip().lower()
    for code, language in LANGUAGES.items():
        if language.name.lower() == wanted:
            return code
    return None
