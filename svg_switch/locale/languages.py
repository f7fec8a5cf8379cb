"""
Preferred-language source for systemLanguage matching.

Languages are read from the environment on every call so that late
changes to the locale settings are honored.
"""

import os
from typing import Callable, List, Mapping, Optional, Sequence

from shared.config import SwitchSettings, get_settings

LanguageSource = Callable[[], Sequence[str]]

# Checked in order; the first non-empty variable wins
LOCALE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


def _explode_locale(locale: str) -> List[str]:
    """Expand a locale name into its variants, most specific first.

    ``language[_territory][.codeset][@modifier]`` yields every
    combination of the optional parts. The codeset is dropped before the
    territory, and the modifier is kept longest.
    """
    rest = locale
    modifier = ""
    codeset = ""
    territory = ""

    at = rest.find("@")
    if at >= 0:
        rest, modifier = rest[:at], rest[at:]
    dot = rest.find(".")
    if dot >= 0:
        rest, codeset = rest[:dot], rest[dot:]
    underscore = rest.find("_")
    if underscore >= 0:
        rest, territory = rest[:underscore], rest[underscore:]
    language = rest

    variants: List[str] = []
    for mod in (modifier, ""):
        for ter, cs in ((territory, codeset), (territory, ""), ("", codeset), ("", "")):
            variant = f"{language}{ter}{cs}{mod}"
            if variant not in variants:
                variants.append(variant)
    return variants


def get_language_names(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Ordered preferred languages of the process, most preferred first."""
    environ = os.environ if environ is None else environ

    value = ""
    for variable in LOCALE_VARIABLES:
        value = environ.get(variable, "")
        if value:
            break

    names: List[str] = []
    for locale in value.split(":"):
        locale = locale.strip()
        if not locale:
            continue
        for variant in _explode_locale(locale):
            if variant and variant not in names:
                names.append(variant)
    return names


def system_languages(settings: Optional[SwitchSettings] = None) -> List[str]:
    """Configured language override, else the environment's languages.

    Without ``settings`` a fresh ``SwitchSettings`` is built on every call,
    which reads the environment and the ``.env`` file. Pass settings, or give
    the evaluator its own language source, when evaluating many elements.
    """
    settings = settings or get_settings()
    override = settings.language_override()
    if override:
        return override
    return get_language_names()
