"""
Localization utilities using Python's gettext.

Messages shown to the operator are routed through `_` so that the tool's own
output can be translated; locale display names are resolved with Babel.
"""
from __future__ import annotations

import gettext
import logging

from babel import Locale, UnknownLocaleError

from PyLocaleSync.Helpers.Resources import GetResourcePath

_translator: gettext.NullTranslations|None = None
_domain = 'locale-sync'


def initialize_localization(language_code: str|None = None) -> None:
    """
    Initialize the gettext translation system.

    Falls back to NullTranslations when no catalog exists for the language.
    """
    global _translator

    locale_dir = GetResourcePath('locales')
    _translator = gettext.translation(_domain, localedir=locale_dir, languages=[language_code or 'en'], fallback=True)


def _(text: str) -> str:
    """Return translated string for the active language."""
    if _translator:
        return _translator.gettext(text)
    return text


def get_locale_display_name(locale_code: str) -> str:
    """
    Get the English display name for a locale code (e.g. 'pt-br' -> 'Portuguese (Brazil)').
    Returns the code itself if Babel does not recognise it.
    """
    try:
        locale = Locale.parse(locale_code.replace('-', '_'))
        return locale.english_name or locale_code

    except (UnknownLocaleError, ValueError, TypeError) as e:
        logging.debug(f"No display name for locale {locale_code}: {e}")
        return locale_code
