"""Locale identifier handling shared by LocaleContext and the format units.

Identifiers arrive in three shapes: BCP 47 ("de-CH"), POSIX ("de_CH") and
POSIX environment values ("de_CH.UTF-8@euro"). All of them are reduced to
the POSIX form Babel expects before any lookup or cache access.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from moneyfmt.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

# Values that name no real locale in POSIX environment variables.
_PSEUDO_LOCALES = frozenset({"", "C", "POSIX"})

# Environment variables consulted for the monetary category, highest precedence first.
_MONETARY_ENV_VARS = ("LC_ALL", "LC_MONETARY", "LANG")


def normalize_locale(locale_code: str) -> str:
    """Reduce a locale identifier to Babel's POSIX form.

    Drops the codeset and modifier of environment values and turns BCP 47
    hyphens into underscores.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8@euro")
        'de_DE'
    """
    code = locale_code.partition("@")[0].partition(".")[0]
    return code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale identifier into a Babel Locale, cached per identifier.

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no such locale
        ValueError: If the identifier is malformed
    """
    # Babel loads CLDR data on import.
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Locale the running process uses for monetary formatting.

    Follows POSIX precedence for LC_MONETARY: LC_ALL, then LC_MONETARY,
    then LANG. When none names a real locale, the category setting of the
    Python locale module is used, then FALLBACK_LOCALE.

    Returns:
        Locale identifier in POSIX form (e.g. "de_DE")
    """
    for var in _MONETARY_ENV_VARS:
        value = os.environ.get(var, "")
        if normalize_locale(value) not in _PSEUDO_LOCALES:
            return normalize_locale(value)

    import locale as locale_module  # noqa: PLC0415

    try:
        configured, _ = locale_module.getlocale(locale_module.LC_MONETARY)
    except ValueError:
        configured = None
    if configured and normalize_locale(configured) not in _PSEUDO_LOCALES:
        return normalize_locale(configured)
    return FALLBACK_LOCALE
