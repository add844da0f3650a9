"""Locale context: the single locale abstraction used by the format engine.

A LocaleContext is an opaque locale identifier plus the CLDR lookups the
printer/parser units need (decimal and grouping symbols, grouping sizes,
sign characters, currency symbols). Uses Babel for CLDR data.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Lookups use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers

from moneyfmt.constants import FALLBACK_LOCALE, MAX_LOCALE_CACHE_SIZE
from moneyfmt.diagnostics import ErrorTemplate, LocaleDataUnavailableError
from moneyfmt.locale_utils import get_babel_locale, get_system_locale, normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

# Babel reports lookup failures with a mix of exception types.
_LOOKUP_ERRORS = (KeyError, ValueError, AttributeError, TypeError, IndexError)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale handle with CLDR symbol lookups.

    Use LocaleContext.create() to construct instances with validation and
    caching. Every lookup raises LocaleDataUnavailableError when CLDR has
    no usable value; units treat that as a hard failure.

    Examples:
        >>> ctx = LocaleContext.create("en-US")
        >>> ctx.decimal_symbol(), ctx.group_symbol()
        ('.', ',')

        >>> ctx = LocaleContext.create("de-DE")
        >>> ctx.decimal_symbol(), ctx.group_symbol()
        (',', '.')

        >>> ctx = LocaleContext.create("invalid-locale")
        >>> ctx.is_fallback
        True

    Thread Safety:
        Immutable. Multiple threads can share the same instance. Cache
        operations are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to
        en_US. The original locale_code is preserved for debugging.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g. 'en-US', 'lv_LV')

        Returns:
            Cached LocaleContext instance
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
            )
            babel_locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                FALLBACK_LOCALE,
            )
            babel_locale = get_babel_locale(FALLBACK_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 or POSIX locale identifier

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            diagnostic = ErrorTemplate.locale_unknown(locale_code)
            msg = f"{diagnostic.message}: {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @classmethod
    def for_system(cls) -> "LocaleContext":
        """Create LocaleContext for the locale of the running process.

        Uses LC_ALL, LC_MONETARY or LANG; falls back to en_US when none is set.
        """
        return cls.create(get_system_locale())

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    @property
    def identifier(self) -> str:
        """Normalized identifier of the locale actually used (e.g. 'en_US')."""
        return str(self._babel_locale)

    # ------------------------------------------------------------------
    # CLDR lookups
    # ------------------------------------------------------------------

    def decimal_symbol(self) -> str:
        """Decimal separator (e.g. '.' for en, ',' for de)."""
        return self._symbol(babel_numbers.get_decimal_symbol, "decimal symbol")

    def group_symbol(self) -> str:
        """Grouping separator (e.g. ',' for en, '.' for de, NBSP for fr)."""
        return self._symbol(babel_numbers.get_group_symbol, "grouping symbol")

    def plus_sign(self) -> str:
        return self._symbol(babel_numbers.get_plus_sign_symbol, "plus sign")

    def minus_sign(self) -> str:
        return self._symbol(babel_numbers.get_minus_sign_symbol, "minus sign")

    def grouping_sizes(self) -> tuple[int, int]:
        """Primary and secondary grouping sizes from the decimal pattern.

        Most locales group by (3, 3); Indian locales use (3, 2), giving
        "12,34,567".

        Raises:
            LocaleDataUnavailableError: If the locale has no usable pattern
        """
        try:
            pattern = self._babel_locale.decimal_formats[None]
            primary, secondary = pattern.grouping
        except _LOOKUP_ERRORS as e:
            raise self._unavailable("grouping size") from e
        # Babel reports a huge sentinel for patterns without grouping.
        if not 0 < primary < 1000:
            raise self._unavailable("grouping size")
        if not 0 < secondary < 1000:
            secondary = primary
        return (int(primary), int(secondary))

    def currency_symbol(self, currency_code: str) -> str:
        """Locale-specific symbol for a currency (e.g. '$', 'US$', '€').

        CLDR falls back to the code itself for currencies without a symbol
        in this locale.

        Raises:
            LocaleDataUnavailableError: If CLDR returns no symbol
        """
        try:
            symbol = babel_numbers.get_currency_symbol(currency_code, locale=self._babel_locale)
        except _LOOKUP_ERRORS as e:
            raise self._unavailable(f"currency symbol for {currency_code}") from e
        if not symbol:
            raise self._unavailable(f"currency symbol for {currency_code}")
        return str(symbol)

    def territory_currency(self) -> str | None:
        """Current tender currency of the locale's territory, if any."""
        territory = self._babel_locale.territory
        if not territory:
            return None
        try:
            currencies = babel_numbers.get_territory_currencies(territory)
        except _LOOKUP_ERRORS:
            logger.debug("No territory currency data for %s", territory)
            return None
        return currencies[0] if currencies else None

    def _symbol(self, lookup: Callable[..., str], what: str) -> str:
        try:
            value = lookup(locale=self._babel_locale)
        except _LOOKUP_ERRORS as e:
            raise self._unavailable(what) from e
        if not value:
            raise self._unavailable(what)
        return str(value)

    def _unavailable(self, what: str) -> LocaleDataUnavailableError:
        diagnostic = ErrorTemplate.locale_data_unavailable(self.locale_code, what)
        return LocaleDataUnavailableError(diagnostic, locale_code=self.locale_code)
