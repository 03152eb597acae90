"""localekit - locale-aware string lookup with plurals, templates and fallbacks."""

from localekit.i18n import (
    I18n,
    Locale,
    create_i18n,
    parse_accept_language,
)

__all__ = ["I18n", "Locale", "create_i18n", "parse_accept_language"]
