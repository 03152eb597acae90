"""Factory functions for creating i18n components.

Builds an I18n core from the I18nSettings section of the configuration.
"""

from typing import Optional

import structlog

from localekit.configuration import I18nSettings, settings
from localekit.i18n.core import I18n
from localekit.i18n.loader import UNMARSHALERS

logger = structlog.get_logger()


def create_i18n(
    i18n_settings: Optional[I18nSettings] = None,
    preload: bool = True,
) -> I18n:
    """Create and configure an I18n instance.

    Args:
        i18n_settings: Settings to build from (default: settings.i18n).
        preload: Load the configured translations glob immediately.

    Returns:
        I18n: Configured core.

    Raises:
        TranslationLoadError: If a preloaded file cannot be decoded.

    Usage:
        # Environment-driven
        i18n = create_i18n()

        # Explicit settings, lazy loading
        i18n = create_i18n(I18nSettings(I18N_DEFAULT_LOCALE="fr-fr"), preload=False)
        i18n.load_glob("locales/*.json")
    """
    config = i18n_settings or settings.i18n

    i18n = I18n(
        config.default_locale,
        unmarshaler=UNMARSHALERS[config.file_format],
        fallbacks=config.fallbacks,
        strict_templates=config.strict_templates,
    )

    if preload and config.translations_glob:
        i18n.load_glob(config.translations_glob)
        logger.info(
            "i18n_created_with_preload",
            translations_glob=config.translations_glob,
            locale_count=len(i18n.locales),
        )
    else:
        logger.info(
            "i18n_created_lazy",
            default_locale=i18n.default_locale,
        )

    return i18n
