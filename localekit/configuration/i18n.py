"""Internationalization settings."""

from typing import Dict, List, Literal, Optional

from pydantic import Field, field_validator

from localekit.configuration.base import LibrarySettings


class I18nSettings(LibrarySettings):
    """Configuration for building an I18n core from the environment.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Root of every fallback chain (default: en-us)
        I18N_TRANSLATIONS_GLOB: Glob pattern of translation files to preload
        I18N_FILE_FORMAT: Translation file format - 'json' or 'yaml'
        I18N_STRICT_TEMPLATES: Raise on template errors instead of rendering
            empty output (default: True)
        I18N_FALLBACKS: JSON object mapping a locale to its ordered fallback
            locales, e.g. '{"zh-tw": ["zh-hk", "zh-cn"]}'

    Example:
        ```python
        from localekit.configuration import settings

        if settings.i18n.translations_glob:
            i18n.load_glob(settings.i18n.translations_glob)
        ```
    """

    default_locale: str = Field(
        default="en-us",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when no candidate matches and as fallback root",
    )
    translations_glob: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_GLOB",
        description="Glob pattern of translation files loaded by create_i18n()",
    )
    file_format: Literal["json", "yaml"] = Field(
        default="json",
        alias="I18N_FILE_FORMAT",
        description="Decoder used for translation files",
    )
    strict_templates: bool = Field(
        default=True,
        alias="I18N_STRICT_TEMPLATES",
        description="Surface template compile/render failures as exceptions",
    )
    fallbacks: Dict[str, List[str]] = Field(
        default_factory=dict,
        alias="I18N_FALLBACKS",
        description="Locale to ordered fallback locales",
    )

    @field_validator("file_format", mode="before")
    @classmethod
    def normalize_file_format(cls, value):
        if isinstance(value, str):
            value = value.strip().lower()
            if value == "yml":
                return "yaml"
        return value
