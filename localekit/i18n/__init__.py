"""i18n system - translation lookup with plurals, templates and fallbacks.

Main components:
- core: I18n, the owner of compiled translations and configuration
- locale: Locale, a locale-bound view with string/number lookups
- compiler: raw text -> compiled plural variants (Jinja2 templates)
- fallback: FallbackResolver backfilling missing names across locales
- loader: JSON/YAML unmarshalers and file, glob and package loaders
- resolvers: locale canonicalization and Accept-Language parsing
"""

from localekit.i18n.cache import RuntimeCache
from localekit.i18n.compiler import Compiler, trim_context, with_context
from localekit.i18n.core import I18n
from localekit.i18n.exceptions import (
    I18nError,
    PluralIndexError,
    TemplateCompileError,
    TemplateRenderError,
    TranslationLoadError,
)
from localekit.i18n.factory import create_i18n
from localekit.i18n.fallback import FallbackResolver
from localekit.i18n.loader import (
    FileTranslationLoader,
    GlobTranslationLoader,
    ResourceTranslationLoader,
    TranslationLoader,
    json_unmarshaler,
    yaml_unmarshaler,
)
from localekit.i18n.locale import Locale
from localekit.i18n.models import CompiledText, CompiledTranslation, Pluralizor
from localekit.i18n.plurals import default_pluralizor
from localekit.i18n.renderer import Renderer
from localekit.i18n.resolvers import canonicalize_locale, parse_accept_language
from localekit.i18n.store import TranslationStore

__all__ = [
    "I18n",
    "Locale",
    "create_i18n",
    "Compiler",
    "CompiledText",
    "CompiledTranslation",
    "Pluralizor",
    "default_pluralizor",
    "FallbackResolver",
    "Renderer",
    "RuntimeCache",
    "TranslationStore",
    "TranslationLoader",
    "FileTranslationLoader",
    "GlobTranslationLoader",
    "ResourceTranslationLoader",
    "json_unmarshaler",
    "yaml_unmarshaler",
    "canonicalize_locale",
    "parse_accept_language",
    "trim_context",
    "with_context",
    "I18nError",
    "TranslationLoadError",
    "TemplateCompileError",
    "TemplateRenderError",
    "PluralIndexError",
]
