"""Internationalization core.

Owns the translation store, the fallback configuration, the runtime
cache and the template machinery for one set of translations. Build it,
load translations, then hand out Locale views:

    i18n = I18n("en-us", fallbacks={"zh-tw": ["zh-hk", "zh-cn"]})
    i18n.load_glob("locales/*.json")
    locale = i18n.new_locale(*parse_accept_language(header))
    locale.string("Hello, world!")

Loading mutates shared state and is not synchronized; finish loading
before serving lookups.
"""

from importlib.resources.abc import Traversable
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterable, List, Mapping, Optional, Union

from localekit.i18n.cache import RuntimeCache
from localekit.i18n.compiler import Compiler, trim_context
from localekit.i18n.fallback import FallbackResolver
from localekit.i18n.loader import (
    FileTranslationLoader,
    GlobTranslationLoader,
    ResourceTranslationLoader,
    TranslationLoader,
    json_unmarshaler,
)
from localekit.i18n.locale import Locale
from localekit.i18n.models import (
    CompiledTranslation,
    Pluralizor,
    RawTranslations,
    Unmarshaler,
)
from localekit.i18n.renderer import Renderer
from localekit.i18n.resolvers import canonicalize_locale, parse_accept_language
from localekit.i18n.store import TranslationStore
from localekit.logging import get_module_logger

logger = get_module_logger()


class I18n:
    """The main internationalization core.

    Attributes:
        unmarshaler: Decoder used by the file loaders.
        compiler: Compiles raw text; holds the pluralizors.
        renderer: Renders compiled variants.
        resolver: Fallback chain configuration and backfilling.
        store: Compiled translations by locale.
        runtime_cache: Lazily compiled translations for unknown names.
    """

    def __init__(
        self,
        default_locale: str,
        *,
        unmarshaler: Unmarshaler = json_unmarshaler,
        fallbacks: Optional[Mapping[str, Iterable[str]]] = None,
        pluralizors: Optional[Mapping[str, Pluralizor]] = None,
        strict_templates: bool = True,
    ):
        """Initialize the core.

        Args:
            default_locale: Root of every fallback chain and the locale new
                views bind to when no candidate matches.
            unmarshaler: Replaces the JSON decoder used by the file loaders.
            fallbacks: Locale -> ordered fallback locales.
            pluralizors: Locale -> custom plural selector.
            strict_templates: Raise on template compile/render failures
                instead of degrading to empty output.
        """
        self.unmarshaler = unmarshaler
        self.resolver = FallbackResolver(default_locale, fallbacks)
        self.compiler = Compiler(
            pluralizors={
                canonicalize_locale(locale): pluralizor
                for locale, pluralizor in (pluralizors or {}).items()
            },
            strict=strict_templates,
        )
        self.renderer = Renderer(strict=strict_templates)
        self.store = TranslationStore()
        self.runtime_cache = RuntimeCache()

        logger.info(
            "initialized_i18n",
            default_locale=self.default_locale,
            fallback_count=len(self.resolver.fallbacks),
            strict_templates=strict_templates,
        )

    @property
    def default_locale(self) -> str:
        return self.resolver.default_locale

    @property
    def locales(self) -> List[str]:
        """Locales that have a slot in the store."""
        return self.store.locales()

    def load_map(self, languages: RawTranslations) -> None:
        """Compile and merge a batch of translations.

        The whole batch is compiled before anything is merged, so a
        failure leaves the store as it was. A fallback pass runs after
        the merge.

        Args:
            languages: Locale -> name -> raw text. Locale keys may be in
                any case or separator style.

        Raises:
            TemplateCompileError: If a template fails to parse (strict mode).
        """
        batch: Dict[str, Dict[str, CompiledTranslation]] = {}
        for locale, translations in languages.items():
            locale = canonicalize_locale(locale)
            compiled = batch.setdefault(locale, {})
            for name, text in translations.items():
                compiled[name] = self.compiler.compile(locale, name, text)

        self.store.merge(batch)
        self.resolver.backfill(self.store)

        logger.info(
            "translations_loaded",
            locales=sorted(batch),
            entry_count=sum(len(entries) for entries in batch.values()),
        )

    def load(self, loader: TranslationLoader) -> None:
        """Load everything a TranslationLoader produces."""
        self.load_map(loader.load())

    def load_files(self, *paths: Union[str, Path]) -> None:
        """Load translation files; the locale is taken from each filename.

        Raises:
            OSError: If a file cannot be read.
            TranslationLoadError: If a file cannot be decoded.
        """
        self.load(FileTranslationLoader(paths, self.unmarshaler))

    def load_glob(self, *patterns: str) -> None:
        """Load the translation files matching the glob patterns."""
        self.load(GlobTranslationLoader(patterns, self.unmarshaler))

    def load_resources(
        self,
        package: Union[str, ModuleType, Traversable],
        *patterns: str,
    ) -> None:
        """Load translation files bundled in a package.

        Args:
            package: Package name, module or Traversable root.
            patterns: fnmatch patterns on package-relative paths.
        """
        self.load(ResourceTranslationLoader(package, patterns, self.unmarshaler))

    def new_locale(self, *candidates: str) -> Locale:
        """Bind a Locale to the first candidate that has translations.

        Candidates are tried in the given order; fallback configuration
        plays no part. Without a match the default locale is used.
        """
        for candidate in candidates:
            locale = canonicalize_locale(candidate)
            if self.store.has_locale(locale):
                return Locale(self, locale)
        return Locale(self, self.default_locale)

    def new_locale_from_header(self, accept_language: Optional[str]) -> Locale:
        """Bind a Locale from an Accept-Language header value."""
        return self.new_locale(*parse_accept_language(accept_language))

    def compile_runtime(self, name: str) -> CompiledTranslation:
        """Return ``name`` compiled as its own default-locale translation.

        Compiled once per distinct name and cached for the lifetime of
        this instance.
        """

        def compile_name() -> CompiledTranslation:
            translation = self.compiler.compile(
                self.default_locale, name, trim_context(name)
            )
            logger.debug("runtime_translation_compiled", name=name)
            return translation

        return self.runtime_cache.get_or_compile(name, compile_name)
