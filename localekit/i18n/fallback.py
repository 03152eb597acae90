"""Fallback resolution across locales.

After each load, every name defined in the default locale is backfilled
into the loaded locales that lack it. The candidate is searched through
the locale's configured fallback chain, depth first, each member checked
through its own chain in turn. The default locale is only consulted once
the whole chain came up empty.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Set

import structlog

from localekit.i18n.models import CompiledTranslation
from localekit.i18n.resolvers import canonicalize_locale
from localekit.i18n.store import TranslationLayer, TranslationStore

logger = structlog.get_logger(component="i18n.fallback")


class FallbackResolver:
    """Resolves missing translations from configured fallback chains.

    Attributes:
        default_locale: Canonical root of every chain.
        fallbacks: Canonical locale -> ordered fallback locales.
    """

    def __init__(
        self,
        default_locale: str,
        fallbacks: Optional[Mapping[str, Iterable[str]]] = None,
    ):
        self.default_locale = canonicalize_locale(default_locale)
        self.fallbacks: Dict[str, List[str]] = {
            canonicalize_locale(locale): [canonicalize_locale(f) for f in chain]
            for locale, chain in (fallbacks or {}).items()
        }
        self.log = logger.bind(default_locale=self.default_locale)

        for cycle in self.cycles():
            self.log.warning("fallback_cycle_detected", cycle=cycle)

    def chain(self, locale: str) -> List[str]:
        """Return the configured fallback chain for ``locale``."""
        return list(self.fallbacks.get(locale, []))

    def cycles(self) -> List[List[str]]:
        """Find cycles in the fallback configuration.

        Returns:
            One path per cycle, starting and ending at the same locale.
        """
        found = []
        seen: Set[str] = set()

        def visit(locale: str, path: List[str]) -> None:
            for fallback in self.fallbacks.get(locale, []):
                if fallback in path:
                    cycle = path[path.index(fallback):] + [fallback]
                    if frozenset(cycle) not in seen:
                        seen.add(frozenset(cycle))
                        found.append(cycle)
                    continue
                visit(fallback, path + [fallback])

        for locale in self.fallbacks:
            visit(locale, [locale])
        return found

    def find(
        self,
        store: TranslationStore,
        locale: str,
        name: str,
    ) -> Optional[CompiledTranslation]:
        """Find the best-fit translation of ``name`` for ``locale``.

        Walks the configured chain first, then falls back to the default
        locale's own entry.
        """
        found = self._walk(store, locale, name, {locale})
        if found is not None:
            return found
        return store.get_direct(self.default_locale, name)

    def _walk(
        self,
        store: TranslationStore,
        locale: str,
        name: str,
        visited: Set[str],
    ) -> Optional[CompiledTranslation]:
        for fallback in self.fallbacks.get(locale, []):
            if fallback in visited:
                continue
            visited.add(fallback)

            found = store.get_direct(fallback, name)
            if found is not None:
                return found

            found = self._walk(store, fallback, name, visited)
            if found is not None:
                return found
        return None

    def backfill(self, store: TranslationStore) -> int:
        """Recompute the store's backfilled layer.

        Direct entries are never replaced; only names missing from a
        locale's direct layer are filled in.

        Returns:
            Number of backfilled entries.
        """
        layer: TranslationLayer = {}
        default_names = store.direct_names(self.default_locale)

        for locale in store.locales():
            if locale == self.default_locale:
                continue
            for name in default_names:
                if store.get_direct(locale, name) is not None:
                    continue
                best = self.find(store, locale, name)
                if best is not None:
                    layer.setdefault(locale, {})[name] = best

        store.set_backfilled(layer)
        count = sum(len(entries) for entries in layer.values())
        self.log.info(
            "fallbacks_compiled",
            locale_count=len(layer),
            entry_count=count,
        )
        return count
