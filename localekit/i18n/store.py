"""In-memory store of compiled translations.

Entries loaded directly into a locale and entries backfilled from a
fallback locale live in separate layers, so a fallback pass can be
recomputed without ever touching a directly loaded name.
"""

from typing import Dict, Iterator, List, Mapping, Optional

from localekit.i18n.models import CompiledTranslation

TranslationLayer = Dict[str, Dict[str, CompiledTranslation]]


class TranslationStore:
    """Locale -> name -> CompiledTranslation.

    Not thread-safe: loads must be serialized by the caller and should
    finish before lookups start.

    Attributes:
        _direct: Entries loaded into each locale.
        _backfilled: Entries borrowed from another locale by the last
            fallback pass.
    """

    def __init__(self):
        self._direct: TranslationLayer = {}
        self._backfilled: TranslationLayer = {}

    def merge(self, batch: Mapping[str, Mapping[str, CompiledTranslation]]) -> None:
        """Merge compiled entries; later entries override same locale/name."""
        for locale, translations in batch.items():
            self._direct.setdefault(locale, {}).update(translations)

    def get(self, locale: str, name: str) -> Optional[CompiledTranslation]:
        """Return the direct entry, else the backfilled one, else None."""
        direct = self._direct.get(locale)
        if direct is not None and name in direct:
            return direct[name]
        return self._backfilled.get(locale, {}).get(name)

    def get_direct(self, locale: str, name: str) -> Optional[CompiledTranslation]:
        return self._direct.get(locale, {}).get(name)

    def has_locale(self, locale: str) -> bool:
        """Whether ``locale`` has a slot (any direct or backfilled entry)."""
        return locale in self._direct or locale in self._backfilled

    def locales(self) -> List[str]:
        return sorted(set(self._direct) | set(self._backfilled))

    def names(self, locale: str) -> List[str]:
        names = set(self._direct.get(locale, {}))
        names.update(self._backfilled.get(locale, {}))
        return sorted(names)

    def direct_names(self, locale: str) -> List[str]:
        return list(self._direct.get(locale, {}))

    def set_backfilled(self, layer: TranslationLayer) -> None:
        """Replace the whole backfilled layer with the result of a fallback pass."""
        self._backfilled = layer

    def __contains__(self, locale: str) -> bool:
        return self.has_locale(locale)

    def __iter__(self) -> Iterator[str]:
        return iter(self.locales())
