"""Runtime cache of lazily compiled translations.

Names that were never loaded are compiled from their own text on first
lookup. The result is kept here for the lifetime of the owning I18n
instance, keyed by the exact name including any context suffix.
"""

import threading
from typing import Callable, Dict, Optional

from localekit.i18n.models import CompiledTranslation


class RuntimeCache:
    """Thread-safe memo of runtime-compiled translations.

    Attributes:
        hits: Lookups answered from the cache.
        misses: Lookups that had to compile.
    """

    def __init__(self):
        self._entries: Dict[str, CompiledTranslation] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, name: str) -> Optional[CompiledTranslation]:
        return self._entries.get(name)

    def get_or_compile(
        self,
        name: str,
        factory: Callable[[], CompiledTranslation],
    ) -> CompiledTranslation:
        """Return the cached entry for ``name``, compiling it once if absent.

        Check and insert happen under the lock, so concurrent first lookups
        of the same name run ``factory`` only once.
        """
        with self._lock:
            entry = self._entries.get(name)
            if entry is not None:
                self.hits += 1
                return entry

            entry = factory()
            self._entries[name] = entry
            self.misses += 1
            return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
