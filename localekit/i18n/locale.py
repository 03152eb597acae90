"""Locale-bound view over an I18n core."""

from typing import TYPE_CHECKING

from localekit.i18n.compiler import with_context
from localekit.i18n.models import CompiledTranslation, RenderContext
from localekit.i18n.plurals import select_variant

if TYPE_CHECKING:
    from localekit.i18n.core import I18n


class Locale:
    """A translated locale.

    Every lookup returns a string: names with no translation anywhere are
    rendered as their own text, minus any " <context>" suffix.

    Usage:
        locale = i18n.new_locale("zh-TW", "en")
        locale.string("Hello, world!")
        locale.string_x("Post", "verb")
        locale.number("None | 1 Apple | {{ count }} Apples", 3, {"count": 3})
    """

    def __init__(self, parent: "I18n", locale: str):
        self._parent = parent
        self._locale = locale

    @property
    def locale(self) -> str:
        """Canonical code this view is bound to."""
        return self._locale

    def string(self, name: str, data: RenderContext = None) -> str:
        """Return the translation of ``name``, using its first variant."""
        translation = self.lookup(name)
        return self._parent.renderer.render(translation.texts[0], data)

    def string_x(self, name: str, context: str, data: RenderContext = None) -> str:
        """Return the translation of ``name`` disambiguated by ``context``."""
        return self.string(with_context(name, context), data)

    def number(self, name: str, count: int, data: RenderContext = None) -> str:
        """Return the plural variant of ``name`` selected by ``count``.

        Raises:
            PluralIndexError: If the locale's pluralizor selects a variant
                the translation does not have.
        """
        translation = self.lookup(name)
        return self._parent.renderer.render(select_variant(translation, count), data)

    def number_x(
        self,
        name: str,
        context: str,
        count: int,
        data: RenderContext = None,
    ) -> str:
        """Plural lookup of ``name`` disambiguated by ``context``."""
        return self.number(with_context(name, context), count, data)

    def lookup(self, name: str) -> CompiledTranslation:
        """Find the compiled translation used for ``name``.

        Order: the store entry for this locale (direct or backfilled), then
        the runtime cache, then ``name`` compiled as its own text in the
        default locale.
        """
        translation = self._parent.store.get(self._locale, name)
        if translation is not None:
            return translation
        return self._parent.compile_runtime(name)

    def __repr__(self) -> str:
        return f"Locale({self._locale!r})"
