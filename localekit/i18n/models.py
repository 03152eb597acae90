"""Translation models for the i18n system.

Defines the compiled form of translations shared between the store,
the runtime cache and the renderer.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from jinja2 import Template

# (quantity, variant count) -> variant index
Pluralizor = Callable[[int, int], int]

# Decodes raw file bytes into a flat name -> text mapping
Unmarshaler = Callable[[bytes], Mapping[str, str]]

# Locale -> name -> raw text, as produced by the loaders
RawTranslations = Mapping[str, Mapping[str, str]]

# Template variables by name; anything other than a mapping or None is a
# render failure
RenderContext = Optional[Mapping[str, Any]]


@dataclass(frozen=True)
class CompiledText:
    """One plural variant of a translation.

    Holds either a literal string or a compiled template, never both.

    Attributes:
        text: Literal text, used when no template is set.
        template: Compiled Jinja2 template.
        source: Original segment source.
    """

    text: str = ""
    template: Optional[Template] = None
    source: str = ""

    def __post_init__(self):
        if self.template is not None and self.text:
            raise ValueError("CompiledText holds either a literal or a template")

    @property
    def is_template(self) -> bool:
        return self.template is not None


@dataclass(frozen=True)
class CompiledTranslation:
    """A translation compiled once and reused for every lookup.

    The same instance may be referenced from several locale slots after
    fallback backfilling.

    Attributes:
        locale: Canonical locale the translation was compiled for.
        name: Lookup key, including any context suffix.
        pluralizor: Variant selector attached at compile time.
        texts: Ordered plural variants, at least one.
    """

    locale: str
    name: str
    pluralizor: Pluralizor
    texts: Tuple[CompiledText, ...]

    def __post_init__(self):
        if not self.texts:
            raise ValueError(f"Translation {self.name!r} has no variants")

    def __len__(self) -> int:
        return len(self.texts)
