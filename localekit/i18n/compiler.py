"""Compilation of raw translation text into reusable compiled form.

A raw text is split on " | " into ordered plural variants. Variants that
contain the template-open marker are compiled into Jinja2 templates once;
everything else is kept as a literal and never touches the template engine.
"""

from typing import Dict, Mapping, Optional

from jinja2 import Environment, TemplateSyntaxError, Undefined

from localekit.i18n.exceptions import TemplateCompileError
from localekit.i18n.models import CompiledText, CompiledTranslation, Pluralizor
from localekit.i18n.plurals import default_pluralizor
from localekit.logging import get_module_logger

logger = get_module_logger()

SEPARATOR = " | "
TEMPLATE_MARKER = "{{"


def trim_context(name: str) -> str:
    """Strip a trailing " <context>" group from a translation name.

    Only a group anchored at the very end of the string is removed, e.g.
    "Post <verb>" becomes "Post". Names without a well-formed suffix are
    returned unchanged.
    """
    if not name.endswith(">"):
        return name
    start = name.rfind("<")
    if start < 1 or name[start - 1] != " " or ">" in name[start:-1]:
        return name
    return name[: start - 1]


def with_context(name: str, context: str) -> str:
    """Build the lookup key for ``name`` disambiguated by ``context``."""
    return f"{name} <{context}>"


def create_environment() -> Environment:
    """Create the Jinja2 environment used to compile translation templates.

    Undefined variables render empty, so a template key looked up without
    data still renders. Using an undefined value (attribute access, calls)
    is a render error.
    """
    return Environment(
        autoescape=False,
        keep_trailing_newline=True,
        undefined=Undefined,
    )


class Compiler:
    """Compiles raw translation text for a locale.

    Attributes:
        environment: Jinja2 environment templates are compiled with.
        pluralizors: Custom pluralizors by canonical locale.
        strict: Raise TemplateCompileError on unparsable templates. When
            False, such a variant compiles to an empty literal.
        compile_count: Number of translations compiled so far.
    """

    def __init__(
        self,
        pluralizors: Optional[Mapping[str, Pluralizor]] = None,
        strict: bool = True,
        environment: Optional[Environment] = None,
    ):
        self.pluralizors: Dict[str, Pluralizor] = dict(pluralizors or {})
        self.strict = strict
        self.environment = environment or create_environment()
        self.compile_count = 0

    def pluralizor(self, locale: str) -> Pluralizor:
        """Return the custom pluralizor for ``locale`` or the default one."""
        return self.pluralizors.get(locale, default_pluralizor)

    def compile(self, locale: str, name: str, text: str) -> CompiledTranslation:
        """Compile ``text`` into a translation named ``name`` for ``locale``.

        Raises:
            TemplateCompileError: If a template variant fails to parse and
                the compiler is strict.
        """
        texts = tuple(
            self._compile_segment(locale, name, segment)
            for segment in text.split(SEPARATOR)
        )
        self.compile_count += 1
        return CompiledTranslation(
            locale=locale,
            name=name,
            pluralizor=self.pluralizor(locale),
            texts=texts,
        )

    def _compile_segment(self, locale: str, name: str, segment: str) -> CompiledText:
        if TEMPLATE_MARKER not in segment:
            return CompiledText(text=segment, source=segment)

        try:
            template = self.environment.from_string(segment)
        except TemplateSyntaxError as e:
            if self.strict:
                raise TemplateCompileError(
                    f"Invalid template in {name!r} for {locale}: {e.message}",
                    locale=locale,
                    name=name,
                    segment=segment,
                ) from e
            logger.warning(
                "template_compile_failed",
                locale=locale,
                name=name,
                error=str(e),
            )
            return CompiledText(source=segment)

        return CompiledText(template=template, source=segment)
