"""Rendering of compiled translation variants."""

from collections.abc import Mapping
from typing import Optional

from jinja2 import TemplateError

from localekit.i18n.exceptions import TemplateRenderError
from localekit.i18n.models import CompiledText, RenderContext
from localekit.logging import get_module_logger

logger = get_module_logger()


class Renderer:
    """Turns a compiled variant into the final string.

    Literal variants are returned as-is. Template variants are rendered
    against the data mapping, or an empty context when none is given.
    Data that is not a mapping is a render failure.

    Attributes:
        strict: Raise TemplateRenderError on failure. When False, the
            failure is logged and an empty string is returned.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def render(self, text: CompiledText, data: RenderContext = None) -> str:
        if text.template is None:
            return text.text

        if data is not None and not isinstance(data, Mapping):
            return self._fail(
                text, f"render data must be a mapping, got {type(data).__name__}"
            )

        try:
            return text.template.render(dict(data) if data else {})
        except TemplateError as e:
            return self._fail(text, str(e), e)

    def _fail(
        self, text: CompiledText, error: str, cause: Optional[Exception] = None
    ) -> str:
        if self.strict:
            raise TemplateRenderError(
                f"Failed to render {text.source!r}: {error}"
            ) from cause
        logger.warning("template_render_failed", source=text.source, error=error)
        return ""
