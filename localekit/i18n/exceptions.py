"""Custom exceptions for the i18n system.

Provides specialized exceptions for loading, template and plural
selection failures. A missing translation is never an error: lookups
render the key itself instead.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            i18n.load_glob("locales/*.json")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class TranslationLoadError(I18nError, ValueError):
    """Raised when translation content cannot be decoded.

    Covers unmarshaler failures and decoded documents that are not a
    flat mapping of names to texts. Nothing from the failed batch is
    merged into the store.
    """

    pass


class TemplateCompileError(I18nError, ValueError):
    """Raised when a template segment cannot be parsed.

    Attributes:
        locale: Locale of the translation being compiled.
        name: Translation name.
        segment: The offending segment source.
    """

    def __init__(self, message: str, locale: str, name: str, segment: str):
        super().__init__(message)
        self.locale = locale
        self.name = name
        self.segment = segment


class TemplateRenderError(I18nError):
    """Raised when a compiled template fails while rendering."""

    pass


class PluralIndexError(I18nError, IndexError):
    """Raised when a pluralizor selects a variant that does not exist.

    Example:
        >>> locale.number("apples", 5)  # pluralizor returned 3 for 2 variants
        Traceback (most recent call last):
        ...
        PluralIndexError: Pluralizor for 'ru' returned 3 for 'apples' with 2 variants
    """

    def __init__(self, message: str, index: int, choices: int):
        super().__init__(message)
        self.index = index
        self.choices = choices
