"""Plural variant selection."""

from localekit.i18n.exceptions import PluralIndexError
from localekit.i18n.models import CompiledText, CompiledTranslation


def default_pluralizor(number: int, choices: int) -> int:
    """Select a variant index for ``number`` among ``choices`` variants.

    With two variants, 0 and 1 share the first one and everything else
    takes the second. Otherwise 0, 1 and "many" map to 0, 1 and 2. The
    result never points past the last variant.
    """
    if choices == 2:
        return 0 if number in (0, 1) else 1

    if number == 0:
        index = 0
    elif number == 1:
        index = 1
    else:
        index = 2
    return min(index, max(choices - 1, 0))


def select_variant(translation: CompiledTranslation, count: int) -> CompiledText:
    """Pick the plural variant of ``translation`` for ``count``.

    Raises:
        PluralIndexError: If the attached pluralizor returns an index
            outside the translation's variants.
    """
    choices = len(translation.texts)
    index = translation.pluralizor(count, choices)
    if not isinstance(index, int) or not 0 <= index < choices:
        raise PluralIndexError(
            f"Pluralizor for {translation.locale!r} returned {index!r} "
            f"for {translation.name!r} with {choices} variants",
            index=index,
            choices=choices,
        )
    return translation.texts[index]
