"""Locale canonicalization and Accept-Language parsing.

Every locale code that reaches the store, the fallback map or a
selection candidate list goes through canonicalize_locale() first.
"""

from pathlib import PurePath
from typing import List, Optional


def canonicalize_locale(value: str) -> str:
    """Convert a filename or language tag to a canonical locale code.

    Takes the basename, keeps the text before the first ".", lowercases it
    and replaces "_" with "-". ``zh_TW.music.json``, ``zh_TW`` and ``zh-TW``
    all become ``zh-tw``.

    Args:
        value: Filename, path or language tag.

    Returns:
        Canonical locale code.
    """
    basename = PurePath(value.strip()).name
    return basename.split(".", 1)[0].lower().replace("_", "-")


def parse_accept_language(accept_language: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into ordered locale candidates.

    Order is preserved as written in the header; quality values are
    dropped, not used for sorting. Pass the result to
    ``I18n.new_locale(*candidates)``.

    Args:
        accept_language: Header value, e.g. "zh-TW,zh;q=0.9,en-US;q=0.8".

    Returns:
        Canonical locale codes, e.g. ["zh-tw", "zh", "en-us"].
    """
    if not accept_language:
        return []

    candidates = []
    for part in accept_language.split(","):
        lang_range = part.split(";", 1)[0].strip()
        if not lang_range:
            continue
        candidates.append(canonicalize_locale(lang_range))
    return candidates
