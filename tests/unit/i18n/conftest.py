"""Feature-level fixtures for i18n system tests.

Provides translation files on disk and a fallback-configured core.
"""

import pytest

from localekit.i18n import I18n
from tests.factories.i18n import write_json, write_yaml


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a directory of translation files for zh-tw.

    Returns a directory structure like:
    - zh-tw.json          message_a
    - zh_TW.json          message_b
    - zh_tw.hello.json    message_c
    - zh_tW.yml           message_a (YAML)
    """
    write_json(tmp_path, "zh-tw.json", {"message_a": "訊息 A"})
    write_json(tmp_path, "zh_TW.json", {"message_b": "訊息 B"})
    write_json(tmp_path, "zh_tw.hello.json", {"message_c": "訊息 C"})
    write_yaml(tmp_path, "zh_tW.yml", {"message_a": "訊息 A"})
    return tmp_path


@pytest.fixture
def russian_pluralizor():
    """Pluralizor for Russian-style zero/one/few/many forms."""

    def pluralize(number: int, choices: int) -> int:
        if number == 0:
            return 0

        teen = 10 < number < 20
        ends_with_one = number % 10 == 1

        if choices < 4:
            return 1 if not teen and ends_with_one else 2
        if not teen and ends_with_one:
            return 1
        if not teen and 2 <= number % 10 <= 4:
            return 2
        return 3

    return pluralize


@pytest.fixture
def fallback_i18n(translations):
    """Core with zh-tw default and ja-jp falling back to ko-kr."""
    core = I18n("zh-tw", fallbacks={"ja-jp": ["ko-kr"]})
    core.load_map(translations)
    return core
