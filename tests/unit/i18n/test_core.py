"""Tests for localekit.i18n.core module."""

import pytest

from localekit.i18n import (
    I18n,
    TemplateCompileError,
    TranslationLoadError,
    yaml_unmarshaler,
)
from tests.factories.i18n import write_json


class TestI18n:
    """Tests for I18n construction and load_map()."""

    def test_initialization(self):
        """The default locale is canonicalized and the store starts empty."""
        i18n = I18n("ZH_TW")
        assert i18n.default_locale == "zh-tw"
        assert i18n.locales == []
        assert len(i18n.runtime_cache) == 0

    def test_load_map(self, i18n):
        """load_map() makes every loaded locale available."""
        assert i18n.locales == ["en-us", "ja-jp", "ko-kr", "zh-tw"]
        assert i18n.new_locale("zh-tw").string("test_message") == "這是一則測試訊息。"

    def test_load_map_canonicalizes_locales(self):
        """Locale keys of the batch are canonicalized."""
        i18n = I18n("en")
        i18n.load_map({"zh_TW": {"a": "A"}})
        assert i18n.locales == ["zh-tw"]

    def test_later_load_merges(self):
        """A later batch adds names to an already loaded locale."""
        i18n = I18n("en")
        i18n.load_map({"en": {"a": "A"}})
        i18n.load_map({"en": {"b": "B"}})
        locale = i18n.new_locale("en")
        assert locale.string("a") == "A"
        assert locale.string("b") == "B"

    def test_later_load_overwrites(self):
        """A later batch wins for the same name."""
        i18n = I18n("en")
        i18n.load_map({"en": {"a": "old"}})
        i18n.load_map({"en": {"a": "new"}})
        assert i18n.new_locale("en").string("a") == "new"

    def test_failed_load_leaves_store_unchanged(self):
        """A batch that fails to compile merges nothing."""
        i18n = I18n("en")
        i18n.load_map({"en": {"a": "A"}})
        with pytest.raises(TemplateCompileError):
            i18n.load_map({"en": {"b": "B", "c": "{{ oops"}, "fr": {"a": "Ah"}})
        assert i18n.locales == ["en"]
        assert i18n.store.names("en") == ["a"]

    def test_lenient_load_keeps_broken_template(self):
        """Lenient cores load broken templates as empty variants."""
        i18n = I18n("en", strict_templates=False)
        i18n.load_map({"en": {"c": "{{ oops"}})
        assert i18n.new_locale("en").string("c") == ""


class TestNewLocale:
    """Tests for I18n.new_locale()."""

    def test_first_matching_candidate(self, i18n):
        """The first candidate with a slot is bound."""
        assert i18n.new_locale("de-de", "ko-kr", "ja-jp").locale == "ko-kr"

    def test_candidates_canonicalized(self, i18n):
        """Candidates are compared in canonical form."""
        assert i18n.new_locale("JA_JP").locale == "ja-jp"

    def test_no_match_binds_default(self, i18n):
        """Without a match the default locale is bound."""
        assert i18n.new_locale("de-de", "fr").locale == "zh-tw"

    def test_no_candidates_binds_default(self, i18n):
        """Calling without candidates binds the default locale."""
        assert i18n.new_locale().locale == "zh-tw"

    def test_fallbacks_ignored_for_selection(self, translations):
        """Fallback configuration does not create slots."""
        i18n = I18n("en-us", fallbacks={"zh-hk": ["zh-tw"]})
        i18n.load_map(translations)
        assert i18n.new_locale("zh-hk", "ja-jp").locale == "ja-jp"

    def test_default_without_slot(self):
        """The default locale is bound even if nothing was loaded for it."""
        i18n = I18n("en")
        i18n.load_map({"fr": {"a": "Ah"}})
        locale = i18n.new_locale("de")
        assert locale.locale == "en"
        assert locale.string("a") == "a"

    def test_from_header(self, i18n):
        """new_locale_from_header() parses Accept-Language."""
        locale = i18n.new_locale_from_header("de-DE,ko-KR;q=0.9,ja;q=0.8")
        assert locale.locale == "ko-kr"

    def test_from_empty_header(self, i18n):
        """An empty header binds the default locale."""
        assert i18n.new_locale_from_header(None).locale == "zh-tw"


class TestFileLoading:
    """Tests for load_files(), load_glob() and load_resources()."""

    def test_load_files(self, temp_translations_dir):
        """Files named after the same locale merge into it."""
        i18n = I18n("zh-tw")
        i18n.load_files(
            temp_translations_dir / "zh-tw.json",
            temp_translations_dir / "zh_TW.json",
            str(temp_translations_dir / "zh_tw.hello.json"),
        )
        locale = i18n.new_locale("zh-tw")
        assert locale.string("message_a") == "訊息 A"
        assert locale.string("message_b") == "訊息 B"
        assert locale.string("message_c") == "訊息 C"

    def test_load_glob(self, temp_translations_dir):
        """load_glob() loads every matching file."""
        i18n = I18n("zh-tw")
        i18n.load_glob(str(temp_translations_dir / "*.json"))
        locale = i18n.new_locale("zh-tw")
        assert locale.string("message_a") == "訊息 A"
        assert locale.string("message_b") == "訊息 B"
        assert locale.string("message_c") == "訊息 C"

    def test_load_glob_no_match(self, tmp_path):
        """A pattern that matches nothing loads nothing."""
        i18n = I18n("en")
        i18n.load_glob(str(tmp_path / "*.json"))
        assert i18n.locales == []

    def test_load_resources_traversable(self, temp_translations_dir):
        """load_resources() accepts any Traversable root."""
        i18n = I18n("zh-tw")
        i18n.load_resources(temp_translations_dir, "*.json")
        assert i18n.new_locale("zh-tw").string("message_c") == "訊息 C"

    def test_load_resources_package(self, tmp_path, monkeypatch):
        """load_resources() reads files bundled in an importable package."""
        package = tmp_path / "bundled_locales_pkg"
        package.mkdir()
        (package / "__init__.py").write_text("")
        write_json(package / "locales", "ko_KR.json", {"hello": "안녕"})
        monkeypatch.syspath_prepend(str(tmp_path))

        i18n = I18n("en")
        i18n.load_resources("bundled_locales_pkg", "locales/*.json")
        assert i18n.new_locale("ko-kr").string("hello") == "안녕"

    def test_yaml_unmarshaler(self, temp_translations_dir):
        """A replaced unmarshaler decodes YAML files."""
        i18n = I18n("zh-tw", unmarshaler=yaml_unmarshaler)
        i18n.load_files(temp_translations_dir / "zh_tW.yml")
        assert i18n.new_locale("zh-tw").string("message_a") == "訊息 A"

    def test_missing_file(self, tmp_path):
        """Unreadable files propagate OSError."""
        with pytest.raises(FileNotFoundError):
            I18n("en").load_files(tmp_path / "missing.json")

    def test_decode_failure_keeps_previous_state(self, tmp_path):
        """A file that fails to decode leaves earlier loads intact."""
        i18n = I18n("en")
        i18n.load_map({"en": {"a": "A"}})
        write_json(tmp_path, "fr.json", {"a": "Ah"})
        (tmp_path / "de.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(TranslationLoadError):
            i18n.load_files(tmp_path / "fr.json", tmp_path / "de.json")

        assert i18n.locales == ["en"]
        assert i18n.new_locale("en").string("a") == "A"
