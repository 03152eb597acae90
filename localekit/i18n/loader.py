"""Translation loading interface and implementations.

Loaders read translation files, decode them with a pluggable unmarshaler
and return raw locale -> name -> text maps. They know nothing about
compilation; ``I18n.load_map()`` takes it from there.

The locale of a file is derived from its name: ``zh_TW.json``,
``zh-tw.yml`` and ``zh_TW.music.json`` all load into ``zh-tw``.
"""

import glob
import json
from abc import ABC, abstractmethod
from fnmatch import fnmatchcase
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

import structlog
import yaml

from localekit.i18n.exceptions import TranslationLoadError
from localekit.i18n.models import Unmarshaler
from localekit.i18n.resolvers import canonicalize_locale

logger = structlog.get_logger()

PathLike = Union[str, Path]


def _validate_mapping(data, fmt: str) -> Dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TranslationLoadError(
            f"Expected a mapping of names to texts in {fmt} document, "
            f"got {type(data).__name__}"
        )
    for name, text in data.items():
        if not isinstance(name, str) or not isinstance(text, str):
            raise TranslationLoadError(
                f"Translation {name!r} in {fmt} document must map a string "
                f"name to a string text"
            )
    return dict(data)


def json_unmarshaler(data: bytes) -> Dict[str, str]:
    """Decode a flat JSON object of names to texts."""
    try:
        decoded = json.loads(data)
    except ValueError as e:
        raise TranslationLoadError(f"Invalid JSON translation document: {e}") from e
    return _validate_mapping(decoded, "JSON")


def yaml_unmarshaler(data: bytes) -> Dict[str, str]:
    """Decode a flat YAML mapping of names to texts."""
    try:
        decoded = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise TranslationLoadError(f"Invalid YAML translation document: {e}") from e
    return _validate_mapping(decoded, "YAML")


UNMARSHALERS: Dict[str, Unmarshaler] = {
    "json": json_unmarshaler,
    "yaml": yaml_unmarshaler,
}


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations decide where translation bytes come from; decoding
    and per-locale merging are shared.

    Attributes:
        unmarshaler: Decoder turning file bytes into a name -> text mapping.
    """

    def __init__(self, unmarshaler: Unmarshaler = json_unmarshaler):
        self.unmarshaler = unmarshaler

    @abstractmethod
    def sources(self) -> Iterable[Tuple[str, bytes]]:
        """Yield (filename, raw bytes) pairs in load order.

        Raises:
            OSError: If a source cannot be read.
        """
        pass

    def load(self) -> Dict[str, Dict[str, str]]:
        """Read and decode every source into a locale -> name -> text map.

        Files are merged in load order; a later file wins for the same
        locale and name.

        Raises:
            OSError: If a source cannot be read.
            TranslationLoadError: If a source cannot be decoded.
        """
        data: Dict[str, Dict[str, str]] = {}
        file_count = 0

        for filename, raw in self.sources():
            try:
                translations = self.unmarshaler(raw)
            except Exception as e:
                # Custom unmarshalers may raise anything
                logger.error("translation_decode_error", file=filename, error=str(e))
                raise TranslationLoadError(f"Failed to decode {filename}: {e}") from e

            locale = canonicalize_locale(filename)
            data.setdefault(locale, {}).update(translations)
            file_count += 1

        logger.info(
            "translation_files_read",
            loader=type(self).__name__,
            file_count=file_count,
            locale_count=len(data),
        )
        return data


class FileTranslationLoader(TranslationLoader):
    """Loader for an explicit list of translation files."""

    def __init__(
        self,
        paths: Sequence[PathLike],
        unmarshaler: Unmarshaler = json_unmarshaler,
    ):
        super().__init__(unmarshaler)
        self.paths = [Path(p) for p in paths]

    def sources(self) -> Iterator[Tuple[str, bytes]]:
        for path in self.paths:
            yield str(path), path.read_bytes()


class GlobTranslationLoader(TranslationLoader):
    """Loader for the files matching one or more glob patterns.

    Matches of each pattern are sorted; patterns are applied in order.
    ``**`` matches across directories.
    """

    def __init__(
        self,
        patterns: Sequence[str],
        unmarshaler: Unmarshaler = json_unmarshaler,
    ):
        super().__init__(unmarshaler)
        self.patterns = [str(p) for p in patterns]

    def paths(self) -> List[Path]:
        matched: List[Path] = []
        for pattern in self.patterns:
            hits = sorted(glob.glob(pattern, recursive=True))
            if not hits:
                logger.warning("translation_glob_no_match", pattern=pattern)
            matched.extend(Path(hit) for hit in hits if Path(hit).is_file())
        return matched

    def sources(self) -> Iterator[Tuple[str, bytes]]:
        for path in self.paths():
            yield str(path), path.read_bytes()


class ResourceTranslationLoader(TranslationLoader):
    """Loader for translation files shipped inside a Python package.

    Walks ``importlib.resources.files(package)`` and loads every file whose
    package-relative POSIX path matches one of the patterns, e.g.
    ``"locales/*.json"``.
    """

    def __init__(
        self,
        package: Union[str, ModuleType, Traversable],
        patterns: Sequence[str],
        unmarshaler: Unmarshaler = json_unmarshaler,
    ):
        super().__init__(unmarshaler)
        if isinstance(package, (str, ModuleType)):
            self.root: Traversable = files(package)
        else:
            self.root = package
        self.patterns = list(patterns)

    def _walk(self, node: Traversable, prefix: str) -> Iterator[Tuple[str, Traversable]]:
        for child in sorted(node.iterdir(), key=lambda c: c.name):
            relative = f"{prefix}{child.name}"
            if child.is_dir():
                yield from self._walk(child, f"{relative}/")
            elif child.is_file():
                yield relative, child

    def sources(self) -> Iterator[Tuple[str, bytes]]:
        entries = list(self._walk(self.root, ""))
        for pattern in self.patterns:
            matched = [(rel, node) for rel, node in entries if fnmatchcase(rel, pattern)]
            if not matched:
                logger.warning("translation_resource_no_match", pattern=pattern)
            for relative, node in matched:
                yield relative, node.read_bytes()
