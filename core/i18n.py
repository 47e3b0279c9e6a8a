"""Internationalization helpers.

Translations live in one nested JSON file per language under the configured
translations directory. Keys are dotted paths into that tree, e.g.
``"events.status.confirmed"``. Lookups try the active language first, then
English, and finally hand back the key itself so missing strings stay visible
in the UI.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

from core import config
from core.state import LANGUAGE_KEY, MemoryPreferenceStore, PreferenceStore

logger = logging.getLogger(__name__)

LanguageCode = Literal["en", "ro", "ru"]

DEFAULT_LANGUAGE: LanguageCode = "en"

AVAILABLE_LANGUAGES: List[Tuple[str, str]] = [
    ("en", "English"),
    ("ro", "Română"),
    ("ru", "Русский"),
]

SUPPORTED_LANGUAGES: Tuple[str, ...] = tuple(code for code, _ in AVAILABLE_LANGUAGES)


@dataclass(frozen=True)
class Leaf:
    text: str


@dataclass(frozen=True)
class Branch:
    children: Mapping[str, "TreeNode"]

    def to_dict(self) -> Dict[str, Any]:
        """Return the subtree as plain nested dicts and strings."""
        return {k: _plain(v) for k, v in self.children.items()}


TreeNode = Union[Leaf, Branch]

TranslationCatalog = Mapping[str, Branch]


def _plain(node: TreeNode) -> Union[str, Dict[str, Any]]:
    if isinstance(node, Branch):
        return node.to_dict()
    return node.text


def build_tree(raw: Any) -> TreeNode:
    """Convert a JSON-like value into ``Leaf``/``Branch`` nodes."""
    if isinstance(raw, Mapping):
        return Branch({str(k): build_tree(v) for k, v in raw.items()})
    return Leaf(str(raw))


def _load_language(directory: Path, lang: str) -> Branch:
    path = directory / f"{lang}.json"
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.warning("No translation file for %s at %s", lang, path)
        return Branch({})
    tree = build_tree(raw)
    if not isinstance(tree, Branch):
        logger.warning("Translation file %s is not an object; ignoring it", path)
        return Branch({})
    return tree


@lru_cache()
def _load_catalog(directory: str) -> Dict[str, Branch]:
    base = Path(directory)
    return {code: _load_language(base, code) for code, _ in AVAILABLE_LANGUAGES}


def load_catalog(directory: Optional[Union[str, Path]] = None) -> TranslationCatalog:
    """Load every supported language from ``directory`` (cached per path)."""
    if directory is None:
        directory = config.translations_dir()
    return _load_catalog(str(Path(directory).resolve()))


def _walk(root: TreeNode, segments: List[str]) -> Optional[TreeNode]:
    node = root
    for segment in segments:
        if isinstance(node, Branch) and segment in node.children:
            node = node.children[segment]
        else:
            return None
    return node


class Translator:
    """Resolve translation keys for one user session.

    The active language is seeded from ``store`` and written back to it on
    every accepted change. ``store`` may be ``None`` when no persistence is
    available, which behaves like an empty store.
    """

    def __init__(self, catalog: TranslationCatalog, store: Optional[PreferenceStore] = None) -> None:
        self._catalog = catalog
        self._store = store
        self._language: str = DEFAULT_LANGUAGE
        saved = store.get(LANGUAGE_KEY) if store is not None else None
        if saved and saved in SUPPORTED_LANGUAGES:
            self._language = saved
        logger.debug("Translator starting with language %s (saved=%r)", self._language, saved)

    @property
    def language(self) -> str:
        return self._language

    def _tree(self, lang: str) -> Branch:
        return self._catalog.get(lang) or Branch({})

    def t(self, key: str) -> Union[str, Dict[str, Any]]:
        """Translate ``key`` in the active language.

        Falls back to the default language, then to ``key`` itself. A key that
        names a whole section returns that section as a dict.
        """
        segments = key.split(".")
        node = _walk(self._tree(self._language), segments)
        if node is None:
            node = _walk(self._tree(DEFAULT_LANGUAGE), segments)
        if node is None:
            return key
        return _plain(node)

    def set_language(self, lang: str) -> None:
        """Switch to ``lang`` and remember it; unsupported codes are ignored."""
        if lang not in SUPPORTED_LANGUAGES:
            logger.debug("Ignoring unsupported language %r", lang)
            return
        self._language = lang
        if self._store is not None:
            self._store.set(LANGUAGE_KEY, lang)
        logger.info("Language set to %s", lang)

    @staticmethod
    def available_languages() -> List[Tuple[str, str]]:
        return list(AVAILABLE_LANGUAGES)


def t(key: str, lang: str = DEFAULT_LANGUAGE) -> Union[str, Dict[str, Any]]:
    """Translate ``key`` using the specified language without any persistence."""
    translator = Translator(load_catalog(), MemoryPreferenceStore({LANGUAGE_KEY: lang}))
    return translator.t(key)
