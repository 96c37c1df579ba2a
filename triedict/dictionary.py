"""Word list loaded into a trie for lookups, completion and suggestions."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from triedict.constants import DEFAULT_MAX_DISTANCE, DICTIONARY_SEARCH_PATHS, MINIMAL_WORDS
from triedict.exceptions import DictionaryLoadError
from triedict.trie import Trie

log = logging.getLogger("triedict")


class Dictionary:
    """Trie-backed word list.

    Words come from ``words`` when given. Otherwise the first existing file
    among ``dict_path`` and :data:`DICTIONARY_SEARCH_PATHS` is read, one word
    per line. With no file found a small built-in list is used; an explicit
    ``dict_path`` that is missing or holds no words raises
    :class:`DictionaryLoadError` instead. Words are stripped and lower-cased
    on load and on :meth:`add`; queries are lower-cased.
    """

    def __init__(
        self,
        dict_path: str | None = None,
        words: Iterable[str] | None = None,
        search_paths: list[str] | None = None,
    ):
        self.trie = Trie()
        self.source: str | None = None
        if words is not None:
            self._insert_all(words)
            self.source = "<memory>"
        else:
            self._load(dict_path, DICTIONARY_SEARCH_PATHS if search_paths is None else search_paths)

    def _load(self, dict_path: str | None, search_paths: list[str]) -> None:
        if dict_path:
            if not os.path.exists(dict_path):
                raise DictionaryLoadError(dict_path, "no such file")
            paths = [dict_path]
        else:
            paths = search_paths

        for path in paths:
            if os.path.exists(path):
                self._load_file(path)
                if len(self.trie):
                    log.info("Loaded %s words from %s", f"{len(self.trie):,}", path)
                    self.source = path
                    return
                if dict_path:
                    raise DictionaryLoadError(dict_path, "no words")

        log.warning("No dictionary file found -- using built-in minimal word list.")
        self._insert_all(MINIMAL_WORDS)
        self.source = "<builtin>"

    def _load_file(self, path: str) -> None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                self._insert_all(f)
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(path, str(exc)) from exc

    def _insert_all(self, words: Iterable[str]) -> None:
        for word in words:
            word = word.strip().lower()
            if word:
                self.trie.insert(word)

    def add(self, word: str) -> bool:
        return self.trie.insert(word.strip().lower())

    def is_valid(self, word: str) -> bool:
        return self.trie.search(word.lower())

    def complete(self, prefix: str) -> list[str]:
        return self.trie.auto_suggest(prefix.lower())

    def suggest(self, word: str, max_distance: int = DEFAULT_MAX_DISTANCE) -> list[str]:
        """Spelling suggestions for ``word``; empty if it is already valid."""
        word = word.lower()
        if self.trie.search(word):
            return []
        return self.trie.get_spelling_suggestions(word, max_distance)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.trie)
