"""Prefix trie with autocompletion and spelling suggestions."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from triedict.constants import DEFAULT_MAX_DISTANCE, ROOT_SYMBOL
from triedict.distance import levenshtein
from triedict.exceptions import EmptyWordError

log = logging.getLogger("triedict.trie")


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal", "symbol")

    def __init__(self, symbol: str = ROOT_SYMBOL):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False
        self.symbol = symbol

    def has_child(self, ch: str) -> bool:
        return ch in self.children

    def sorted_children(self) -> Iterator[tuple[str, TrieNode]]:
        """(edge character, child) pairs in ascending character order."""
        for ch in sorted(self.children):
            yield ch, self.children[ch]

    def __repr__(self) -> str:
        end = " *" if self.is_terminal else ""
        return f"<TrieNode {self.symbol!r}{end} children={len(self.children)}>"


class Trie:
    """Set of words stored as a prefix trie.

    Answers exact membership (:meth:`search`), prefix completion
    (:meth:`auto_suggest`) and approximate matching
    (:meth:`get_spelling_suggestions`). Every listing is returned in
    ascending lexicographic order.
    """

    def __init__(self, words: Iterable[str] | None = None):
        self.root = TrieNode()
        self._size = 0
        if words is not None:
            for w in words:
                self.insert(w)

    def insert(self, word: str) -> bool:
        """Add ``word``. Returns False if it was already present."""
        node = self.root
        for ch in word:
            if not node.has_child(ch):
                node.children[ch] = TrieNode(ch)
            node = node.children[ch]
        if node.is_terminal:
            return False
        node.is_terminal = True
        self._size += 1
        return True

    def search(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def auto_suggest(self, prefix: str) -> list[str]:
        """All stored words beginning with ``prefix``."""
        node = self._walk(prefix)
        if node is None:
            return []
        return self._words_with_prefix(node, prefix)

    def get_all_words(self) -> list[str]:
        return self._words_with_prefix(self.root, "")

    def get_spelling_suggestions(
        self, word: str, max_distance: int = DEFAULT_MAX_DISTANCE
    ) -> list[str]:
        """Stored words within ``max_distance`` edits of ``word``.

        Only words sharing the first letter of ``word`` are considered, so a
        typo in the first character is never corrected.
        """
        if not word:
            raise EmptyWordError("get_spelling_suggestions")

        first = word[0]
        if not self.root.has_child(first):
            log.debug("No words start with %r", first)
            return []

        candidates = self._words_with_prefix(self.root.children[first], first)
        suggestions = [w for w in candidates if levenshtein(word, w) <= max_distance]
        log.debug(
            "%d of %d candidates within distance %d of %r",
            len(suggestions), len(candidates), max_distance, word,
        )
        return suggestions

    # internals

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _words_with_prefix(self, node: TrieNode, prefix: str) -> list[str]:
        """Depth-first listing of every word at or below ``node``."""
        words: list[str] = []
        stack = [(node, prefix)]
        while stack:
            node, prefix = stack.pop()
            if node.is_terminal:
                words.append(prefix)
            # Reversed so the smallest child is popped first.
            for ch, child in reversed(list(node.sorted_children())):
                stack.append((child, prefix + ch))
        return words

    # container protocol

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_all_words())

    def __repr__(self) -> str:
        return f"<Trie words={self._size}>"
