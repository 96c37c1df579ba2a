"""triedict — prefix trie with autocompletion and spelling suggestions."""

from triedict.constants import DEFAULT_MAX_DISTANCE, ROOT_SYMBOL
from triedict.dictionary import Dictionary
from triedict.distance import levenshtein
from triedict.exceptions import DictionaryLoadError, EmptyWordError, TrieError
from triedict.render import format_tree, write_tree
from triedict.trie import Trie, TrieNode

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "ROOT_SYMBOL",
    "Dictionary",
    "DictionaryLoadError",
    "EmptyWordError",
    "Trie",
    "TrieError",
    "TrieNode",
    "format_tree",
    "levenshtein",
    "write_tree",
]
