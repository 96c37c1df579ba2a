"""Exceptions raised by triedict."""


class TrieError(Exception):
    """Base class for triedict errors."""


class EmptyWordError(TrieError, ValueError):
    """A query needed at least one character but got an empty word."""

    def __init__(self, operation: str):
        super().__init__(f"{operation} needs a non-empty word")
        self.operation = operation


class DictionaryLoadError(TrieError):
    """An explicitly requested word list could not be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"could not load dictionary {path!r}: {reason}")
        self.path = path
