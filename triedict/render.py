"""Text rendering of a trie's shape, for debugging."""

from __future__ import annotations

from typing import TextIO

from triedict.trie import Trie, TrieNode


def format_tree(trie: Trie, mark_terminal: bool = False) -> str:
    """Box-drawing picture of the trie, one node per line.

    Children are listed in ascending order. With ``mark_terminal`` a ``*``
    follows every node that ends a word.
    """
    lines = ["root"]
    stack = [(trie.root, " ", True)]
    while stack:
        node, indent, is_last = stack.pop()
        lines.append(_format_line(node, indent, is_last, mark_terminal))

        indent += "  " if is_last else "│ "
        children = [child for _, child in node.sorted_children()]
        for i in reversed(range(len(children))):
            stack.append((children[i], indent, i == len(children) - 1))
    return "\n".join(lines)


def write_tree(trie: Trie, stream: TextIO, mark_terminal: bool = False) -> None:
    stream.write(format_tree(trie, mark_terminal) + "\n")


def _format_line(node: TrieNode, indent: str, is_last: bool, mark_terminal: bool) -> str:
    branch = "└─" if is_last else "├─"
    end = "*" if mark_terminal and node.is_terminal else ""
    return f"{indent}{branch}{node.symbol}{end}"
