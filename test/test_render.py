import io
from unittest import TestCase

from triedict import Trie, format_tree, write_tree


class TestFormatTree(TestCase):
    def test_empty(self):
        self.assertEqual(format_tree(Trie()), "root\n └─ ")

    def test_shape(self):
        trie = Trie(["to", "tea", "a"])
        expected = "\n".join([
            "root",
            " └─ ",
            "   ├─a",
            "   └─t",
            "     ├─e",
            "     │ └─a",
            "     └─o",
        ])
        self.assertEqual(format_tree(trie), expected)

    def test_mark_terminal(self):
        trie = Trie(["to", "t"])
        self.assertEqual(
            format_tree(trie, mark_terminal=True),
            "root\n └─ \n   └─t*\n     └─o*",
        )

    def test_write_tree(self):
        trie = Trie(["ab"])
        out = io.StringIO()
        write_tree(trie, out)
        self.assertEqual(out.getvalue(), format_tree(trie) + "\n")

    def test_long_word(self):
        trie = Trie(["x" * 2000])
        lines = format_tree(trie).splitlines()
        self.assertEqual(len(lines), 2002)
        self.assertTrue(lines[-1].endswith("└─x"))
