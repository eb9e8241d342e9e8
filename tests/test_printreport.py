"""Report rendering tests for ``treecomparator.printreport``."""

from __future__ import annotations

import io
import unittest

from treecomparator import (
    BRANCH_MARKER,
    INDENT_BLOCK,
    NODE_A_IS_DIR,
    NODE_A_IS_FILE,
    NODE_DIFFERS,
    NODE_DIR,
    NODE_MISSING_IN_A,
    NODE_MISSING_IN_B,
    NODE_UNLISTABLE,
    NODE_UNREADABLE,
)
from treecomparator.printreport import (
    count_outcomes,
    format_branch,
    format_node,
    print_report,
    print_summary,
    write_tree,
)
from treecomparator.scan import DiffNode


def _node(kind: str, name: str = "x", depth: int = 1, **kwargs) -> DiffNode:
    return DiffNode(kind, name, "/a", "/b", depth, **kwargs)


class FormatTests(unittest.TestCase):
    def test_format_branch_prefix(self) -> None:
        self.assertEqual(format_branch(0, "<root>"), "|- <root>")
        self.assertEqual(format_branch(2, "msg"), "|  |  |- msg")
        self.assertEqual(len(INDENT_BLOCK), 3)
        self.assertEqual(format_branch(5, ""), INDENT_BLOCK * 5 + BRANCH_MARKER)

    def test_format_node_messages(self) -> None:
        cases = [
            (_node(NODE_DIR, is_dir=True), 'dir "x"'),
            (_node(NODE_DIFFERS), 'file "x" differs'),
            (_node(NODE_A_IS_DIR, is_dir=True), 'dir "x" in "/a" is a file in "/b"'),
            (_node(NODE_A_IS_FILE), 'file "x" in "/a" is a dir in "/b"'),
            (_node(NODE_MISSING_IN_A, is_dir=True), 'dir "x" is missing in "/a"'),
            (_node(NODE_MISSING_IN_A), 'file "x" is missing in "/a"'),
            (_node(NODE_MISSING_IN_B), 'file "x" is missing in "/b"'),
            (_node(NODE_MISSING_IN_B, is_dir=True), 'dir "x" is missing in "/b"'),
            (_node(NODE_UNREADABLE), 'file "x" could not be read'),
            (_node(NODE_UNLISTABLE, is_dir=True, error="boom"), 'dir "x" could not be compared (boom)'),
        ]
        for node, expected in cases:
            with self.subTest(kind=node.kind, is_dir=node.is_dir):
                self.assertEqual(format_node(node), expected)

    def test_unknown_kind_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            format_node(_node("bogus"))


class WriteTreeTests(unittest.TestCase):
    def _sample(self) -> list[DiffNode]:
        child = _node(NODE_DIFFERS, "inner.txt", depth=2)
        return [
            _node(NODE_MISSING_IN_B, "a.txt"),
            _node(NODE_DIR, "sub", is_dir=True, children=[child]),
            _node(NODE_DIR, "empty", is_dir=True),
        ]

    def test_children_follow_their_header(self) -> None:
        out = io.StringIO()
        write_tree(self._sample(), out)
        self.assertEqual(out.getvalue().splitlines(), [
            '|  |- file "a.txt" is missing in "/b"',
            '|  |- dir "sub"',
            '|  |  |- file "inner.txt" differs',
            '|  |- dir "empty"',
        ])

    def test_print_report_starts_with_root_line(self) -> None:
        out = io.StringIO()
        print_report([], out)
        self.assertEqual(out.getvalue(), "|- <root>\n")

        out = io.StringIO()
        print_report(self._sample(), out)
        self.assertEqual(out.getvalue().splitlines()[0], "|- <root>")
        self.assertEqual(len(out.getvalue().splitlines()), 5)

    def test_count_outcomes_includes_nested_nodes(self) -> None:
        counts = count_outcomes(self._sample())
        self.assertEqual(counts[NODE_DIR], 2)
        self.assertEqual(counts[NODE_DIFFERS], 1)
        self.assertEqual(counts[NODE_MISSING_IN_B], 1)
        self.assertEqual(counts[NODE_UNREADABLE], 0)

    def test_print_summary_lists_every_kind(self) -> None:
        counts = count_outcomes(self._sample())
        out = io.StringIO()
        print_summary(counts, 0.25, out)
        text = out.getvalue()
        self.assertTrue(text.startswith("DEBUG: Comparison summary\n"))
        for kind in counts:
            self.assertIn(kind, text)
        self.assertIn("0.250 seconds", text)


if __name__ == "__main__":
    unittest.main()
