#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the enter/exit tree walk."""

import pytest

from mdplain.ast import builder as b
from mdplain.ast.traversal import iter_events, walk


def _events(tree):
    events = []
    walk(tree, lambda node, parent, index, entering: events.append((node, parent, index, entering)))
    return events


@pytest.mark.unit
class TestWalk:
    """Tests for walk()."""

    def test_root_is_not_visited(self) -> None:
        root = b.root()
        assert _events(root) == []

    def test_each_node_entered_and_exited_once(self) -> None:
        text = b.text("x")
        para = b.paragraph(text)
        root = b.root(para)

        events = _events(root)

        assert [entering for _, _, _, entering in events] == [True, True, False, False]
        assert events[0][0] is para
        assert events[1][0] is text
        assert events[2][0] is text
        assert events[3][0] is para

    def test_parent_is_passed(self) -> None:
        text = b.text("x")
        para = b.paragraph(text)
        root = b.root(para)

        parents = {id(node): parent for node, parent, _, _ in _events(root)}

        assert parents[id(para)] is root
        assert parents[id(text)] is para

    def test_index_is_position_in_parent(self) -> None:
        root = b.root(b.paragraph(b.text("a"), b.text("b")), b.paragraph(b.text("c")))
        entered = [(n.kind_name, index) for n, _, index, entering in _events(root) if entering]
        assert entered == [("paragraph", 0), ("text", 0), ("text", 1), ("paragraph", 1), ("text", 0)]

    def test_shared_node_reported_at_each_position(self) -> None:
        para = b.paragraph(b.text("a"))
        root = b.root(para, para, para)
        indexes = [(index, entering) for n, parent, index, entering in _events(root) if parent is root]
        assert indexes == [(0, True), (0, False), (1, True), (1, False), (2, True), (2, False)]

    def test_document_order(self) -> None:
        root = b.root(
            b.paragraph(b.text("a"), b.emphasis(b.text("b"))),
            b.paragraph(b.text("c")),
        )
        entered = [n.value for n, _, _, entering in _events(root) if entering and n.value is not None]
        assert entered == ["a", "b", "c"]

    def test_walk_subtree(self) -> None:
        para = b.paragraph(b.text("a"))
        events = _events(para)
        assert len(events) == 2
        assert events[0][1] is para

    def test_deep_nesting(self) -> None:
        node = b.text("leaf")
        for _ in range(200):
            node = b.blockquote(node)
        events = _events(b.root(node))
        assert len(events) == 2 * 201


@pytest.mark.unit
class TestIterEvents:
    """Tests for iter_events()."""

    def test_matches_walk(self) -> None:
        root = b.root(
            b.heading(1, b.text("T")),
            b.list_(b.list_item(b.paragraph(b.text("a"))), b.list_item(b.paragraph(b.text("b")))),
        )
        assert list(iter_events(root)) == _events(root)

    def test_is_lazy(self) -> None:
        events = iter_events(b.root(b.paragraph(b.text("a"))))
        node, parent, index, entering = next(events)
        assert node.kind_name == "paragraph"
        assert parent.kind_name == "root"
        assert index == 0
        assert entering is True
