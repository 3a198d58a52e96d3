#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the document tree model and builders."""

import dataclasses

import pytest

from mdplain.ast import builder as b
from mdplain.ast.nodes import Node, NodeKind, coerce_kind


@pytest.mark.unit
class TestNodeKind:
    """Tests for the NodeKind enumeration."""

    def test_kind_count(self) -> None:
        assert len(NodeKind) == 26

    def test_values_are_strings(self) -> None:
        assert NodeKind.INLINE_CODE == "inline_code"
        assert str(NodeKind.LIST_ITEM) == "list_item"

    def test_coerce_known_value(self) -> None:
        assert coerce_kind("paragraph") is NodeKind.PARAGRAPH

    def test_coerce_unknown_value_is_kept(self) -> None:
        assert coerce_kind("mathBlock") == "mathBlock"
        assert not isinstance(coerce_kind("mathBlock"), NodeKind)


@pytest.mark.unit
class TestNode:
    """Tests for the Node dataclass."""

    def test_children_list_becomes_tuple(self) -> None:
        node = Node(NodeKind.PARAGRAPH, children=[b.text("a"), b.text("b")])
        assert isinstance(node.children, tuple)
        assert len(node.children) == 2

    def test_string_kind_is_coerced(self) -> None:
        node = Node("heading", depth=2)
        assert node.kind is NodeKind.HEADING
        assert node.is_known_kind

    def test_unknown_kind(self) -> None:
        node = Node("custom_widget")
        assert not node.is_known_kind
        assert node.kind_name == "custom_widget"

    def test_nodes_are_frozen(self) -> None:
        node = b.text("hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = "changed"  # type: ignore[misc]

    def test_equality_ignores_metadata(self) -> None:
        assert Node(NodeKind.TEXT, value="a", metadata={"x": 1}) == Node(NodeKind.TEXT, value="a")

    def test_nodes_are_hashable(self) -> None:
        assert len({b.text("a"), b.text("a"), b.text("b")}) == 2


@pytest.mark.unit
class TestBuilder:
    """Tests for the node factory functions."""

    def test_heading(self) -> None:
        heading = b.heading(3, b.text("Title"))
        assert heading.kind is NodeKind.HEADING
        assert heading.depth == 3
        assert heading.children[0].value == "Title"

    def test_link(self) -> None:
        link = b.link("https://example.com", b.text("go"), title="Example")
        assert link.url == "https://example.com"
        assert link.title == "Example"

    def test_image_has_no_children(self) -> None:
        image = b.image("cat.png", alt="a cat")
        assert image.alt == "a cat"
        assert image.children == ()

    def test_code(self) -> None:
        code = b.code("print(1)", lang="python")
        assert code.value == "print(1)"
        assert code.lang == "python"

    def test_list(self) -> None:
        items = b.list_(b.list_item(b.paragraph(b.text("a")), checked=True), ordered=True, start=3)
        assert items.ordered is True
        assert items.start == 3
        assert items.children[0].checked is True

    def test_root_metadata(self) -> None:
        root = b.root(metadata={"frontmatter": {"title": "x"}})
        assert root.metadata == {"frontmatter": {"title": "x"}}
        assert b.root().metadata == {}

    def test_front_matter(self) -> None:
        node = b.front_matter("title: x", {"title": "x"})
        assert node.kind is NodeKind.FRONT_MATTER
        assert node.value == "title: x"
        assert node.metadata["data"] == {"title": "x"}

    def test_footnotes(self) -> None:
        ref = b.footnote_reference("1")
        definition = b.footnote_definition("1", b.paragraph(b.text("note")))
        assert ref.identifier == definition.identifier == "1"
