#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/ast/builder.py
"""Factory functions for building document trees by hand.

One function per node kind keeps hand-written trees short and readable:

    >>> from mdplain.ast import builder as b
    >>> tree = b.root(
    ...     b.heading(1, b.text("Title")),
    ...     b.paragraph(b.text("See "), b.link("https://example.com", b.text("here"))),
    ... )
    >>> tree.children[1].children[1].url
    'https://example.com'

"""

from __future__ import annotations

from typing import Any, Optional

from mdplain.ast.nodes import Node, NodeKind


def root(*children: Node, metadata: Optional[dict[str, Any]] = None) -> Node:
    """Create the root node of a document."""
    return Node(NodeKind.ROOT, children=children, metadata=metadata or {})


def paragraph(*children: Node) -> Node:
    return Node(NodeKind.PARAGRAPH, children=children)


def heading(depth: int, *children: Node) -> Node:
    """Create a heading of the given level (1-6)."""
    return Node(NodeKind.HEADING, children=children, depth=depth)


def text(value: str) -> Node:
    return Node(NodeKind.TEXT, value=value)


def emphasis(*children: Node) -> Node:
    return Node(NodeKind.EMPHASIS, children=children)


def strong(*children: Node) -> Node:
    return Node(NodeKind.STRONG, children=children)


def strikethrough(*children: Node) -> Node:
    return Node(NodeKind.STRIKETHROUGH, children=children)


def link(url: str, *children: Node, title: Optional[str] = None) -> Node:
    return Node(NodeKind.LINK, children=children, url=url, title=title)


def image(url: str, alt: str = "", title: Optional[str] = None) -> Node:
    return Node(NodeKind.IMAGE, url=url, alt=alt, title=title)


def inline_code(value: str) -> Node:
    return Node(NodeKind.INLINE_CODE, value=value)


def code(value: str, lang: Optional[str] = None) -> Node:
    """Create a fenced or indented code block holding ``value`` verbatim."""
    return Node(NodeKind.CODE, value=value, lang=lang)


def line_break() -> Node:
    return Node(NodeKind.LINE_BREAK)


def link_reference(identifier: str, *children: Node) -> Node:
    return Node(NodeKind.LINK_REFERENCE, children=children, identifier=identifier)


def image_reference(identifier: str, alt: str = "") -> Node:
    return Node(NodeKind.IMAGE_REFERENCE, identifier=identifier, alt=alt)


def definition(identifier: str, url: str, title: Optional[str] = None) -> Node:
    return Node(NodeKind.DEFINITION, identifier=identifier, url=url, title=title)


def raw_html(value: str) -> Node:
    return Node(NodeKind.RAW_HTML, value=value)


def list_(*items: Node, ordered: bool = False, start: Optional[int] = None) -> Node:
    """Create a list; named with a trailing underscore to avoid shadowing ``list``."""
    return Node(NodeKind.LIST, children=items, ordered=ordered, start=start)


def list_item(*children: Node, checked: Optional[bool] = None) -> Node:
    return Node(NodeKind.LIST_ITEM, children=children, checked=checked)


def blockquote(*children: Node) -> Node:
    return Node(NodeKind.BLOCKQUOTE, children=children)


def thematic_break() -> Node:
    return Node(NodeKind.THEMATIC_BREAK)


def table(*rows: Node) -> Node:
    return Node(NodeKind.TABLE, children=rows)


def table_row(*cells: Node) -> Node:
    return Node(NodeKind.TABLE_ROW, children=cells)


def table_cell(*children: Node) -> Node:
    return Node(NodeKind.TABLE_CELL, children=children)


def front_matter(value: str, data: Optional[dict[str, Any]] = None) -> Node:
    """Create a front matter node; parsed fields go into ``metadata['data']``."""
    return Node(NodeKind.FRONT_MATTER, value=value, metadata={"data": data} if data is not None else {})


def footnote_definition(identifier: str, *children: Node) -> Node:
    return Node(NodeKind.FOOTNOTE_DEFINITION, children=children, identifier=identifier)


def footnote_reference(identifier: str) -> Node:
    return Node(NodeKind.FOOTNOTE_REFERENCE, identifier=identifier)
