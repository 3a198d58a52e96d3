#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/ast/nodes.py
"""Document tree nodes.

This module defines the immutable tree that the plain text renderer consumes.
Every node is an instance of the single :class:`Node` dataclass, tagged with a
:class:`NodeKind`. Renderers dispatch on the tag through a lookup table rather
than through methods on node subclasses, so rendering logic never lives on the
tree itself.

Node Kinds
----------
Block-level kinds:
    - root, paragraph, heading, code, blockquote
    - list, list_item, table, table_row, table_cell
    - thematic_break, raw_html, definition
    - front_matter, footnote_definition

Inline kinds:
    - text, emphasis, strong, strikethrough, inline_code
    - link, image, line_break
    - link_reference, image_reference, footnote_reference

Payload
-------
Each kind uses a subset of the payload fields:

    ========================  ==============================================
    kind                      payload
    ========================  ==============================================
    text, inline_code         ``value``
    code                      ``value``, ``lang``
    raw_html, front_matter    ``value``
    heading                   ``depth``
    link                      ``url``, ``title``
    image                     ``url``, ``alt``, ``title``
    list                      ``ordered``, ``start``
    list_item                 ``checked``
    definition                ``identifier``, ``url``, ``title``
    link_reference            ``identifier``
    image_reference           ``identifier``, ``alt``
    footnote_definition       ``identifier``
    footnote_reference        ``identifier``
    ========================  ==============================================

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class NodeKind(str, Enum):
    """Closed enumeration of document tree node kinds."""

    ROOT = "root"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    TEXT = "text"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    LINK = "link"
    IMAGE = "image"
    INLINE_CODE = "inline_code"
    CODE = "code"
    LINE_BREAK = "line_break"
    LINK_REFERENCE = "link_reference"
    IMAGE_REFERENCE = "image_reference"
    DEFINITION = "definition"
    RAW_HTML = "raw_html"
    LIST = "list"
    LIST_ITEM = "list_item"
    BLOCKQUOTE = "blockquote"
    THEMATIC_BREAK = "thematic_break"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    FRONT_MATTER = "front_matter"
    FOOTNOTE_DEFINITION = "footnote_definition"
    FOOTNOTE_REFERENCE = "footnote_reference"

    def __str__(self) -> str:
        return self.value


# Kinds produced by external tree producers that this enumeration does not know
# are carried as plain strings.
Kind = Union[NodeKind, str]


def coerce_kind(kind: Kind) -> Kind:
    """Return the NodeKind matching ``kind``, or ``kind`` itself if unknown.

    Parameters
    ----------
    kind : NodeKind or str
        Kind tag or its string value

    Returns
    -------
    NodeKind or str
        The enumeration member when the value is known

    """
    if isinstance(kind, NodeKind):
        return kind
    try:
        return NodeKind(kind)
    except ValueError:
        return kind


@dataclass(frozen=True)
class Node:
    """A single node of the document tree.

    Parameters
    ----------
    kind : NodeKind or str
        Tag selecting the node's rendering rule. Unknown string kinds are
        allowed so that trees from other producers can still be rendered.
    children : tuple of Node, default = ()
        Child nodes in document order
    value : str or None, default = None
        Literal text for text, inline_code, code, raw_html and front_matter
    url : str or None, default = None
        Target for link, image and definition
    title : str or None, default = None
        Optional title for link, image and definition
    alt : str or None, default = None
        Alternative text for image and image_reference
    lang : str or None, default = None
        Language of a code block
    identifier : str or None, default = None
        Label for references, definitions and footnotes
    depth : int or None, default = None
        Heading level (1-6)
    ordered : bool or None, default = None
        Whether a list is numbered
    start : int or None, default = None
        First number of an ordered list
    checked : bool or None, default = None
        Task list state of a list item (None when not a task)
    metadata : dict, default = empty dict
        Producer-specific data; ignored by equality

    Examples
    --------
    >>> para = Node(NodeKind.PARAGRAPH, children=[Node(NodeKind.TEXT, value="hello")])
    >>> para.children[0].value
    'hello'

    """

    kind: Kind
    children: tuple[Node, ...] = ()
    value: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    alt: Optional[str] = None
    lang: Optional[str] = None
    identifier: Optional[str] = None
    depth: Optional[int] = None
    ordered: Optional[bool] = None
    start: Optional[int] = None
    checked: Optional[bool] = None
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        # Accept lists and plain strings from callers while keeping the node immutable
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "kind", coerce_kind(self.kind))

    @property
    def is_known_kind(self) -> bool:
        """Whether the node's kind belongs to :class:`NodeKind`."""
        return isinstance(self.kind, NodeKind)

    @property
    def kind_name(self) -> str:
        """String value of the node's kind."""
        return self.kind.value if isinstance(self.kind, NodeKind) else str(self.kind)


__all__ = ["Kind", "Node", "NodeKind", "coerce_kind"]
