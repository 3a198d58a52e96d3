#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/renderers/plaintext.py
"""Plain text rendering of document trees.

This module provides the PlainTextRenderer, which walks a document tree
depth-first and lets a per-kind rule append text fragments to an output
buffer on entry to and exit from every node. The fragments are joined into
the final string.

Rules are looked up in ``RENDER_RULES``, a table that has an entry for every
:class:`~mdplain.ast.nodes.NodeKind`. Most kinds are no-ops: their own markup
is dropped but their children are still rendered, so text nested inside
emphasis, tables or footnotes still appears.

Block kinds (paragraph, heading, list, list item, blockquote, code) are
separated from their siblings by a single newline. Links keep their target as
``[text](url)`` and struck-through text becomes ``(strikethrough: text)``.

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from mdplain.ast.nodes import Node, NodeKind
from mdplain.ast.traversal import walk
from mdplain.constants import (
    ROUND_BRACKET_END,
    ROUND_BRACKET_START,
    SQUARE_BRACKET_END,
    SQUARE_BRACKET_START,
)
from mdplain.exceptions import RenderingError
from mdplain.options.plaintext import PlainTextOptions
from mdplain.renderers.base import BaseRenderer
from mdplain.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

RenderRule = Callable[[Node, Node, int, bool, list[str], PlainTextOptions], None]

# Parents whose children are spaced as sibling blocks. Under any other parent a
# block is treated as having no siblings.
BLOCK_PARENT_KINDS = frozenset(
    {
        NodeKind.ROOT,
        NodeKind.PARAGRAPH,
        NodeKind.HEADING,
        NodeKind.LIST,
        NodeKind.LIST_ITEM,
        NodeKind.BLOCKQUOTE,
        NodeKind.CODE,
        NodeKind.INLINE_CODE,
        NodeKind.RAW_HTML,
        NodeKind.THEMATIC_BREAK,
        NodeKind.TABLE,
        NodeKind.TABLE_ROW,
    }
)


def _require(node: Node, field_name: str) -> str:
    value = getattr(node, field_name)
    if not isinstance(value, str):
        raise RenderingError(
            f"{node.kind_name} node requires a string '{field_name}', got {type(value).__name__}",
            rendering_stage=node.kind_name,
        )
    return value


# ============================================================================
# Blocks
# ============================================================================


def render_block(
    node: Node, parent: Node, index: int, entering: bool, out: list[str], options: PlainTextOptions
) -> None:
    """Separate a block from its siblings with ``options.block_separator``.

    The separator is appended on exit when a following sibling exists. On
    entry it is appended only when the preceding sibling is not itself a
    block, since a block sibling has already emitted it on exit.
    """
    if parent.kind not in BLOCK_PARENT_KINDS:
        return

    if entering:
        if index > 0 and not is_block_ruled(parent.children[index - 1]):
            out.append(options.block_separator)
    elif index < len(parent.children) - 1:
        out.append(options.block_separator)


def render_heading(
    node: Node, parent: Node, index: int, entering: bool, out: list[str], options: PlainTextOptions
) -> None:
    render_block(node, parent, index, entering, out, options)


def render_code(
    node: Node, parent: Node, index: int, entering: bool, out: list[str], options: PlainTextOptions
) -> None:
    """Render a code block as its literal source, spaced like any other block."""
    render_block(node, parent, index, entering, out, options)
    if entering:
        out.append(_require(node, "value"))


# ============================================================================
# Inlines
# ============================================================================


def render_text(
    node: Node, parent: Node, index: int, entering: bool, out: list[str], options: PlainTextOptions
) -> None:
    if entering:
        out.append(_require(node, "value"))


def render_inline_code(
    node: Node, parent: Node, index: int, entering: bool, out: list[str], options: PlainTextOptions
) -> None:
    if entering:
        out.append(_require(node, "value"))


def render_link(
    node: Node, parent: Node, index: int, entering: bool, out: list[str], options: PlainTextOptions
) -> None:
    """Render a link as ``[children](url)``."""
    if entering:
        out.append(SQUARE_BRACKET_START)
    else:
        out.append(SQUARE_BRACKET_END)
        out.append(ROUND_BRACKET_START)
        out.append(_require(node, "url"))
        out.append(ROUND_BRACKET_END)


def render_strikethrough(
    node: Node, parent: Node, index: int, entering: bool, out: list[str], options: PlainTextOptions
) -> None:
    """Render struck-through text as ``(strikethrough: children)``."""
    if entering:
        out.append(ROUND_BRACKET_START)
        out.append(options.strikethrough_phrase)
    else:
        out.append(ROUND_BRACKET_END)


def render_noop(
    node: Node, parent: Node, index: int, entering: bool, out: list[str], options: PlainTextOptions
) -> None:
    pass


RENDER_RULES: Mapping[NodeKind, RenderRule] = MappingProxyType(
    {
        NodeKind.ROOT: render_noop,
        NodeKind.TEXT: render_text,
        NodeKind.LINK: render_link,
        NodeKind.INLINE_CODE: render_inline_code,
        NodeKind.BLOCKQUOTE: render_block,
        NodeKind.LIST: render_block,
        NodeKind.LIST_ITEM: render_block,
        NodeKind.HEADING: render_heading,
        NodeKind.CODE: render_code,
        NodeKind.PARAGRAPH: render_block,
        NodeKind.STRIKETHROUGH: render_strikethrough,
        NodeKind.EMPHASIS: render_noop,
        NodeKind.STRONG: render_noop,
        NodeKind.IMAGE: render_noop,
        NodeKind.LINK_REFERENCE: render_noop,
        NodeKind.IMAGE_REFERENCE: render_noop,
        NodeKind.DEFINITION: render_noop,
        NodeKind.LINE_BREAK: render_noop,
        NodeKind.RAW_HTML: render_noop,
        NodeKind.THEMATIC_BREAK: render_noop,
        NodeKind.TABLE: render_noop,
        NodeKind.TABLE_ROW: render_noop,
        NodeKind.TABLE_CELL: render_noop,
        NodeKind.FRONT_MATTER: render_noop,
        NodeKind.FOOTNOTE_DEFINITION: render_noop,
        NodeKind.FOOTNOTE_REFERENCE: render_noop,
    }
)

_BLOCK_RULES = frozenset({render_block, render_heading, render_code})


def is_block_ruled(node: Node) -> bool:
    """Whether ``node`` is rendered with the sibling-spacing block rule."""
    return RENDER_RULES.get(node.kind) in _BLOCK_RULES  # type: ignore[call-overload]


class PlainTextRenderer(BaseRenderer):
    """Render document trees to plain text.

    The renderer holds no per-call state, so a single instance can be shared
    between threads. Each call to :meth:`render_to_string` owns its own
    output buffer.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain text rendering options

    Examples
    --------
    Basic usage:

        >>> from mdplain.ast import builder as b
        >>> from mdplain.renderers.plaintext import PlainTextRenderer
        >>> tree = b.root(
        ...     b.paragraph(b.text("Read "), b.link("http://x", b.text("this"))),
        ...     b.paragraph(b.strikethrough(b.text("old"))),
        ... )
        >>> PlainTextRenderer().render_to_string(tree)
        'Read [this](http://x)\\n(strikethrough: old)'

    """

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, PlainTextOptions, "plaintext")
        options = options or PlainTextOptions()
        super().__init__(options)
        self.options: PlainTextOptions = options

    def render_to_string(self, doc: Node) -> str:
        """Render a document tree to a plain text string.

        The root node itself is never rendered; only its descendants are.
        Nodes whose kind has no rule emit nothing, but their children are
        still rendered.

        Parameters
        ----------
        doc : Node
            Root node of the tree

        Returns
        -------
        str
            Plain text output

        Raises
        ------
        RenderingError
            If a node lacks a payload field its rule needs

        """
        out: list[str] = []
        unknown_kinds: set[str] = set()
        options = self.options

        def visit(node: Node, parent: Node, index: int, entering: bool) -> None:
            rule: Optional[RenderRule] = RENDER_RULES.get(node.kind)  # type: ignore[call-overload]
            if rule is None:
                if entering:
                    self._report_unknown_kind(node, unknown_kinds)
                return
            rule(node, parent, index, entering, out, options)

        with debug_timer(logger, "Rendering (plaintext)"):
            walk(doc, visit)

        return "".join(out)

    def _report_unknown_kind(self, node: Node, seen: set[str]) -> None:
        kind_name = node.kind_name
        if kind_name in seen:
            return
        seen.add(kind_name)
        level = logging.WARNING if self.options.warn_on_unknown_kinds else logging.DEBUG
        logger.log(level, "No renderer for node kind '%s'; rendering its children only", kind_name)


def render(tree: Node, options: PlainTextOptions | None = None) -> str:
    """Render ``tree`` to plain text.

    Parameters
    ----------
    tree : Node
        Root node of the tree
    options : PlainTextOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        Plain text output

    """
    return PlainTextRenderer(options).render_to_string(tree)


__all__ = [
    "BLOCK_PARENT_KINDS",
    "RENDER_RULES",
    "PlainTextRenderer",
    "RenderRule",
    "is_block_ruled",
    "render",
]
