#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/ast/traversal.py
"""Depth-first enter/exit traversal of document trees.

The node passed to :func:`walk` is treated as the root: it is descended into
but never reported. Every node below it is reported exactly twice, once
before its children (``entering=True``) and once after them
(``entering=False``), together with its parent and its position among the
parent's children. Nodes hold no back-pointers, so both are threaded through
the recursion instead. Because the position comes from the recursion, the
same node object placed twice under one parent is reported at each of its
positions.

Examples
--------
Collect the order in which text nodes are entered:

    >>> from mdplain.ast import builder as b
    >>> seen = []
    >>> def visit(node, parent, index, entering):
    ...     if entering and node.kind == "text":
    ...         seen.append(node.value)
    >>> walk(b.root(b.paragraph(b.text("a")), b.paragraph(b.text("b"))), visit)
    >>> seen
    ['a', 'b']

"""

from __future__ import annotations

from typing import Callable, Iterator

from mdplain.ast.nodes import Node

Visit = Callable[[Node, Node, int, bool], None]


def walk(tree: Node, visit: Visit) -> None:
    """Walk ``tree`` depth-first, calling ``visit`` on entry and exit of each descendant.

    Parameters
    ----------
    tree : Node
        Root of the traversal; not itself passed to ``visit``
    visit : callable
        Called as ``visit(node, parent, index, entering)`` where ``index`` is
        the node's position in ``parent.children``

    """
    for index, child in enumerate(tree.children):
        _walk(child, tree, index, visit)


def _walk(node: Node, parent: Node, index: int, visit: Visit) -> None:
    visit(node, parent, index, True)

    for child_index, child in enumerate(node.children):
        _walk(child, node, child_index, visit)

    visit(node, parent, index, False)


def iter_events(tree: Node) -> Iterator[tuple[Node, Node, int, bool]]:
    """Yield ``(node, parent, index, entering)`` events in the order :func:`walk` reports them.

    Parameters
    ----------
    tree : Node
        Root of the traversal

    Yields
    ------
    tuple of (Node, Node, int, bool)
        Node, its parent, its position among the parent's children and the
        traversal phase

    """
    for index, child in enumerate(tree.children):
        yield child, tree, index, True
        yield from iter_events(child)
        yield child, tree, index, False


__all__ = ["Visit", "iter_events", "walk"]
