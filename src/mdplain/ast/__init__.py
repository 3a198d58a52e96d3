#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/ast/__init__.py
"""Document tree model.

The module consists of several components:

- nodes: the ``NodeKind`` enumeration and the immutable ``Node`` dataclass
- builder: one factory function per node kind for hand-built trees
- traversal: depth-first enter/exit walk used by renderers
- serialization: mdast-compatible dict/JSON loading and dumping

Examples
--------
    >>> from mdplain.ast import builder as b
    >>> from mdplain.ast import iter_events
    >>> tree = b.root(b.paragraph(b.text("hi")))
    >>> [(node.kind_name, entering) for node, _, _, entering in iter_events(tree)]
    [('paragraph', True), ('text', True), ('text', False), ('paragraph', False)]

"""

from __future__ import annotations

from mdplain.ast import builder
from mdplain.ast.nodes import Kind, Node, NodeKind, coerce_kind
from mdplain.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from mdplain.ast.traversal import Visit, iter_events, walk

__all__ = [
    "Kind",
    "Node",
    "NodeKind",
    "Visit",
    "ast_to_dict",
    "ast_to_json",
    "builder",
    "coerce_kind",
    "dict_to_ast",
    "iter_events",
    "json_to_ast",
    "walk",
]
