#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/ast/serialization.py
"""Dict and JSON (de)serialization for document trees.

Trees can be loaded from mdast-shaped data, i.e. nested objects with a
``type`` tag, an optional ``children`` list and payload keys such as
``value`` and ``url``. Both the mdast camelCase type names (``inlineCode``,
``listItem``, ``delete``, ``break``, ``html``, ``yaml``, ...) and this
package's own kind values (``inline_code``, ``list_item``, ...) are accepted.
Any producer that emits this shape can therefore feed the renderer.

Types that are neither are kept as plain-string kinds; the renderer skips
them while still rendering their children.

Examples
--------
Load an mdast tree:

    >>> tree = dict_to_ast({
    ...     "type": "root",
    ...     "children": [{"type": "paragraph", "children": [{"type": "inlineCode", "value": "x"}]}],
    ... })
    >>> tree.children[0].children[0].kind
    <NodeKind.INLINE_CODE: 'inline_code'>

Serialize back to JSON:

    >>> ast_to_json(tree)
    '{"type": "root", "children": [{"type": "paragraph", "children": [{"type": "inline_code", "value": "x"}]}]}'

"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Mapping, Optional

from mdplain.ast.nodes import Kind, Node, NodeKind, coerce_kind
from mdplain.exceptions import MalformedTreeError

MDAST_TYPE_NAMES: Mapping[str, NodeKind] = MappingProxyType(
    {
        "root": NodeKind.ROOT,
        "paragraph": NodeKind.PARAGRAPH,
        "heading": NodeKind.HEADING,
        "text": NodeKind.TEXT,
        "emphasis": NodeKind.EMPHASIS,
        "strong": NodeKind.STRONG,
        "delete": NodeKind.STRIKETHROUGH,
        "link": NodeKind.LINK,
        "image": NodeKind.IMAGE,
        "inlineCode": NodeKind.INLINE_CODE,
        "code": NodeKind.CODE,
        "break": NodeKind.LINE_BREAK,
        "linkReference": NodeKind.LINK_REFERENCE,
        "imageReference": NodeKind.IMAGE_REFERENCE,
        "definition": NodeKind.DEFINITION,
        "html": NodeKind.RAW_HTML,
        "list": NodeKind.LIST,
        "listItem": NodeKind.LIST_ITEM,
        "blockquote": NodeKind.BLOCKQUOTE,
        "thematicBreak": NodeKind.THEMATIC_BREAK,
        "table": NodeKind.TABLE,
        "tableRow": NodeKind.TABLE_ROW,
        "tableCell": NodeKind.TABLE_CELL,
        "yaml": NodeKind.FRONT_MATTER,
        "footnoteDefinition": NodeKind.FOOTNOTE_DEFINITION,
        "footnoteReference": NodeKind.FOOTNOTE_REFERENCE,
    }
)

# payload key -> accepted Python types
_STRING_FIELDS = ("value", "url", "title", "alt", "lang", "identifier")
_INT_FIELDS = ("depth", "start")
_BOOL_FIELDS = ("ordered", "checked")


def resolve_kind(type_name: str) -> Kind:
    """Map an mdast or snake_case type name onto a kind.

    Parameters
    ----------
    type_name : str
        Value of a serialized node's ``type`` key

    Returns
    -------
    NodeKind or str
        The matching kind, or ``type_name`` unchanged when unknown

    """
    if type_name in MDAST_TYPE_NAMES:
        return MDAST_TYPE_NAMES[type_name]
    return coerce_kind(type_name)


def _check_type(data: Mapping[str, Any], key: str, expected: tuple[type, ...], path: str) -> Any:
    value = data.get(key)
    if value is None:
        return None
    # bool is a subclass of int; reject it for integer payloads
    if not isinstance(value, expected) or (int in expected and bool not in expected and isinstance(value, bool)):
        names = " or ".join(t.__name__ for t in expected)
        raise MalformedTreeError(f"Field '{key}' must be {names}, got {type(value).__name__}", path=path)
    return value


def _dict_to_node(data: Any, path: str, active: set[int]) -> Node:
    if not isinstance(data, Mapping):
        raise MalformedTreeError(f"Expected a node object, got {type(data).__name__}", path=path)

    marker = id(data)
    if marker in active:
        raise MalformedTreeError("Cycle detected in tree input", path=path)

    type_name = data.get("type")
    if not isinstance(type_name, str) or not type_name:
        raise MalformedTreeError("Node is missing a 'type' string", path=path)

    raw_children = data.get("children", [])
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        raise MalformedTreeError(f"'children' must be a list, got {type(raw_children).__name__}", path=path)

    active.add(marker)
    try:
        children = tuple(
            _dict_to_node(child, f"{path}.children[{i}]", active) for i, child in enumerate(raw_children)
        )
    finally:
        active.discard(marker)

    payload: dict[str, Any] = {}
    for key in _STRING_FIELDS:
        payload[key] = _check_type(data, key, (str,), path)
    for key in _INT_FIELDS:
        payload[key] = _check_type(data, key, (int,), path)
    for key in _BOOL_FIELDS:
        payload[key] = _check_type(data, key, (bool,), path)

    metadata = data.get("metadata", data.get("data"))
    if metadata is not None and not isinstance(metadata, Mapping):
        raise MalformedTreeError("'metadata' must be an object", path=path)

    return Node(kind=resolve_kind(type_name), children=children, metadata=dict(metadata or {}), **payload)


def dict_to_ast(data: Mapping[str, Any]) -> Node:
    """Build a tree from mdast-shaped nested dictionaries.

    Parameters
    ----------
    data : Mapping
        Serialized root node

    Returns
    -------
    Node
        Root of the loaded tree

    Raises
    ------
    MalformedTreeError
        If a node lacks a ``type``, has a non-list ``children``, carries a
        payload of the wrong type, or the structure contains a cycle

    """
    return _dict_to_node(data, "root", set())


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a tree to nested dictionaries.

    Kinds are written as their snake_case values; ``None`` payloads and
    empty children lists are omitted.

    Parameters
    ----------
    node : Node
        Root of the tree to serialize

    Returns
    -------
    dict
        JSON-compatible representation

    """
    result: dict[str, Any] = {"type": node.kind_name}
    for key in (*_STRING_FIELDS, *_INT_FIELDS, *_BOOL_FIELDS):
        value = getattr(node, key)
        if value is not None:
            result[key] = value
    if node.children:
        result["children"] = [ast_to_dict(child) for child in node.children]
    if node.metadata:
        result["metadata"] = node.metadata
    return result


def ast_to_json(node: Node, indent: Optional[int] = None) -> str:
    """Serialize a tree to a JSON string.

    Parameters
    ----------
    node : Node
        Root of the tree to serialize
    indent : int or None, default = None
        Indentation passed to :func:`json.dumps`

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Node:
    """Load a tree from JSON text.

    Parameters
    ----------
    json_str : str
        JSON document holding a serialized root node

    Returns
    -------
    Node
        Root of the loaded tree

    Raises
    ------
    MalformedTreeError
        If the text is not valid JSON or does not describe a valid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise MalformedTreeError(f"Invalid JSON tree: {e.msg}", original_error=e) from e
    return dict_to_ast(data)


__all__ = ["MDAST_TYPE_NAMES", "ast_to_dict", "ast_to_json", "dict_to_ast", "json_to_ast", "resolve_kind"]
