#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/mdplain/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from mdplain.constants import (
    DEFAULT_EMIT_DEFINITION_NODES,
    DEFAULT_EMIT_FRONTMATTER_NODE,
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PARSE_TASK_LISTS,
)
from mdplain.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-tree parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_frontmatter : bool, default True
        Whether to strip YAML front matter from the start of the document
        and store it in the root node's metadata.
    emit_frontmatter_node : bool, default False
        Also keep the front matter as a ``front_matter`` child of the root.
        Has no effect unless ``parse_frontmatter`` is enabled.
    emit_definition_nodes : bool, default False
        Append a ``definition`` node to the root for each link reference
        definition, in the order the definitions appear. Reference links are
        always kept as ``link_reference`` nodes either way.

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "cli_name": "no-strikethrough",
            "importance": "core",
        },
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "cli_name": "no-tables", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={
            "help": "Parse footnote references and definitions",
            "cli_name": "no-footnotes",
            "importance": "core",
        },
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={
            "help": "Parse task list checkboxes (- [ ] and - [x])",
            "cli_name": "no-task-lists",
            "importance": "core",
        },
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={
            "help": "Parse YAML front matter at document start",
            "cli_name": "no-frontmatter",
            "importance": "core",
        },
    )
    emit_frontmatter_node: bool = field(
        default=DEFAULT_EMIT_FRONTMATTER_NODE,
        metadata={
            "help": "Keep front matter as a node in the tree",
            "cli_name": "emit-frontmatter",
            "importance": "advanced",
        },
    )
    emit_definition_nodes: bool = field(
        default=DEFAULT_EMIT_DEFINITION_NODES,
        metadata={
            "help": "Keep link reference definitions as nodes in the tree",
            "cli_name": "emit-definitions",
            "importance": "advanced",
        },
    )
