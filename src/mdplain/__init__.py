"""mdplain - render Markdown document trees as plain text.

mdplain walks an mdast-shaped document tree depth-first and turns it into
readable plain text. Markdown syntax markers are dropped while the structure
that matters for reading survives:

- sibling blocks (paragraphs, headings, lists, list items, blockquotes and
  code blocks) are separated by a newline
- links keep their target as ``[text](url)``
- struck-through text becomes ``(strikethrough: text)``
- inline and block code keep their literal source

Trees come from the bundled mistune-based Markdown parser, from JSON or
dict data in the mdast shape, or are built by hand with
:mod:`mdplain.ast.builder`.

Examples
--------
From Markdown source:

    >>> from mdplain import to_plaintext
    >>> to_plaintext("# Notes\\n\\nSee [docs](https://example.com) ~~soon~~")
    'Notes\\nSee [docs](https://example.com) (strikethrough: soon)'

From a hand-built tree:

    >>> from mdplain import render
    >>> from mdplain.ast import builder as b
    >>> render(b.root(b.paragraph(b.text("a")), b.paragraph(b.text("b"))))
    'a\\nb'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import logging
from typing import Optional

from mdplain.ast import Node, NodeKind, dict_to_ast, json_to_ast
from mdplain.exceptions import (
    DependencyError,
    FileError,
    InvalidOptionsError,
    MalformedTreeError,
    MdPlainError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdplain.options import MarkdownParserOptions, PlainTextOptions
from mdplain.parsers.base import ParserInput
from mdplain.parsers.markdown import MarkdownParser, parse_markdown
from mdplain.renderers.plaintext import RENDER_RULES, PlainTextRenderer, render
from mdplain.utils.packages import get_package_version

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = get_package_version("mdplain") or "0.0.0"


def to_plaintext(
    source: ParserInput,
    options: Optional[PlainTextOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> str:
    """Parse Markdown and render it as plain text.

    Parameters
    ----------
    source : str, Path, bytes, IO[bytes] or IO[str]
        Markdown text, a path to a Markdown file, or an open stream
    options : PlainTextOptions or None, default = None
        Rendering options
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parsing options

    Returns
    -------
    str
        Plain text rendering

    Raises
    ------
    ParsingError
        If the Markdown cannot be tokenized
    RenderingError
        If the parsed tree is missing a payload the renderer needs
    DependencyError
        If mistune is not installed

    """
    tree = MarkdownParser(parser_options).parse(source)
    return PlainTextRenderer(options).render_to_string(tree)


__all__ = [
    "DependencyError",
    "FileError",
    "InvalidOptionsError",
    "MalformedTreeError",
    "MarkdownParser",
    "MarkdownParserOptions",
    "MdPlainError",
    "Node",
    "NodeKind",
    "OutputWriteError",
    "ParsingError",
    "PlainTextOptions",
    "PlainTextRenderer",
    "RENDER_RULES",
    "RenderingError",
    "ValidationError",
    "__version__",
    "dict_to_ast",
    "json_to_ast",
    "parse_markdown",
    "render",
    "to_plaintext",
]
