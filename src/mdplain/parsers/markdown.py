#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/parsers/markdown.py
"""Markdown to tree parser.

This module turns Markdown into an mdplain document tree. mistune does the
tokenizing; the token stream is then mapped onto :class:`NodeKind` values so
that the resulting tree has the same shape as an mdast tree produced by
micromark with GFM strikethrough:

- adjacent text and soft line breaks are merged into one ``text`` node
- code block values lose their final line ending
- text has its HTML character references decoded
- image alt text is flattened into the ``alt`` field
- reference-style links and images become ``link_reference`` and
  ``image_reference`` nodes
- footnote definitions are appended to the root

YAML front matter is removed before tokenizing and loaded with PyYAML.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from mdplain.ast import builder
from mdplain.ast.nodes import Node
from mdplain.constants import DEPS_MARKDOWN, DEPS_YAML, FRONTMATTER_FENCE
from mdplain.exceptions import ParsingError
from mdplain.options.markdown import MarkdownParserOptions
from mdplain.parsers.base import BaseParser, ParserInput
from mdplain.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

Token = dict[str, Any]


class MarkdownParser(BaseParser):
    """Convert Markdown to a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> tree = parser.parse("# Title\\n\\nSome ~~old~~ text")
        >>> [child.kind_name for child in tree.children]
        ['heading', 'paragraph']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

        self._block_handlers: dict[str, Callable[[Token], Optional[list[Node]]]] = {
            "paragraph": self._process_paragraph,
            "block_text": self._process_paragraph,
            "heading": self._process_heading,
            "block_code": self._process_code_block,
            "block_quote": self._process_block_quote,
            "list": self._process_list,
            "list_item": self._process_list_item,
            "task_list_item": self._process_list_item,
            "thematic_break": self._process_thematic_break,
            "block_html": self._process_html,
            "table": self._process_table,
            "footnotes": self._process_footnotes,
            "blank_line": self._skip,
        }
        self._inline_handlers: dict[str, Callable[[Token], Optional[Node]]] = {
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: ParserInput) -> Node:
        """Parse Markdown input into a document tree.

        Parameters
        ----------
        input_data : str, Path, bytes, IO[bytes] or IO[str]
            Markdown input to parse. A short single-line string naming an
            existing file is read from disk; any other string is parsed as
            Markdown text.

        Returns
        -------
        Node
            Root node of the document

        Raises
        ------
        ParsingError
            If mistune fails on the input
        DependencyError
            If mistune is not installed

        """
        import mistune

        markdown_content = self._load_text_content(input_data)

        children: list[Node] = []
        metadata: dict[str, Any] = {}
        if self.options.parse_frontmatter:
            markdown_content, frontmatter = self._extract_frontmatter(markdown_content)
            if frontmatter is not None:
                raw, data = frontmatter
                metadata["frontmatter"] = data
                if self.options.emit_frontmatter_node:
                    children.append(builder.front_matter(raw, data))

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            try:
                tokens, state = markdown.parse(markdown_content)
            except Exception as e:
                raise ParsingError(
                    f"Failed to tokenize Markdown: {e}", parsing_stage="tokenize", original_error=e
                ) from e

            if isinstance(tokens, list):
                children.extend(self._process_tokens(tokens))

            if self.options.emit_definition_nodes:
                children.extend(self._process_definitions(state.env.get("ref_links", {})))

        return builder.root(*children, metadata=metadata)

    # ------------------------------------------------------------------
    # Front matter
    # ------------------------------------------------------------------

    @requires_dependencies("markdown", DEPS_YAML)
    def _extract_frontmatter(self, content: str) -> tuple[str, Optional[tuple[str, Any]]]:
        """Split leading ``---`` fenced YAML front matter from the content.

        Returns
        -------
        tuple
            ``(remaining_content, (raw_yaml, data))``, or ``(content, None)``
            when the document has no front matter. ``data`` is None when the
            YAML does not load.

        """
        import yaml

        if not (content.startswith(FRONTMATTER_FENCE + "\n") or content.startswith(FRONTMATTER_FENCE + "\r\n")):
            return content, None

        lines = content.splitlines(keepends=True)
        end_index = -1
        for i in range(1, len(lines)):
            if lines[i].strip() == FRONTMATTER_FENCE:
                end_index = i
                break

        if end_index <= 0:
            return content, None

        raw = "".join(lines[1:end_index])
        remaining = "".join(lines[end_index + 1 :])

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            logger.warning(f"Ignoring front matter that is not valid YAML: {e}")
            data = None

        return remaining, (raw.rstrip("\r\n"), data)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[Token]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            token_type = token.get("type", "")
            handler = self._block_handlers.get(token_type)
            if handler is None:
                logger.debug(f"Dropping unsupported Markdown token '{token_type}'")
                continue
            result = handler(token)
            if result:
                nodes.extend(result)
        return nodes

    def _skip(self, token: Token) -> None:
        return None

    def _process_paragraph(self, token: Token) -> list[Node]:
        return [builder.paragraph(*self._process_inline_tokens(token.get("children", [])))]

    def _process_heading(self, token: Token) -> list[Node]:
        attrs = _attrs(token)
        level = attrs.get("level", 1)
        return [builder.heading(level, *self._process_inline_tokens(token.get("children", [])))]

    def _process_code_block(self, token: Token) -> list[Node]:
        """Map a fenced or indented code block; the final line ending is dropped."""
        code = token.get("raw", "")
        if code.endswith("\r\n"):
            code = code[:-2]
        elif code.endswith("\n"):
            code = code[:-1]

        info = _attrs(token).get("info")
        lang = info.split(None, 1)[0] if info and info.strip() else None
        return [builder.code(code, lang=lang)]

    def _process_block_quote(self, token: Token) -> list[Node]:
        return [builder.blockquote(*self._process_tokens(token.get("children", [])))]

    def _process_list(self, token: Token) -> list[Node]:
        attrs = _attrs(token)
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1) if ordered else None
        items = self._process_tokens(token.get("children", []))
        return [builder.list_(*items, ordered=ordered, start=start)]

    def _process_list_item(self, token: Token) -> list[Node]:
        checked = _attrs(token).get("checked") if token.get("type") == "task_list_item" else None
        return [builder.list_item(*self._process_tokens(token.get("children", [])), checked=checked)]

    def _process_thematic_break(self, token: Token) -> list[Node]:
        return [builder.thematic_break()]

    def _process_html(self, token: Token) -> list[Node]:
        return [builder.raw_html(token.get("raw", ""))]

    def _process_table(self, token: Token) -> list[Node]:
        """Map a table; the header becomes the first row."""
        rows: list[Node] = []
        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                rows.append(builder.table_row(*self._process_table_cells(section)))
            elif section_type == "table_body":
                for row in section.get("children", []):
                    if row.get("type") == "table_row":
                        rows.append(builder.table_row(*self._process_table_cells(row)))
        return [builder.table(*rows)]

    def _process_table_cells(self, row: Token) -> list[Node]:
        return [
            builder.table_cell(*self._process_inline_tokens(cell.get("children", [])))
            for cell in row.get("children", [])
            if cell.get("type") == "table_cell"
        ]

    def _process_footnotes(self, token: Token) -> list[Node]:
        definitions: list[Node] = []
        for item in token.get("children", []):
            if item.get("type") != "footnote_item":
                continue
            attrs = _attrs(item)
            identifier = str(attrs.get("key", attrs.get("label", attrs.get("index", ""))))
            definitions.append(
                builder.footnote_definition(identifier, *self._process_tokens(item.get("children", [])))
            )
        return definitions

    def _process_definitions(self, ref_links: dict[str, Any]) -> list[Node]:
        """Build ``definition`` nodes from mistune's collected link reference definitions.

        mistune emits no token for a definition; it stores the first one for
        each label in the parse environment, in source order.
        """
        definitions: list[Node] = []
        for key, data in ref_links.items():
            if not isinstance(data, dict):
                continue
            label = data.get("label")
            identifier = _normalize_label(label) if isinstance(label, str) else key.lower()
            definitions.append(
                builder.definition(identifier, data.get("url", ""), title=_decode_title(data.get("title")))
            )
        return definitions

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[Token]) -> list[Node]:
        """Map inline tokens, merging runs of text and soft breaks into one node."""
        nodes: list[Node] = []
        pending: list[str] = []

        def flush() -> None:
            if pending:
                nodes.append(builder.text("".join(pending)))
                pending.clear()

        for token in tokens:
            token_type = token.get("type", "")
            if token_type == "text":
                pending.append(_decode_entities(token.get("raw", "")))
                continue
            if token_type == "softbreak":
                pending.append("\n")
                continue

            handler = self._inline_handlers.get(token_type)
            if handler is None:
                logger.debug(f"Dropping unsupported inline Markdown token '{token_type}'")
                continue
            node = handler(token)
            if node is not None:
                flush()
                nodes.append(node)

        flush()
        return nodes

    def _handle_strong_token(self, token: Token) -> Node:
        return builder.strong(*self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: Token) -> Node:
        return builder.emphasis(*self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: Token) -> Node:
        return builder.strikethrough(*self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: Token) -> Node:
        return builder.inline_code(token.get("raw", ""))

    def _handle_link_token(self, token: Token) -> Node:
        """Map a link token, keeping reference-style links as ``link_reference``.

        mistune resolves ``[text][label]`` against its definitions and marks
        the token with ``ref``/``label``. The resolved URL is discarded for
        those so the tree matches the source form.
        """
        children = self._process_inline_tokens(token.get("children", []))
        if "ref" in token:
            return builder.link_reference(_reference_identifier(token), *children)

        attrs = _attrs(token)
        return builder.link(attrs.get("url", ""), *children, title=_decode_title(attrs.get("title")))

    def _handle_image_token(self, token: Token) -> Node:
        alt = _flatten_text(token.get("children", []))
        if "ref" in token:
            return builder.image_reference(_reference_identifier(token), alt=alt)

        attrs = _attrs(token)
        return builder.image(attrs.get("url", ""), alt=alt, title=_decode_title(attrs.get("title")))

    def _handle_linebreak_token(self, token: Token) -> Node:
        return builder.line_break()

    def _handle_inline_html_token(self, token: Token) -> Node:
        return builder.raw_html(token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: Token) -> Node:
        attrs = _attrs(token)
        identifier = attrs.get("label") or token.get("raw") or attrs.get("index", "")
        return builder.footnote_reference(str(identifier))


def _decode_entities(raw: str) -> str:
    """Replace HTML character references (``&amp;``, ``&#35;``) with the characters they name.

    mistune leaves references in text tokens for its HTML renderer to pass
    through. URLs need no decoding here because mistune already decodes
    them before percent-encoding.
    """
    from mistune.util import unescape

    return unescape(raw)


def _decode_title(title: Optional[str]) -> Optional[str]:
    return _decode_entities(title) if title else title


def _normalize_label(label: str) -> str:
    """Collapse whitespace and case-fold a reference label, as CommonMark matches labels."""
    return " ".join(label.split()).lower()


def _reference_identifier(token: Token) -> str:
    label = token.get("label")
    if isinstance(label, str):
        return _normalize_label(label)
    return str(token.get("ref", "")).lower()


def _attrs(token: Token) -> dict[str, Any]:
    attrs = token.get("attrs", {})
    return attrs if isinstance(attrs, dict) else {}


def _flatten_text(tokens: list[Token]) -> str:
    """Concatenate the literal text under ``tokens``, ignoring markup."""
    parts: list[str] = []
    for token in tokens:
        token_type = token.get("type", "")
        if token_type == "text":
            parts.append(_decode_entities(token.get("raw", "")))
        elif token_type == "codespan":
            parts.append(token.get("raw", ""))
        elif token_type in ("softbreak", "linebreak"):
            parts.append("\n")
        elif "children" in token:
            parts.append(_flatten_text(token["children"]))
    return "".join(parts)


def parse_markdown(source: ParserInput, options: MarkdownParserOptions | None = None) -> Node:
    r"""Parse Markdown into a document tree.

    Parameters
    ----------
    source : str, Path, bytes, IO[bytes] or IO[str]
        Markdown text, a file path or an open stream
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Node
        Root node of the document

    Examples
    --------
    >>> tree = parse_markdown("# Hello\n\nWorld")
    >>> len(tree.children)
    2

    """
    return MarkdownParser(options).parse(source)


__all__ = ["MarkdownParser", "parse_markdown"]
