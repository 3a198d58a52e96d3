#  Copyright (c) 2025 Tom Villani, Ph.D.
# mdplain/options/plaintext.py
"""Configuration options for plain text rendering.

This module defines options for rendering a document tree to plain text.
"""

from dataclasses import dataclass, field

from mdplain.constants import (
    DEFAULT_BLOCK_SEPARATOR,
    DEFAULT_STRIKETHROUGH_PHRASE,
    DEFAULT_WARN_ON_UNKNOWN_KINDS,
)
from mdplain.options.base import BaseRendererOptions


@dataclass(frozen=True)
class PlainTextOptions(BaseRendererOptions):
    r"""Configuration options for plain text rendering.

    The defaults produce the canonical rendering: sibling blocks separated
    by a single newline and struck-through text wrapped as
    ``(strikethrough: ...)``.

    Parameters
    ----------
    block_separator : str, default "\n"
        Fragment inserted between sibling block nodes.
    strikethrough_phrase : str, default "strikethrough: "
        Phrase emitted after the opening bracket of struck-through text.
    warn_on_unknown_kinds : bool, default True
        Log unknown node kinds at WARNING level. When False they are
        logged at DEBUG level.

    Examples
    --------
        >>> from mdplain.ast import builder as b
        >>> from mdplain.renderers.plaintext import PlainTextRenderer
        >>> tree = b.root(b.paragraph(b.text("a")), b.paragraph(b.text("b")))
        >>> PlainTextRenderer(PlainTextOptions(block_separator="\n\n")).render_to_string(tree)
        'a\n\nb'

    """

    block_separator: str = field(
        default=DEFAULT_BLOCK_SEPARATOR,
        metadata={"help": "Separator inserted between sibling blocks", "type": str, "importance": "advanced"},
    )
    strikethrough_phrase: str = field(
        default=DEFAULT_STRIKETHROUGH_PHRASE,
        metadata={"help": "Phrase emitted before struck-through text", "type": str, "importance": "advanced"},
    )
    warn_on_unknown_kinds: bool = field(
        default=DEFAULT_WARN_ON_UNKNOWN_KINDS,
        metadata={
            "help": "Log unknown node kinds as warnings",
            "cli_name": "no-warn-on-unknown-kinds",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate options.

        Raises
        ------
        ValueError
            If block_separator is empty.

        """
        super().__post_init__()
        if not self.block_separator:
            raise ValueError("block_separator must be a non-empty string")
