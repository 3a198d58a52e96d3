#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/options/__init__.py
"""Frozen dataclass options for the Markdown parser and plain text renderer."""

from mdplain.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdplain.options.markdown import MarkdownParserOptions
from mdplain.options.plaintext import PlainTextOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "PlainTextOptions",
]
