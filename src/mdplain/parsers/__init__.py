#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/parsers/__init__.py
"""Parsers that build mdplain document trees from source formats."""

from mdplain.parsers.base import BaseParser, ParserInput
from mdplain.parsers.markdown import MarkdownParser, parse_markdown

__all__ = ["BaseParser", "MarkdownParser", "ParserInput", "parse_markdown"]
