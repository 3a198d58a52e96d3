#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that parsers inherit from. A
parser turns some source format into an mdplain document tree whose root is a
``root`` :class:`~mdplain.ast.nodes.Node`.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdplain.ast.nodes import Node
from mdplain.constants import MAX_PATH_CANDIDATE_LENGTH
from mdplain.exceptions import FileError, FileNotFoundError, InvalidOptionsError, ValidationError
from mdplain.options.base import BaseParserOptions
from mdplain.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> from mdplain.ast import builder as b
        >>> class LinesParser(BaseParser):
        ...     def parse(self, input_data):
        ...         content = self._load_text_content(input_data)
        ...         return b.root(*(b.paragraph(b.text(line)) for line in content.splitlines()))

    Notes
    -----
    ``parse()`` should accept every member of ``ParserInput``:

    - str: a file path, or the source text itself
    - Path: a file path
    - bytes: raw source bytes, decoded with encoding detection
    - IO[bytes] or IO[str]: an open stream

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Node:
        """Parse the input document into a tree.

        Parameters
        ----------
        input_data : str, Path, bytes, IO[bytes] or IO[str]
            The input document to parse

        Returns
        -------
        Node
            Root node of the parsed document

        """
        pass

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load content from various input types with encoding detection.

        Parameters
        ----------
        input_data : str, Path, bytes, IO[bytes] or IO[str]
            Input data to load

        Returns
        -------
        str
            Decoded source text

        Raises
        ------
        FileNotFoundError
            If ``input_data`` is a Path that does not exist
        FileError
            If a file exists but cannot be read
        ValidationError
            If ``input_data`` is of an unsupported type

        """
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        elif isinstance(input_data, Path):
            return _read_file(input_data)
        elif isinstance(input_data, str):
            # Linux caps path components at 255 characters and Path.exists()
            # raises OSError on very long strings
            if len(input_data) <= MAX_PATH_CANDIDATE_LENGTH and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        return _read_file(path)
                except OSError:
                    pass
            return input_data
        elif hasattr(input_data, "read"):
            if hasattr(input_data, "seekable") and input_data.seekable():
                input_data.seek(0)
            return normalize_stream_to_text(input_data)
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )


def _read_file(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(str(path))
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileError(f"Could not read file: {e}", file_path=str(path), original_error=e) from e
    logger.debug(f"Read {len(data)} bytes from {path}")
    return read_text_with_encoding_detection(data)


__all__ = ["BaseParser", "ParserInput"]
