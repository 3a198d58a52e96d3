#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/renderers/base.py
"""Base class for tree renderers.

This module defines the abstract base class that renderers inherit from. It
provides options validation and the helpers used to write rendered text to
files and streams.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdplain.ast.nodes import Node
from mdplain.exceptions import InvalidOptionsError, OutputWriteError
from mdplain.options.base import BaseRendererOptions
from mdplain.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Node) -> str:
        """Render the tree to a string.

        Parameters
        ----------
        doc : Node
            Root node of the tree to render

        Returns
        -------
        str
            Rendered document

        """

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write the result to ``output``.

        Parameters
        ----------
        doc : Node
            Root node of the tree to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        OutputWriteError
            If the output file cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If writing to a file path fails

        """
        try:
            write_content(text, output)
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e
