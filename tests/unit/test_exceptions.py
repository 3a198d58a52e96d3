#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the mdplain exception hierarchy."""

import pytest

from mdplain.exceptions import (
    DependencyError,
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    MalformedTreeError,
    MdPlainError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from mdplain.options import MarkdownParserOptions, PlainTextOptions


@pytest.mark.unit
class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "child,parent",
        [
            (ValidationError, MdPlainError),
            (InvalidOptionsError, ValidationError),
            (FileError, MdPlainError),
            (FileNotFoundError, FileError),
            (ParsingError, MdPlainError),
            (MalformedTreeError, ParsingError),
            (RenderingError, MdPlainError),
            (OutputWriteError, RenderingError),
            (DependencyError, MdPlainError),
        ],
    )
    def test_subclass(self, child, parent) -> None:
        assert issubclass(child, parent)


@pytest.mark.unit
class TestMessages:
    """Tests for generated messages and attributes."""

    def test_original_error_kept(self) -> None:
        cause = KeyError("x")
        error = MdPlainError("failed", original_error=cause)
        assert error.message == "failed"
        assert error.original_error is cause

    def test_invalid_options_message(self) -> None:
        error = InvalidOptionsError("plaintext", PlainTextOptions, MarkdownParserOptions)
        assert "PlainTextOptions" in str(error)
        assert "MarkdownParserOptions" in str(error)
        assert error.parameter_name == "options"

    def test_file_not_found(self) -> None:
        error = FileNotFoundError("doc.md")
        assert str(error) == "File not found: doc.md"
        assert error.file_path == "doc.md"

    def test_malformed_tree_path(self) -> None:
        error = MalformedTreeError("bad node", path="root.children[1]")
        assert str(error) == "bad node (at root.children[1])"
        assert error.parsing_stage == "tree_loading"

    def test_output_write_error(self) -> None:
        error = OutputWriteError("out.txt")
        assert error.rendering_stage == "output"
        assert "out.txt" in str(error)

    def test_dependency_error_message(self) -> None:
        error = DependencyError(
            "markdown",
            missing_packages=[("mistune", ">=3.0.0")],
            version_mismatches=[("pyyaml", ">=6.0", "5.4")],
        )
        message = str(error)
        assert "MARKDOWN requires the following packages: 'mistune>=3.0.0'" in message
        assert "'pyyaml' (requires >=6.0, but 5.4 is installed)" in message
        assert 'pip install --upgrade "mistune>=3.0.0" "pyyaml>=6.0"' in message
