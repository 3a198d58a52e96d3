#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for BaseParser input loading."""

import io

import pytest

from mdplain.exceptions import FileNotFoundError, ValidationError
from mdplain.parsers.base import BaseParser


@pytest.mark.unit
class TestLoadTextContent:
    """Tests for BaseParser._load_text_content()."""

    def test_bytes(self) -> None:
        assert BaseParser._load_text_content(b"abc") == "abc"

    def test_multiline_string_is_content(self, tmp_path) -> None:
        assert BaseParser._load_text_content("a\nb") == "a\nb"

    def test_long_string_is_content(self) -> None:
        text = "x" * 1000
        assert BaseParser._load_text_content(text) == text

    def test_existing_path_string(self, tmp_path) -> None:
        path = tmp_path / "a.md"
        path.write_bytes(b"from disk")
        assert BaseParser._load_text_content(str(path)) == "from disk"

    def test_directory_string_is_content(self, tmp_path) -> None:
        assert BaseParser._load_text_content(str(tmp_path)) == str(tmp_path)

    def test_missing_path(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError) as exc_info:
            BaseParser._load_text_content(tmp_path / "nope.md")
        assert exc_info.value.file_path.endswith("nope.md")

    def test_stream_is_rewound(self) -> None:
        stream = io.BytesIO(b"content")
        stream.read()
        assert BaseParser._load_text_content(stream) == "content"

    def test_unsupported_type(self) -> None:
        with pytest.raises(ValidationError):
            BaseParser._load_text_content(42)  # type: ignore[arg-type]
