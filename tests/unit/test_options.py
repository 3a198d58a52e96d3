#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for parser and renderer options."""

import dataclasses

import pytest

from mdplain.options import MarkdownParserOptions, PlainTextOptions


@pytest.mark.unit
class TestPlainTextOptions:
    """Tests for PlainTextOptions."""

    def test_defaults(self) -> None:
        options = PlainTextOptions()
        assert options.block_separator == "\n"
        assert options.strikethrough_phrase == "strikethrough: "
        assert options.warn_on_unknown_kinds is True

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="block_separator"):
            PlainTextOptions(block_separator="")

    def test_frozen(self) -> None:
        options = PlainTextOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.block_separator = "\n\n"  # type: ignore[misc]

    def test_create_updated(self) -> None:
        options = PlainTextOptions()
        updated = options.create_updated(block_separator="\n\n")
        assert updated.block_separator == "\n\n"
        assert options.block_separator == "\n"
        assert updated.strikethrough_phrase == options.strikethrough_phrase

    def test_create_updated_validates(self) -> None:
        with pytest.raises(ValueError):
            PlainTextOptions().create_updated(block_separator="")

    def test_field_metadata_has_help(self) -> None:
        for options_field in dataclasses.fields(PlainTextOptions):
            assert options_field.metadata.get("help")


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Tests for MarkdownParserOptions."""

    def test_defaults(self) -> None:
        options = MarkdownParserOptions()
        assert options.parse_strikethrough is True
        assert options.parse_tables is True
        assert options.parse_footnotes is True
        assert options.parse_task_lists is True
        assert options.parse_frontmatter is True
        assert options.emit_frontmatter_node is False
        assert options.emit_definition_nodes is False

    def test_cli_names(self) -> None:
        names = {f.name: f.metadata.get("cli_name") for f in dataclasses.fields(MarkdownParserOptions)}
        assert names["parse_strikethrough"] == "no-strikethrough"
        assert names["emit_frontmatter_node"] == "emit-frontmatter"
        assert names["emit_definition_nodes"] == "emit-definitions"
