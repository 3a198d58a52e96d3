"""Unit tests for __main__.py and the package root API."""

import pytest


@pytest.mark.unit
class TestMainEntry:
    """Test mdplain/__main__.py entry point."""

    def test_main_module_importable(self):
        import mdplain.__main__  # noqa: F401

    def test_main_is_cli_main(self):
        from mdplain.__main__ import main
        from mdplain.cli import main as cli_main

        assert main is cli_main


@pytest.mark.unit
class TestPackageApi:
    """Test the functions exported from the package root."""

    def test_to_plaintext(self):
        from mdplain import to_plaintext

        assert to_plaintext("# Notes\n\nSee [docs](https://example.com) ~~soon~~") == (
            "Notes\nSee [docs](https://example.com) (strikethrough: soon)"
        )

    def test_to_plaintext_options(self):
        from mdplain import MarkdownParserOptions, PlainTextOptions, to_plaintext

        result = to_plaintext(
            "a ~~b~~\n\nc",
            options=PlainTextOptions(block_separator="\n\n"),
            parser_options=MarkdownParserOptions(parse_strikethrough=False),
        )
        assert result == "a ~~b~~\n\nc"

    def test_render_and_parse(self):
        from mdplain import parse_markdown, render

        assert render(parse_markdown("- x\n- y")) == "x\ny"

    def test_version(self):
        import mdplain

        assert isinstance(mdplain.__version__, str)
