#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Integration tests rendering Markdown fixture documents against golden text files.

Each ``tests/fixtures/documents/<name>.md`` is parsed and rendered with the
default options and compared with ``<name>.txt``.
"""

from pathlib import Path

import pytest

from mdplain import parse_markdown, render, to_plaintext
from mdplain.ast import ast_to_json, json_to_ast

DOCUMENTS_DIR = Path(__file__).parent.parent / "fixtures" / "documents"
FIXTURE_NAMES = sorted(path.stem for path in DOCUMENTS_DIR.glob("*.md"))


def _golden(name: str) -> str:
    return (DOCUMENTS_DIR / f"{name}.txt").read_text(encoding="utf-8")


@pytest.mark.integration
class TestMarkdownFixtures:
    """Golden-file tests for the Markdown to plain text pipeline."""

    def test_fixtures_present(self) -> None:
        assert {
            "code_block",
            "emphasis",
            "empty",
            "entities",
            "html",
            "image",
            "inline_code",
            "link",
            "list",
            "reference_link",
        } <= set(FIXTURE_NAMES)

    @pytest.mark.parametrize("name", FIXTURE_NAMES)
    def test_fixture_matches_golden(self, name: str) -> None:
        assert to_plaintext(DOCUMENTS_DIR / f"{name}.md") == _golden(name)

    @pytest.mark.parametrize("name", FIXTURE_NAMES)
    def test_json_tree_renders_the_same(self, name: str) -> None:
        tree = parse_markdown(DOCUMENTS_DIR / f"{name}.md")
        assert render(json_to_ast(ast_to_json(tree))) == _golden(name)

    def test_fixture_from_bytes(self) -> None:
        data = (DOCUMENTS_DIR / "document.md").read_bytes()
        assert to_plaintext(data) == _golden("document")

    def test_frontmatter_metadata(self) -> None:
        tree = parse_markdown(DOCUMENTS_DIR / "frontmatter.md")
        assert tree.metadata["frontmatter"] == {"title": "Notes", "tags": ["a", "b"]}
