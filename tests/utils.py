"""Test utilities for the mdplain test suite.

This module provides helpers for temporary directories and for building
nested document trees in tests.
"""

import shutil
import tempfile
from pathlib import Path

from mdplain.ast import builder as b
from mdplain.ast.nodes import Node


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def paragraphs(*texts: str) -> Node:
    """Build a root holding one text paragraph per argument."""
    return b.root(*(b.paragraph(b.text(t)) for t in texts))


def nest(depth: int, leaf: Node) -> Node:
    """Wrap ``leaf`` in ``depth`` levels of blockquote."""
    node = leaf
    for _ in range(depth):
        node = b.blockquote(node)
    return node
