#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdplain library.

This module centralizes the hardcoded values and default configuration
constants used across mdplain.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Plain Text Rendering - Markers and separators emitted by the renderer
3. Markdown Parsing - Parser defaults and front matter fences
4. Dependencies - Optional package requirements per converter
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# =============================================================================
# Plain Text Rendering
# =============================================================================

DEFAULT_BLOCK_SEPARATOR = "\n"
DEFAULT_STRIKETHROUGH_PHRASE = "strikethrough: "
DEFAULT_WARN_ON_UNKNOWN_KINDS = True

ROUND_BRACKET_START = "("
ROUND_BRACKET_END = ")"
SQUARE_BRACKET_START = "["
SQUARE_BRACKET_END = "]"

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_TASK_LISTS = True
DEFAULT_PARSE_FRONTMATTER = True
DEFAULT_EMIT_FRONTMATTER_NODE = False
DEFAULT_EMIT_DEFINITION_NODES = False

FRONTMATTER_FENCE = "---"

# Strings shorter than this without newlines may be file paths
MAX_PATH_CANDIDATE_LENGTH = 260

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_YAML = [("pyyaml", "yaml", ">=6.0")]
DEPS_RICH = [("rich", "rich", ">=13.0.0")]

# =============================================================================
# CLI
# =============================================================================

ENV_VAR_PREFIX = "MDPLAIN_"
STDIN_MARKER = "-"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
