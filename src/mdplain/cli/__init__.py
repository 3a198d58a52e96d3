"""Command-line interface for mdplain.

Render Markdown, or a JSON-serialized mdast tree, as plain text.

Environment Variable Support
----------------------------
Every option reads a default from ``MDPLAIN_<DEST>``, where ``DEST`` is the
option's destination name in upper case (``--log-level`` reads
``MDPLAIN_LOG_LEVEL``, ``--no-strikethrough`` reads
``MDPLAIN_PARSE_STRIKETHROUGH``). Explicit arguments always override the
environment.

Examples
--------
Convert a file::

    $ mdplain README.md

Read stdin and write a file::

    $ cat notes.md | mdplain - --out notes.txt

Render a serialized tree::

    $ mdplain tree.json --from-json

Separate blocks with blank lines::

    $ mdplain README.md --block-separator '\\n\\n'

Exit Codes
----------
0 on success, 1 when conversion fails, 2 for invalid arguments.

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import sys
from pathlib import Path

from mdplain.ast.serialization import json_to_ast
from mdplain.cli.builder import OPTIONS_CLASSES, create_parser, map_args_to_options
from mdplain.cli.output import print_rich_output, should_use_rich_output
from mdplain.constants import EXIT_ERROR, EXIT_SUCCESS, STDIN_MARKER
from mdplain.exceptions import FileError, FileNotFoundError, MdPlainError
from mdplain.logging_utils import configure_logging
from mdplain.parsers.markdown import MarkdownParser
from mdplain.renderers.base import BaseRenderer
from mdplain.renderers.plaintext import PlainTextRenderer
from mdplain.utils.encoding import read_text_with_encoding_detection

logger = logging.getLogger(__name__)


def _read_input_bytes(input_arg: str) -> bytes:
    """Read the raw bytes of INPUT, which is a file path or the stdin marker."""
    if input_arg == STDIN_MARKER:
        return sys.stdin.buffer.read()

    path = Path(input_arg)
    if not path.is_file():
        raise FileNotFoundError(input_arg)
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileError(f"Could not read input: {e}", file_path=input_arg, original_error=e) from e


def convert(parsed_args: argparse.Namespace) -> str:
    """Run one conversion described by parsed CLI arguments and return the plain text."""
    parser_options = map_args_to_options(parsed_args, OPTIONS_CLASSES["parser"])
    renderer_options = map_args_to_options(parsed_args, OPTIONS_CLASSES["renderer"])

    data = _read_input_bytes(parsed_args.input)

    if parsed_args.from_json:
        tree = json_to_ast(read_text_with_encoding_detection(data))
    else:
        tree = MarkdownParser(parser_options).parse(data)

    return PlainTextRenderer(renderer_options).render_to_string(tree)


def main(args: list[str] | None = None) -> int:
    """Execute the mdplain CLI.

    Parameters
    ----------
    args : list of str or None
        Command-line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        output = convert(parsed_args)

        if parsed_args.out:
            BaseRenderer.write_text_output(output, parsed_args.out)
            logger.info(f"Wrote {len(output)} characters to {parsed_args.out}")
        elif should_use_rich_output(parsed_args):
            title = "stdin" if parsed_args.input == STDIN_MARKER else Path(parsed_args.input).name
            print_rich_output(output, title=title)
        else:
            print(output)
    except MdPlainError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


__all__ = ["convert", "main"]
