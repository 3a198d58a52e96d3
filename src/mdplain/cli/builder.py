#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdplain/cli/builder.py
"""Argument parser construction for the mdplain CLI.

Option flags are generated from the fields of the frozen options dataclasses:
each field's ``metadata`` supplies the help text and, optionally, the flag
name. Boolean fields that default to True become ``--no-*`` flags.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, Field, fields
from typing import Any, Type

from mdplain.cli.actions import (
    DynamicVersionAction,
    EnvironmentAwareAction,
    EnvironmentAwareBooleanAction,
    EnvironmentAwareBooleanFalseAction,
)
from mdplain.constants import STDIN_MARKER
from mdplain.exceptions import ValidationError
from mdplain.options.markdown import MarkdownParserOptions
from mdplain.options.plaintext import PlainTextOptions
from mdplain.utils.packages import get_package_version

logger = logging.getLogger(__name__)

OPTIONS_CLASSES: dict[str, Type[Any]] = {
    "parser": MarkdownParserOptions,
    "renderer": PlainTextOptions,
}

_ESCAPES = {"\\n": "\n", "\\t": "\t", "\\r": "\r", "\\\\": "\\"}


def unescape_separator(value: str) -> str:
    r"""Expand ``\n``, ``\t``, ``\r`` and ``\\`` escapes typed on the command line.

    >>> unescape_separator(r"\n\n")
    '\n\n'

    """
    result = []
    i = 0
    while i < len(value):
        pair = value[i : i + 2]
        if pair in _ESCAPES:
            result.append(_ESCAPES[pair])
            i += 2
        else:
            result.append(value[i])
            i += 1
    return "".join(result)


def snake_to_kebab(name: str) -> str:
    return name.replace("_", "-")


def _field_default(options_field: Field) -> Any:
    if options_field.default is not MISSING:
        return options_field.default
    if options_field.default_factory is not MISSING:
        return options_field.default_factory()
    return None


def add_options_class_arguments(parser: argparse.ArgumentParser, options_class: Type[Any], title: str) -> None:
    """Add one flag per field of ``options_class`` to a new argument group.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to extend
    options_class : type
        Frozen options dataclass
    title : str
        Title of the argument group

    """
    group = parser.add_argument_group(title)
    for options_field in fields(options_class):
        metadata = options_field.metadata
        default = _field_default(options_field)
        cli_name = metadata.get("cli_name", snake_to_kebab(options_field.name))
        help_text = metadata.get("help", "")

        if isinstance(default, bool):
            action = EnvironmentAwareBooleanFalseAction if default else EnvironmentAwareBooleanAction
            group.add_argument(
                f"--{cli_name}",
                dest=options_field.name,
                action=action,
                default=default,
                help=help_text,
            )
        else:
            arg_type = metadata.get("type", str)
            if options_field.name == "block_separator":
                arg_type = unescape_separator
            group.add_argument(
                f"--{cli_name}",
                dest=options_field.name,
                action=EnvironmentAwareAction,
                type=arg_type,
                default=default,
                metavar=options_field.name.upper(),
                help=f"{help_text} (default: {default!r})",
            )


def map_args_to_options(parsed_args: argparse.Namespace, options_class: Type[Any]) -> Any:
    """Build an options instance from the parsed flags for its fields.

    Raises
    ------
    ValidationError
        If the options class rejects a value

    """
    values = {f.name: getattr(parsed_args, f.name) for f in fields(options_class) if hasattr(parsed_args, f.name)}
    try:
        return options_class(**values)
    except ValueError as e:
        raise ValidationError(str(e), parameter_name=options_class.__name__, original_error=e) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the ``mdplain`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="mdplain",
        description="Render Markdown (or a serialized mdast tree) as plain text.",
        epilog="Every option also reads a default from MDPLAIN_<DEST>, e.g. MDPLAIN_LOG_LEVEL=DEBUG.",
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=STDIN_MARKER,
        help=f"Markdown file to convert, or '{STDIN_MARKER}' for stdin (default: stdin)",
    )
    parser.add_argument("--out", "-o", action=EnvironmentAwareAction, dest="out", help="Write output to this file")
    parser.add_argument(
        "--from-json",
        action=EnvironmentAwareBooleanAction,
        dest="from_json",
        help="Treat the input as a JSON-serialized mdast tree instead of Markdown",
    )
    parser.add_argument(
        "--rich",
        action=EnvironmentAwareBooleanAction,
        dest="rich",
        help="Show the result in a rich panel when writing to a terminal",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        action=EnvironmentAwareAction,
        dest="log_level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", action=EnvironmentAwareAction, dest="log_file", help="Also log to this file")
    logging_group.add_argument(
        "--trace",
        action=EnvironmentAwareBooleanAction,
        dest="trace",
        help="Verbose logging with timestamps (implies --log-level DEBUG)",
    )

    for title, options_class in (
        ("markdown parsing", OPTIONS_CLASSES["parser"]),
        ("plain text rendering", OPTIONS_CLASSES["renderer"]),
    ):
        add_options_class_arguments(parser, options_class, title)

    parser.add_argument(
        "--version",
        "-V",
        action=DynamicVersionAction,
        version_callback=lambda: f"mdplain {get_package_version('mdplain') or 'unknown'}",
    )

    return parser
