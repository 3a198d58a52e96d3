"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdplain/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import IO, Optional

from mdplain.constants import DEPS_RICH
from mdplain.utils.decorators import requires_dependencies


def should_use_rich_output(args: argparse.Namespace, stream: Optional[IO[str]] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True when ``--rich`` is set, no ``--out`` file was given and the
        target stream is a terminal

    """
    if not getattr(args, "rich", False) or getattr(args, "out", None):
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


@requires_dependencies("rich-output", DEPS_RICH)
def print_rich_output(text: str, title: str, stream: Optional[IO[str]] = None) -> None:
    """Print ``text`` inside a titled rich panel.

    Markup in ``text`` is not interpreted, so square brackets from rendered
    links are shown literally.
    """
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(file=stream or sys.stdout)
    console.print(Panel(Text(text), title=title, title_align="left", expand=True))
