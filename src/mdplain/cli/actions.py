"""Custom argparse Action classes for the mdplain CLI.

The environment-aware actions read ``MDPLAIN_<DEST>`` when the parser is
built and use the value as the argument's default, so explicit flags always
win over the environment.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys

from mdplain.constants import ENV_VAR_PREFIX

TRUTHY_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Return the environment variable name that supplies a default for ``dest``."""
    return f"{ENV_VAR_PREFIX}{dest.upper().replace('-', '_')}"


def _dest_from_option_strings(option_strings, strip_no: bool = False):
    for option in option_strings:
        if strip_no and option.startswith("--no-"):
            return option[5:].replace("-", "_")
        if option.startswith("--"):
            return option[2:].replace("-", "_")
        if option.startswith("-"):
            return option[1:]
    return None


class DynamicVersionAction(argparse._VersionAction):
    """Action that computes the version string only when ``--version`` is given."""

    def __init__(self, option_strings, version_callback=None, **kwargs):
        self.version_callback = version_callback
        kwargs.setdefault("version", "placeholder")
        kwargs.setdefault("dest", argparse.SUPPRESS)
        kwargs.setdefault("default", argparse.SUPPRESS)
        super().__init__(option_strings, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Display version and exit."""
        version = self.version
        if self.version_callback:
            version = self.version_callback()
        parser._print_message(f"{version}\n", sys.stdout)
        parser.exit()


class EnvironmentAwareAction(argparse.Action):
    """Store action whose default may come from an environment variable."""

    def __init__(self, *args, **kwargs):
        dest = kwargs.get("dest") or _dest_from_option_strings(args[0] if args else kwargs.get("option_strings", []))

        if dest:
            env_key = env_key_for(dest)
            env_value = os.environ.get(env_key)
            if env_value is not None:
                converter = kwargs.get("type")
                try:
                    kwargs["default"] = converter(env_value) if converter is not None else env_value
                except (ValueError, TypeError) as e:
                    logging.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(*args, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Store the value."""
        setattr(namespace, self.dest, values)


class EnvironmentAwareBooleanAction(argparse._StoreTrueAction):
    """``store_true`` action whose default may come from an environment variable."""

    def __init__(self, *args, **kwargs):
        dest = kwargs.get("dest") or _dest_from_option_strings(args[0] if args else kwargs.get("option_strings", []))

        if dest:
            env_value = os.environ.get(env_key_for(dest))
            if env_value is not None:
                kwargs["default"] = env_value.lower() in TRUTHY_VALUES

        super().__init__(*args, **kwargs)


class EnvironmentAwareBooleanFalseAction(argparse._StoreFalseAction):
    """``store_false`` action (``--no-*`` flags) whose default may come from an environment variable.

    The environment variable holds the value of the destination itself, so
    ``MDPLAIN_PARSE_STRIKETHROUGH=false`` has the same effect as passing
    ``--no-strikethrough``.
    """

    def __init__(self, *args, **kwargs):
        dest = kwargs.get("dest") or _dest_from_option_strings(
            args[0] if args else kwargs.get("option_strings", []), strip_no=True
        )

        if dest:
            env_value = os.environ.get(env_key_for(dest))
            if env_value is not None:
                kwargs["default"] = env_value.lower() in TRUTHY_VALUES

        super().__init__(*args, **kwargs)
