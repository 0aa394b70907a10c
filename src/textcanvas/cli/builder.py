"""Argument parser construction for the textcanvas CLI.

Rendering options are generated from the fields of
:class:`~textcanvas.options.ParserConfig`: boolean fields become flags, all
other fields take a value. Field metadata supplies the help text, the
accepted choices and an optional ``cli_name``.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
from dataclasses import MISSING, Field, fields
from typing import Any, Dict

from textcanvas import __version__
from textcanvas.cli.actions import EnvironmentAwareAction, EnvironmentAwareBooleanAction
from textcanvas.constants import DEFAULT_INPUT_ENCODING, ENV_VAR_PREFIX
from textcanvas.options import ParserConfig

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _cli_flag(option_field: Field) -> str:
    return "--" + option_field.metadata.get("cli_name", option_field.name).replace("_", "-")


def _default_text(option_field: Field) -> str:
    default = option_field.default if option_field.default is not MISSING else None
    return f" (default: {default!r})"


def add_options_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one argument per ``ParserConfig`` field to ``parser``."""
    group = parser.add_argument_group("rendering options")
    for option_field in fields(ParserConfig):
        if option_field.metadata.get("exclude_from_cli"):
            continue

        help_text = option_field.metadata.get("help", "") + _default_text(option_field)
        kwargs: Dict[str, Any] = {"dest": option_field.name, "help": help_text}
        if isinstance(option_field.default, bool):
            group.add_argument(_cli_flag(option_field), action=EnvironmentAwareBooleanAction, **kwargs)
        else:
            choices = option_field.metadata.get("choices")
            if choices:
                kwargs["choices"] = choices
            group.add_argument(_cli_flag(option_field), action=EnvironmentAwareAction, default=None, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the ``textcanvas`` command."""
    parser = argparse.ArgumentParser(
        prog="textcanvas",
        description="Convert HTML to layout-preserving plain text.",
        epilog=(
            f"Every rendering option can also be set with a {ENV_VAR_PREFIX}<OPTION> environment variable "
            f"(e.g. {ENV_VAR_PREFIX}DISPLAY_LINKS=true) or in a configuration file. "
            "Command line arguments take precedence over environment variables, which take precedence "
            "over configuration files."
        ),
    )
    parser.add_argument("input", nargs="?", default="-", help="HTML file to convert, or '-' for stdin (default)")
    parser.add_argument("-o", "--out", help="Write the text to this file instead of stdout")
    parser.add_argument(
        "--encoding",
        action=EnvironmentAwareAction,
        default=None,
        help=f"Encoding of the input; detected from the document if omitted, {DEFAULT_INPUT_ENCODING} on output",
    )
    parser.add_argument(
        "--config",
        action=EnvironmentAwareAction,
        default=None,
        help="Configuration file (.toml, .yaml, .json or pyproject.toml); discovered automatically if omitted",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Do not discover configuration files automatically",
    )
    parser.add_argument(
        "--log-level",
        action=EnvironmentAwareAction,
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", action=EnvironmentAwareAction, default=None, help="Also write log output to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log with timestamps and logger names",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    add_options_arguments(parser)
    return parser

