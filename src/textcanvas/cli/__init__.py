"""Command-line interface for the textcanvas library.

Environment Variable Support
----------------------------
All rendering options support environment variable defaults using the
pattern TEXTCANVAS_<OPTION_NAME>, where option names are converted to
uppercase with hyphens replaced by underscores. CLI arguments always
override environment variables, which override configuration files.

Examples
--------
Convert a file::

    $ textcanvas page.html

Read from stdin and write to a file::

    $ curl -s https://example.org | textcanvas -o page.txt

Browser-like layout with links::

    $ textcanvas page.html --profile strict --display-links

Use environment variables for defaults::

    $ export TEXTCANVAS_DISPLAY_IMAGES=true
    $ textcanvas page.html

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from textcanvas.api import html_to_text
from textcanvas.cli.builder import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR, create_parser
from textcanvas.cli.config import config_to_options, find_config_in_parents, load_config_file
from textcanvas.constants import DEFAULT_INPUT_ENCODING
from textcanvas.exceptions import TextCanvasError
from textcanvas.logging_utils import configure_logging
from textcanvas.options import ParserConfig

logger = logging.getLogger(__name__)


def _load_file_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Options from the explicit or discovered configuration file."""
    if args.config:
        config_path: Optional[Path] = Path(args.config)
    elif args.no_config:
        return {}
    else:
        config_path = find_config_in_parents()
        if config_path is None:
            return {}

    logger.info("Using configuration file %s", config_path)
    return config_to_options(load_config_file(config_path), str(config_path))


def build_parser_config(args: argparse.Namespace) -> ParserConfig:
    """Combine configuration file values and command line arguments into a ``ParserConfig``.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed arguments; rendering options that were neither given nor set
        in the environment are ``None``

    Returns
    -------
    ParserConfig
        The effective configuration

    Raises
    ------
    ConfigError
        If the configuration file is invalid
    InvalidOptionsError
        If an option value is invalid

    """
    options = _load_file_options(args)
    for name in ParserConfig.field_names():
        value = getattr(args, name, None)
        if value is not None:
            options[name] = value
    logger.debug("Effective options: %s", options)
    return ParserConfig(**options)


def _read_input(input_path: str) -> Any:
    if input_path == "-":
        return sys.stdin.buffer.read()
    return Path(input_path)


def _write_output(text: str, out: Optional[str]) -> None:
    if out is None:
        sys.stdout.write(text + "\n")
        return
    Path(out).write_text(text + "\n", encoding=DEFAULT_INPUT_ENCODING)
    logger.info("Wrote %d characters to %s", len(text), out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the ``textcanvas`` command.

    Parameters
    ----------
    argv : sequence of str, optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code: 0 on success, 1 if the conversion failed, 2 for invalid
        arguments (argparse exits with 2 on its own)

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        config = build_parser_config(args)
    except TextCanvasError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        text = html_to_text(_read_input(args.input), config, encoding=args.encoding)
        _write_output(text, args.out)
    except TextCanvasError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Error: could not write output: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


__all__ = ["build_parser_config", "main"]
