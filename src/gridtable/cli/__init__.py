"""Command-line interface for the gridtable library.

This module provides a small CLI tool for re-rendering box-drawn tables,
for example cleaning up MySQL client output or switching a table to a
different glyph style.

Examples
--------
Re-render a table from stdin::

    $ mysql -t -e "SELECT * FROM users" | gridtable --from mysql

Switch a file to the dot style::

    $ gridtable --file users.txt --style dot --result users_dot.txt

Transpose and deduplicate::

    $ gridtable --file users.txt --deduplicate --transpose

Show the table with rich formatting::

    $ gridtable --file users.mysql --rich

Exit Codes
----------
0 success, 1 unexpected error, 2 missing optional dependency,
3 validation or configuration error, 4 file error, 5 unknown format,
6 parse error.

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/gridtable/cli/__init__.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gridtable.api import convert
from gridtable.cli.output import print_rich_table, print_styles, should_use_rich_output
from gridtable.constants import DEFAULT_COLUMN_BOUNDARIES
from gridtable.converter_registry import registry
from gridtable.exceptions import DependencyError, FormatError, ParsingError, ValidationError
from gridtable.grid.style import list_styles
from gridtable.logging_utils import configure_logging, resolve_log_level
from gridtable.options.grid import GridParserOptions, GridRendererOptions
from gridtable.parsers.grid import GridParser
from gridtable.transforms import TRANSFORMS, apply_transforms

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_PARSING_ERROR = 6

_TRANSFORM_HELP = {
    "transpose": "Swap rows and columns",
    "delete-empty": "Remove rows whose cells are all blank",
    "deduplicate": "Remove repeated rows, keeping the first",
    "uppercase": "Upper-case every header and cell",
    "lowercase": "Lower-case every header and cell",
    "capitalize": "Upper-case the first character of every header and cell",
}


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    # ConfigurationError is a ValidationError
    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR

    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``gridtable`` command."""
    parser = argparse.ArgumentParser(
        prog="gridtable",
        description="Parse and re-render box-drawn text tables such as MySQL client output.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    formats = registry.list_formats()
    parser.add_argument(
        "--from",
        "-f",
        dest="source_format",
        choices=formats,
        help="Input format (default: detected from --file extension, else ascii)",
    )
    parser.add_argument(
        "--to",
        "-t",
        dest="target_format",
        choices=formats,
        help="Output format (default: detected from --result extension, else ascii)",
    )
    parser.add_argument("--file", metavar="PATH", help="Input file (default: stdin)")
    parser.add_argument("--result", "-r", metavar="PATH", help="Output file (default: stdout)")

    style_group = parser.add_argument_group("table options")
    style_group.add_argument(
        "--style",
        help="Table style for input and output: box, plus, dot, bubble or any single character (default: box)",
    )
    style_group.add_argument(
        "--lenient",
        action="store_true",
        help="Pad or truncate rows whose column count differs from the header instead of failing",
    )
    style_group.add_argument(
        "--column-boundaries",
        choices=["delimiter", "anchors"],
        help=f"How data lines are split into cells (default: {DEFAULT_COLUMN_BOUNDARIES}, anchors for mysql)",
    )
    style_group.add_argument(
        "--list-styles",
        action="store_true",
        help="List the named table styles and exit",
    )

    transform_group = parser.add_argument_group("transforms", "Applied in the order given on the command line")
    for name in TRANSFORMS:
        transform_group.add_argument(
            f"--{name}",
            dest="transforms",
            action="append_const",
            const=name,
            help=_TRANSFORM_HELP.get(name),
        )

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    log_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    log_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    log_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and logger names",
    )

    parser.add_argument(
        "--rich",
        action="store_true",
        help="Display the table with rich terminal formatting (automatically disabled when output is piped)",
    )

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    log_level = resolve_log_level(parsed_args.log_level, verbose=parsed_args.verbose, trace=parsed_args.trace)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> tuple[GridParserOptions, GridRendererOptions]:
    """Build parser and renderer options from the command-line flags.

    Format defaults from the registry are applied on top of these, so the
    ``mysql`` format always parses with the ``box`` style and anchor columns.
    """
    parser_kwargs: dict = {"strict": not parsed_args.lenient}
    renderer_kwargs: dict = {}
    if parsed_args.style:
        parser_kwargs["style"] = parsed_args.style
        renderer_kwargs["style"] = parsed_args.style
    if parsed_args.column_boundaries:
        parser_kwargs["column_boundaries"] = parsed_args.column_boundaries
    return GridParserOptions(**parser_kwargs), GridRendererOptions(**renderer_kwargs)


def _run(parsed_args: argparse.Namespace) -> int:
    source_format = parsed_args.source_format or registry.detect_format(parsed_args.file)
    target_format = parsed_args.target_format or registry.detect_format(parsed_args.result)
    parser_options, renderer_options = build_options(parsed_args)

    source = Path(parsed_args.file) if parsed_args.file else sys.stdin
    transforms = parsed_args.transforms or []
    logger.info("Converting %s (%s) -> %s", parsed_args.file or "<stdin>", source_format, target_format)

    if should_use_rich_output(parsed_args, raise_on_missing=True):
        options = registry.parser_options_for(source_format, parser_options)
        table = apply_transforms(GridParser(options).parse(source), transforms)
        print_rich_table(table, title=parsed_args.file)
        return EXIT_SUCCESS

    output = Path(parsed_args.result) if parsed_args.result else sys.stdout
    convert(
        source,
        output,
        source_format=source_format,
        target_format=target_format,
        parser_options=parser_options,
        renderer_options=renderer_options,
        transforms=transforms,
    )
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the ``gridtable`` command."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    if parsed_args.list_styles:
        print_styles(list_styles(), use_rich=should_use_rich_output(parsed_args))
        return EXIT_SUCCESS

    try:
        return _run(parsed_args)
    except (DependencyError, ValidationError, FormatError, ParsingError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
