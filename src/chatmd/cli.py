#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/chatmd/cli.py
"""Command line interface for chatmd.

Commands
--------
- ``to-markdown``: component JSON in, Discord markdown out
- ``from-markdown``: Discord markdown in, component JSON (or a Rich preview) out
- ``escape``: Discord markdown in, escaped markdown out

Input is read from a file argument, or from stdin when the argument is
omitted or ``-``.

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from chatmd.api import escape_markdown, from_markdown, to_markdown
from chatmd.components.serialization import component_from_json, component_to_json
from chatmd.constants import DEFAULT_MAX_NESTING_DEPTH
from chatmd.exceptions import ChatMdError, ParsingError, RenderingError, ValidationError
from chatmd.logging_utils import configure_logging
from chatmd.options.components import ComponentSerializerOptions
from chatmd.options.markdown import MarkdownSerializerOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


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
    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", nargs="?", default="-", help="Input file, '-' or omitted for stdin")
    common.add_argument("-o", "--output", help="Write the result to this file instead of stdout")
    common.add_argument(
        "--max-depth",
        type=_positive_int,
        default=DEFAULT_MAX_NESTING_DEPTH,
        help=f"Maximum nesting depth of the input (default: {DEFAULT_MAX_NESTING_DEPTH})",
    )

    parser = argparse.ArgumentParser(
        prog="chatmd",
        description="Transcode between Minecraft chat components and Discord markdown",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    subparsers = parser.add_subparsers(dest="command", required=True)

    to_md = subparsers.add_parser(
        "to-markdown", parents=[common], help="Convert component JSON to Discord markdown"
    )
    to_md.add_argument("--embed-links", action="store_true", help="Render clickable URLs as [text](url)")
    to_md.add_argument("--no-escape", action="store_true", help="Do not escape markdown characters in text")
    to_md.add_argument(
        "--keep-legacy-formatting", action="store_true", help="Keep legacy section-sign formatting codes"
    )

    from_md = subparsers.add_parser(
        "from-markdown", parents=[common], help="Convert Discord markdown to component JSON"
    )
    from_md.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    from_md.add_argument("--rich", action="store_true", help="Print a styled terminal preview instead of JSON")
    from_md.add_argument("--debug-parser", action="store_true", help="Log every parser rule match")

    subparsers.add_parser("escape", parents=[common], help="Escape the markdown of a Discord message")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _write_output(text: str, destination: Optional[str]) -> None:
    if destination:
        Path(destination).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


def _run_to_markdown(parsed_args: argparse.Namespace) -> None:
    component = component_from_json(_read_input(parsed_args.input), max_depth=parsed_args.max_depth)
    options = MarkdownSerializerOptions(
        embed_links=parsed_args.embed_links,
        escape_markdown=not parsed_args.no_escape,
        strip_legacy_formatting=not parsed_args.keep_legacy_formatting,
        max_depth=parsed_args.max_depth,
    )
    _write_output(to_markdown(component, options), parsed_args.output)


def _run_from_markdown(parsed_args: argparse.Namespace) -> None:
    options = ComponentSerializerOptions(
        debugging_enabled=parsed_args.debug_parser,
        max_depth=parsed_args.max_depth,
    )
    component = from_markdown(_read_input(parsed_args.input).rstrip("\n"), options)

    if parsed_args.rich and not parsed_args.output:
        from rich.console import Console

        from chatmd.components.preview import to_rich_text

        Console().print(to_rich_text(component))
        return
    _write_output(component_to_json(component, indent=parsed_args.indent), parsed_args.output)


def _run_escape(parsed_args: argparse.Namespace) -> None:
    options = ComponentSerializerOptions.escape_defaults().with_max_depth(parsed_args.max_depth)
    _write_output(escape_markdown(_read_input(parsed_args.input).rstrip("\n"), options), parsed_args.output)


_COMMANDS = {
    "to-markdown": _run_to_markdown,
    "from-markdown": _run_from_markdown,
    "escape": _run_escape,
}


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    debug_parser = getattr(parsed_args, "debug_parser", False)
    log_level = logging.DEBUG if parsed_args.trace or debug_parser else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        _COMMANDS[parsed_args.command](parsed_args)
    except (ChatMdError, ValueError, OSError) as e:
        logger.debug("Command %s failed", parsed_args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
