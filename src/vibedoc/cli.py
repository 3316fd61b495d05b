"""Command-line interface for vibedoc.

This module provides a small CLI over the library: rendering stored post
documents to HTML, building excerpts, and computing slugs and reading times.

Environment Variable Support
----------------------------
``VIBEDOC_LOG_LEVEL`` sets the default for ``--log-level``. CLI arguments
always override environment variables.

Examples
--------
Render a stored post::

    $ vibedoc render post.json --out post.html

Render with the blog page markup and fail on broken content::

    $ vibedoc render post.json --preset blog --strict

Read the document from stdin::

    $ cat post.json | vibedoc render -

Slug and reading time::

    $ vibedoc slug "Belajar Python dari Nol"
    $ vibedoc read-time post.json

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/vibedoc/cli.py
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from vibedoc.blog import estimate_read_time, slugify_title
from vibedoc.constants import (
    DEFAULT_EXCERPT_LENGTH,
    DEFAULT_MAX_DEPTH,
    DEFAULT_SLUG_MAX_LENGTH,
    DEFAULT_WORDS_PER_MINUTE,
    DEPS_RICH,
    MAX_ALLOWED_DEPTH,
)
from vibedoc.diagnostics import DiagnosticEvent
from vibedoc.document import load_document, make_excerpt
from vibedoc.exceptions import (
    DependencyError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
    VibedocError,
)
from vibedoc.logging_utils import configure_logging
from vibedoc.options import BLOG_POST_OPTIONS, HtmlContentOptions
from vibedoc.renderers.html import HtmlContentRenderer
from vibedoc.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

PRESETS = {
    "default": HtmlContentOptions(),
    "blog": BLOG_POST_OPTIONS,
}


def _max_depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}") from e
    if not 1 <= depth <= MAX_ALLOWED_DEPTH:
        raise argparse.ArgumentTypeError(f"depth must be between 1 and {MAX_ALLOWED_DEPTH}")
    return depth


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="vibedoc",
        description="Render rich-text post documents to HTML and compute post metadata.",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("VIBEDOC_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING, env: VIBEDOC_LOG_LEVEL)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose log format with timestamps and logger names")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    render = subparsers.add_parser("render", help="Render a stored document to HTML")
    render.add_argument("input", help="Path to the document JSON, or '-' for stdin")
    render.add_argument("-o", "--out", help="Output file (default: stdout)")
    render.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default="default",
        help="Markup preset: 'default' (plain tags) or 'blog' (figure images, unwrapped image paragraphs)",
    )
    render.add_argument(
        "--max-depth",
        type=_max_depth,
        default=None,
        help=f"Maximum nesting depth before truncation (default: {DEFAULT_MAX_DEPTH})",
    )
    render.add_argument("--sanitize", action="store_true", help="Sanitize the output with bleach")
    render.add_argument(
        "--allow-unsafe-urls", action="store_true", help="Keep link and image URLs with dangerous schemes"
    )
    render.add_argument(
        "--strict", action="store_true", help="Exit with an error status if any diagnostics were reported"
    )
    render.add_argument("--rich", action="store_true", help="Syntax-highlight the HTML on a terminal")
    render.set_defaults(handler=_run_render)

    excerpt = subparsers.add_parser("excerpt", help="Print a plain-text excerpt of a stored document")
    excerpt.add_argument("input", help="Path to the document JSON, or '-' for stdin")
    excerpt.add_argument(
        "--max-length",
        type=_positive_int,
        default=DEFAULT_EXCERPT_LENGTH,
        help=f"Maximum excerpt length (default: {DEFAULT_EXCERPT_LENGTH})",
    )
    excerpt.set_defaults(handler=_run_excerpt)

    slug = subparsers.add_parser("slug", help="Print the URL slug for a title")
    slug.add_argument("title", help="Post or project title")
    slug.add_argument(
        "--max-length",
        type=_positive_int,
        default=DEFAULT_SLUG_MAX_LENGTH,
        help=f"Maximum slug length (default: {DEFAULT_SLUG_MAX_LENGTH})",
    )
    slug.set_defaults(handler=_run_slug)

    read_time = subparsers.add_parser("read-time", help="Print the estimated reading time in minutes")
    read_time.add_argument("input", help="Path to the document JSON, or '-' for stdin")
    read_time.add_argument(
        "--wpm",
        type=_positive_int,
        default=DEFAULT_WORDS_PER_MINUTE,
        help=f"Reading speed in words per minute (default: {DEFAULT_WORDS_PER_MINUTE})",
    )
    read_time.set_defaults(handler=_run_read_time)

    return parser


def _load_input(source: str) -> Any:
    if source == "-":
        return load_document(sys.stdin.read())
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(source)
    return load_document(path)


@requires_dependencies("rich output", DEPS_RICH)
def _print_rich(markup: str) -> None:
    from rich.console import Console
    from rich.syntax import Syntax

    Console().print(Syntax(markup, "html", word_wrap=True))


def _build_options(args: argparse.Namespace) -> HtmlContentOptions:
    updates: dict[str, Any] = {}
    if args.max_depth is not None:
        updates["max_depth"] = args.max_depth
    if args.sanitize:
        updates["sanitize_output"] = True
    if args.allow_unsafe_urls:
        updates["sanitize_urls"] = False
    options = PRESETS[args.preset]
    return options.create_updated(**updates) if updates else options


def _run_render(args: argparse.Namespace) -> int:
    document = _load_input(args.input)
    diagnostics: list[DiagnosticEvent] = []
    renderer = HtmlContentRenderer(_build_options(args), diagnostic_callback=diagnostics.append)

    if args.out:
        renderer.render_to_file(document, args.out)
        logger.info("Wrote %s", args.out)
    else:
        markup = renderer.render(document)
        if args.rich and sys.stdout.isatty():
            _print_rich(markup)
        else:
            print(markup)

    if diagnostics:
        logger.info("%d diagnostic(s) reported", len(diagnostics))
        if args.strict:
            print(f"Error: {len(diagnostics)} diagnostic(s) reported while rendering", file=sys.stderr)
            return EXIT_RENDERING_ERROR
    return EXIT_SUCCESS


def _run_excerpt(args: argparse.Namespace) -> int:
    print(make_excerpt(_load_input(args.input), max_length=args.max_length))
    return EXIT_SUCCESS


def _run_slug(args: argparse.Namespace) -> int:
    print(slugify_title(args.title, max_length=args.max_length))
    return EXIT_SUCCESS


def _run_read_time(args: argparse.Namespace) -> int:
    print(estimate_read_time(_load_input(args.input), words_per_minute=args.wpm))
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the CLI.

    Parameters
    ----------
    args : list of str or None
        Command line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit status

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        return parsed_args.handler(parsed_args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except ParsingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    except (OutputWriteError, RenderingError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except (VibedocError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
