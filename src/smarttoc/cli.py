"""Command-line filter: read HTML, write HTML with a table of contents.

    smarttoc article.html --post-type page > out.html
    cat article.html | smarttoc --position top
"""

from __future__ import annotations

import argparse
import sys

import structlog

from smarttoc import __version__
from smarttoc.config import load_settings
from smarttoc.content_filter import TocContentFilter
from smarttoc.errors import ErrorCode, SmartTocError
from smarttoc.logging_setup import setup_logging
from smarttoc.models.context import Position, RenderContext
from smarttoc.parser import count_headings

EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smarttoc",
        description="Insert a table of contents into rendered HTML content.",
    )
    parser.add_argument("file", nargs="?", help="HTML file to read (default: stdin)")
    parser.add_argument("--post-type", default="post", help="content type of the document")
    parser.add_argument(
        "--position",
        choices=[p.value for p in Position],
        help="where to insert the TOC (overrides config)",
    )
    parser.add_argument("--min-headings", type=int, help="minimum heading count (overrides config)")
    parser.add_argument("--title", help="TOC title (overrides config)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _toc_overrides(args: argparse.Namespace) -> dict:
    overrides = {}
    if args.position is not None:
        overrides["position"] = args.position
    if args.min_headings is not None:
        overrides["min_headings"] = args.min_headings
    if args.title is not None:
        overrides["title"] = args.title
    return overrides


def _read_content(path: str | None) -> str:
    if path is None:
        return sys.stdin.read()
    try:
        with open(path, encoding="utf-8") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SmartTocError(
            code=ErrorCode.INVALID_INPUT,
            message=f"Cannot read {path}: {exc}",
            suggestion="Pass an existing, readable UTF-8 encoded HTML file.",
            recoverable=False,
        ) from exc


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
        overrides = _toc_overrides(args)
        if overrides:
            toc = settings.toc.model_dump() | overrides
            settings = load_settings(toc=toc)
    except SmartTocError as exc:
        print(f"smarttoc: {exc.message}\n{exc.suggestion}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(settings)
    log = structlog.get_logger().bind(source=args.file or "<stdin>")

    try:
        content = _read_content(args.file)
    except SmartTocError as exc:
        log.error(
            "input_read_failed",
            code=exc.code,
            message=exc.message,
            suggestion=exc.suggestion,
        )
        return EXIT_INPUT_ERROR

    log.debug("content_read", length=len(content), headings=count_headings(content))
    context = RenderContext(post_type=args.post_type)
    sys.stdout.write(TocContentFilter(settings).apply(content, context))
    return 0


if __name__ == "__main__":
    sys.exit(main())
