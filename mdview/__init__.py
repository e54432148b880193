"""Markdown document viewer: renders markdown to standalone HTML pages."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from mdview.batch import render_documents
from mdview.core.models import RenderOptions
from mdview.core.render import wants_markdown
from mdview.documents import DocumentNotFoundError
from mdview.exporters.base import Exporter
from mdview.exporters.html import HTMLExporter
from mdview.exporters.stdout import StdoutExporter

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for mdview CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    parser = argparse.ArgumentParser(
        description="Render markdown documents to standalone HTML"
    )
    parser.add_argument(
        "source",
        help="markdown file or directory of markdown files",
    )
    parser.add_argument(
        "destination",
        nargs="?",
        default=None,
        help="output directory (default: write to stdout)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="output the markdown unchanged instead of HTML",
    )
    parser.add_argument(
        "--accept",
        default="",
        help="Accept hint; text/markdown selects raw output",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="page title (default: document file name)",
    )
    parser.add_argument(
        "--lang",
        default="fr",
        help="html lang attribute (default: fr)",
    )
    parser.add_argument(
        "--safe-links",
        action="store_true",
        help="drop links with javascript:, vbscript:, file: or data: URLs",
    )
    parser.add_argument(
        "--package",
        default=None,
        help="package to read a bundled copy from when source is missing",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="render documents but don't write output",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="replace existing output files",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show progress bar",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress non-error output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    source = Path(args.source)
    if args.destination is None and source.is_dir():
        # stdout holds a single document
        logger.error("A directory source needs a destination: %s", source)
        return 2

    exporter: Exporter = (
        HTMLExporter(Path(args.destination)) if args.destination else StdoutExporter()
    )
    options = RenderOptions(
        title=args.title, lang=args.lang, safe_links=args.safe_links
    )

    try:
        return render_documents(
            source=source,
            exporter=exporter,
            raw=wants_markdown(args.raw, args.accept),
            options=options,
            package=args.package,
            dry_run=args.dry_run,
            overwrite=args.overwrite,
            quiet=args.quiet,
            progress=args.progress,
        )
    except DocumentNotFoundError as e:
        logger.error("Not found: %s", e)
        return 2
    except Exception as e:
        logger.error("Fatal error: %s", e)
        return 2
