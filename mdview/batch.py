"""batch rendering of one or many markdown documents."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from mdview.core.models import Document, RenderOptions
from mdview.core.render import render_document
from mdview.documents import DocumentNotFoundError, load_document
from mdview.exporters.base import Exporter
from mdview.progress import ProgressHandler

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


def discover_files(source: Path) -> list[Path]:
    """
    discovers markdown files from source path.

    Args:
        source: path to a file (rendered whatever its suffix) or a directory

    Returns:
        list of paths to markdown files

    Raises:
        DocumentNotFoundError: if source doesn't exist
    """
    if not source.exists():
        raise DocumentNotFoundError(f"Source not found: {source}")

    if source.is_file():
        return [source]

    if source.is_dir():
        return sorted(
            path
            for path in source.iterdir()
            if path.is_file() and path.suffix.lower() in MARKDOWN_SUFFIXES
        )

    return []


def render_documents(
    source: Path,
    exporter: Exporter,
    raw: bool = False,
    options: Optional[RenderOptions] = None,
    package: Optional[str] = None,
    dry_run: bool = False,
    overwrite: bool = False,
    quiet: bool = False,
    progress: bool = False,
) -> int:
    """
    renders documents from source and hands each result to the exporter.

    A missing source is resolved from package when given.

    Args:
        source: path to a markdown file or a directory of them
        exporter: destination of rendered results
        raw: if True, pass markdown through instead of rendering HTML
        options: page and link options
        package: optional package holding bundled documents
        dry_run: if True, don't write anything
        overwrite: if True, replace existing output files
        quiet: if True, suppress non-error output
        progress: if True, show progress bar

    Returns:
        exit code (0 success, 1 partial failure)

    Raises:
        DocumentNotFoundError: if source cannot be located at all
    """
    options = options or RenderOptions()

    with ProgressHandler(quiet=quiet, show_progress=progress) as handler:
        handler.start_discovery()

        if not source.exists():
            # only a bundled copy can satisfy a missing path
            document = load_document(source, package)
            handler.set_total(1)
            success = _export_document(
                document, exporter, raw, options, dry_run, overwrite, handler
            )
            handler.finish(int(success), int(not success))
            return 0 if success else 1

        files = discover_files(source)
        if not files:
            handler.log_info(f"No markdown files found in {source}")
            return 0

        handler.log_info(f"Found {len(files)} document(s) to render")
        handler.set_total(len(files))

        rendered = 0
        failed = 0
        for file_path in files:
            if _process_file(
                file_path, exporter, raw, options, dry_run, overwrite, handler
            ):
                rendered += 1
            else:
                failed += 1

        handler.finish(rendered, failed)

        if failed > 0:
            return 1
        return 0


def _process_file(
    file_path: Path,
    exporter: Exporter,
    raw: bool,
    options: RenderOptions,
    dry_run: bool,
    overwrite: bool,
    handler: ProgressHandler,
) -> bool:
    """loads and exports a single file, reporting failures to the handler."""
    try:
        document = load_document(file_path)
    except (OSError, UnicodeDecodeError) as e:
        handler.log_error(f"Failed: {file_path.name}: {e}")
        handler.update(file_path.name)
        return False
    return _export_document(
        document, exporter, raw, options, dry_run, overwrite, handler
    )


def _export_document(
    document: Document,
    exporter: Exporter,
    raw: bool,
    options: RenderOptions,
    dry_run: bool,
    overwrite: bool,
    handler: ProgressHandler,
) -> bool:
    """
    renders a loaded document and exports it.

    Returns:
        True on success, False when the export failed
    """
    handler.update(document.name)
    if not options.title:
        options = replace(options, title=document.name)
    result = render_document(document.text, raw=raw, options=options)
    try:
        written = exporter.export(
            result, document.name, dry_run=dry_run, overwrite=overwrite
        )
    except OSError as e:
        handler.log_error(f"Failed: {document.name}: {e}")
        return False

    if written is not None:
        handler.log_info(f"Rendered {document.name} -> {written}")
    logger.debug("%s rendered as %s", document.name, result.content_type)
    return True
