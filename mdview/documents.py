"""locates markdown documents on disk or bundled inside a package."""

import logging
from importlib import resources
from pathlib import Path
from typing import Optional

from mdview.core.models import Document

logger = logging.getLogger(__name__)


class DocumentNotFoundError(FileNotFoundError):
    """raised when a document exists neither on disk nor as a package resource."""


def _read_filesystem(path: Path) -> Optional[str]:
    """returns file text with line endings untouched, or None when unavailable."""
    try:
        if path.is_file():
            return path.read_bytes().decode("utf-8")
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
    return None


def _read_package_resource(package: str, name: str) -> Optional[str]:
    """returns resource text from package, or None when unavailable."""
    try:
        resource = resources.files(package).joinpath(name)
        if resource.is_file():
            return resource.read_bytes().decode("utf-8")
    except (ModuleNotFoundError, OSError) as e:
        logger.debug("Cannot read resource %s from %s: %s", name, package, e)
    return None


def load_document(path: Path, package: Optional[str] = None) -> Document:
    """
    loads a markdown document, trying the filesystem first.

    Args:
        path: filesystem path to the document
        package: optional package holding a bundled copy under the same file name

    Returns:
        resolved document

    Raises:
        DocumentNotFoundError: if the document cannot be located
    """
    text = _read_filesystem(path)
    if text is not None:
        logger.debug("Loaded %s from filesystem", path)
        return Document(name=path.name, text=text, origin="filesystem")

    if package:
        text = _read_package_resource(package, path.name)
        if text is not None:
            logger.debug("Loaded %s from package %s", path.name, package)
            return Document(name=path.name, text=text, origin="package")

    raise DocumentNotFoundError(f"Document not found: {path}")
