"""writes rendered documents into an output directory."""

import logging
from pathlib import Path
from typing import Optional

from mdview.core.models import RenderResult
from mdview.exporters.base import Exporter

logger = logging.getLogger(__name__)


class HTMLExporter(Exporter):  # pylint: disable=too-few-public-methods
    """exports each document to <destination>/<stem>.html (or .md in raw mode)."""

    def __init__(self, destination: Path) -> None:
        self.destination = destination

    def output_path(self, result: RenderResult, name: str) -> Path:
        """returns the file a result for the named document is written to."""
        return self.destination / f"{Path(name).stem}{result.suffix}"

    def export(
        self,
        result: RenderResult,
        name: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """exports render result to a file."""
        output_path = self.output_path(result, name)

        if dry_run:
            logger.info("Would write to: %s", output_path)
            return None

        if output_path.exists() and not overwrite:
            logger.info("Skipping existing file: %s", output_path)
            return None

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.body, encoding="utf-8")
        logger.debug("Wrote %s (%s)", output_path, result.content_type)
        return output_path
