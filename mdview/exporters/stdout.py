"""writes rendered documents to standard output."""

import sys
from pathlib import Path
from typing import Optional, TextIO

from mdview.core.models import RenderResult
from mdview.exporters.base import Exporter


class StdoutExporter(Exporter):  # pylint: disable=too-few-public-methods
    """exports render results to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def export(
        self,
        result: RenderResult,
        name: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """writes the body unchanged unless dry_run."""
        if dry_run:
            return None
        stream = self.stream or sys.stdout
        stream.write(result.body)
        return None
