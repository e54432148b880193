"""base exporter interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from mdview.core.models import RenderResult


class Exporter(ABC):  # pylint: disable=too-few-public-methods
    """abstract base class for render result exporters."""

    @abstractmethod
    def export(
        self,
        result: RenderResult,
        name: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """
        Export a render result.

        Args:
            result: The rendered document
            name: Source document name, used to derive the output name
            dry_run: If True, don't actually write anything
            overwrite: If True, overwrite existing content

        Returns:
            Path written, or None when nothing was written to a file
        """
        ...  # pylint: disable=unnecessary-ellipsis
