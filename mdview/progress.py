"""progress and output handling for render runs."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
)


class ProgressHandler:  # pylint: disable=too-few-public-methods
    """handles progress display and console output while rendering documents."""

    def __init__(self, quiet: bool = False, show_progress: bool = False) -> None:
        self.quiet = quiet
        self.show_progress = show_progress
        self._console = Console(stderr=True)
        self._progress: Optional[Progress] = None
        self._task_id: Optional[TaskID] = None

    def __enter__(self) -> "ProgressHandler":
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[object],
    ) -> None:
        self._stop()

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None

    def start_discovery(self) -> None:
        """starts spinner while looking for markdown files."""
        if not self.show_progress:
            return

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self._console,
            transient=True,
        )
        self._progress.start()
        self._task_id = self._progress.add_task(
            "Discovering documents...", total=None
        )

    def set_total(self, total: int) -> None:
        """switches from spinner to determinate progress bar."""
        if not self.show_progress:
            return

        self._stop()

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TextColumn("- {task.fields[name]}"),
            console=self._console,
            transient=True,
        )
        self._progress.start()
        self._task_id = self._progress.add_task("Rendering", total=total, name="")

    def update(self, name: str) -> None:
        """advances progress by 1 and shows the current document name."""
        if not self.show_progress or self._progress is None or self._task_id is None:
            return

        self._progress.update(self._task_id, advance=1, name=name)

    def log_error(self, message: str) -> None:
        """prints error message (always shown, even in quiet mode)."""
        self._console.print(f"[red]ERROR:[/red] {escape(message)}")

    def log_info(self, message: str) -> None:
        """prints info message (only when not quiet and progress disabled)."""
        if self.quiet or self.show_progress:
            return

        self._console.print(escape(message))

    def finish(self, rendered: int, failed: int) -> None:
        """stops progress and prints summary unless quiet."""
        self._stop()

        if self.quiet:
            return

        total = rendered + failed
        self._console.print(
            f"Processed {total} document(s): {rendered} rendered, {failed} failed"
        )
