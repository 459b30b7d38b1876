"""Reporter for CLI output and progress tracking."""

from contextlib import contextmanager
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

from dmget.domain.errors import DmgetError
from dmget.ui import messages


def display_path(path: Path | str) -> str:
    """Return a path with the home directory abbreviated to ~."""
    path = Path(path)
    home = Path.home()
    if home == Path(home.anchor):
        return str(path)
    try:
        relative = path.relative_to(home)
    except ValueError:
        return str(path)
    return str(Path("~") / relative)


class Reporter:
    """Terminal reporter with rich progress bars and formatted output."""

    def __init__(self, silent: bool = False, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            silent: If True, suppress all output (for testing/automation).
            console: Optional console to print to (a new one is created otherwise).
        """
        self.silent = silent
        self.console = console if console is not None else Console(
            quiet=silent, highlight=False, soft_wrap=True
        )
        self._download_progress: Progress | None = None
        self._extraction_progress: Progress | None = None
        self._extraction_task_id: TaskID | None = None

    def report_running(self) -> None:
        """Print the startup banner."""
        if not self.silent:
            self.console.print(messages.PROGRAM_RUNNING)

    def report_task(self, message: str) -> None:
        """Report the start of a top-level task."""
        if not self.silent:
            self.console.print(f"[bold][black on blue] * [/black on blue] {message}[/bold]")

    def report_subtask(self, message: str) -> None:
        """Report a step within the current task."""
        if not self.silent:
            self.console.print(f"[blue]{escape(message)}[/blue]")

    def report_cleanup(self, path: Path) -> None:
        """Report that the staged archive was removed."""
        if not self.silent:
            self.console.print(
                "[bold][white on black] - [/white on black] Cleaning up temporary files...[/bold]"
            )
            self.console.print(f"[dim]Removed {escape(str(path))}[/dim]")

    @contextmanager
    def download_context(self):
        """Context manager for download progress display."""
        if self.silent:
            yield None
            return

        self._download_progress = Progress(
            TextColumn("[bold blue]{task.fields[filename]}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeRemainingColumn(),
            console=self.console,
            transient=True,
        )
        try:
            with self._download_progress as progress:
                yield progress
        finally:
            self._download_progress = None

    def create_download_progress_hook(self, filename: str):
        """Create a progress hook for downloading a specific file."""
        if self.silent:

            def hook(downloaded: int, total: int | None) -> None:
                pass

            return hook

        if self._download_progress is None:
            raise RuntimeError("Must be called within download_context")

        task_id = self._download_progress.add_task("", total=None, filename=filename)

        def hook(downloaded: int, total: int | None) -> None:
            if self._download_progress is None:
                return

            if total is not None and self._download_progress.tasks[task_id].total != total:
                self._download_progress.update(task_id, total=total)

            self._download_progress.update(task_id, completed=downloaded)

        return hook

    @contextmanager
    def extraction_context(self):
        """Context manager for extraction progress display."""
        if self.silent:
            yield None
            return

        self._extraction_progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TextColumn("•"),
            TextColumn("{task.completed}/{task.total} files"),
            console=self.console,
            transient=True,
        )
        self._extraction_task_id = self._extraction_progress.add_task(
            "Extracting", total=None, start=False
        )
        try:
            with self._extraction_progress as progress:
                yield progress
        finally:
            self._extraction_progress = None
            self._extraction_task_id = None

    def create_extraction_progress_hook(self):
        """Create a progress hook for extraction."""
        if self.silent:

            def hook(entry_name: str, current: int, total: int) -> None:
                pass

            return hook

        if self._extraction_progress is None:
            raise RuntimeError("Must be called within extraction_context")

        def hook(entry_name: str, current: int, total: int) -> None:
            if self._extraction_progress is None or self._extraction_task_id is None:
                return

            task_id = self._extraction_task_id
            if self._extraction_progress.tasks[task_id].total is None:
                self._extraction_progress.update(task_id, total=total)
                self._extraction_progress.start_task(task_id)
            self._extraction_progress.update(task_id, completed=current)

        return hook

    def report_success(self, project_dir: Path) -> None:
        """Report a successful extraction with next steps."""
        if self.silent:
            return

        shown = escape(display_path(project_dir))
        self.console.print("[bold][black on green] ✔ [/black on green] Success![/bold]\n")
        self.console.print(messages.after_success(shown))

    def report_empty_archive(self, directory: Path) -> None:
        """Report that the archive had nothing to extract."""
        if not self.silent:
            self.console.print(
                f"[bold][black on green] ✔ [/black on green] Done.[/bold] "
                f"The archive was empty; nothing was extracted to {escape(display_path(directory))}."
            )

    def report_warning(self, message: str) -> None:
        """Report a warning message."""
        if not self.silent:
            self.console.print(f"\n[yellow]Warning:[/yellow] {escape(message)}")

    def report_error(self, error: DmgetError | str) -> None:
        """Report an error message, with a hint when the error carries one."""
        if self.silent:
            return

        self.console.print(f"[red]Error:[/red] {escape(str(error))}")
        hint = error.hint if isinstance(error, DmgetError) else None
        if hint:
            self.console.print(f"\n{escape(hint)}")

    def print_tldr(self) -> None:
        """Print usage examples."""
        if not self.silent:
            self.console.print(messages.TLDR)

    def print_help_hint(self) -> None:
        """Print a pointer to the usage examples."""
        if not self.silent:
            self.console.print("[bold][white on black] 💡 [/white on black] Need help?[/bold]")
            self.console.print(messages.HELP_TLDR)
