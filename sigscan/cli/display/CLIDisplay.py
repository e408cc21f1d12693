"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from ...constants import DEFAULT_TIMESTAMP_FORMAT


class CLIDisplay:
    """CLI display using Rich: status lines and progress on stderr, data on stdout."""

    class ProgressContext:
        """Context manager for progress bars."""

        def __init__(self, display: "CLIDisplay", total: int, description: str = ""):
            self.display = display
            self.total = total
            self.description = description
            self.handle: Any | None = None

        def __enter__(self) -> "CLIDisplay.ProgressContext":
            self.handle = self.display.progress_start(self.total, self.description)
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if self.handle is not None:
                self.display.progress_finish(self.handle)
            return False

        def update(self, completed: float | None = None, description: str | None = None) -> None:
            if self.handle is not None:
                self.display.progress_update(self.handle, completed=completed, description=description)

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)
        self._progress_contexts: dict[int, tuple[Progress, Any]] = {}

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {message}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {message}")

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {message}")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {message}")

    def progress_start(self, total: int, description: str = "", **kwargs) -> Any:  # noqa: ARG002
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.stderr_console,
            transient=True,
        )
        progress.start()
        task_id = progress.add_task(description, total=total)

        handle = id(progress)
        self._progress_contexts[handle] = (progress, task_id)

        return handle

    def progress_update(
        self,
        handle: Any,
        completed: float | None = None,
        description: str | None = None,
        **kwargs,  # noqa: ARG002
    ) -> None:
        if handle not in self._progress_contexts:
            return

        progress, task_id = self._progress_contexts[handle]
        changes: dict[str, Any] = {}
        if completed is not None:
            changes["completed"] = completed
        if description:
            changes["description"] = description
        progress.update(task_id, **changes)

    def progress_finish(self, handle: Any, **kwargs) -> None:  # noqa: ARG002
        if handle not in self._progress_contexts:
            return

        progress, task_id = self._progress_contexts.pop(handle)
        task = progress.tasks[task_id]
        if task.total and task.completed < task.total:
            progress.update(task_id, completed=task.total)
        progress.stop()

    def progress(self, total: int, description: str = "") -> "CLIDisplay.ProgressContext":
        """Context manager for progress bars."""
        return CLIDisplay.ProgressContext(self, total, description)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer: Any = YamlLexer()
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = JsonLexer()

        if sys.stdout.isatty():
            print(highlight(text, lexer, Terminal256Formatter(style="monokai")), end="")
        else:
            print(text, end="")
