"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.syntax import Syntax


class CLIDisplay:
    """Status lines go to STDERR, command output to STDOUT."""

    def __init__(self):
        self.console = Console(file=sys.stdout)
        self.stderr_console = Console(file=sys.stderr)

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[blue]i[/blue] {message}")

    def progress(self, message: str, progress_percent: float) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[green]✓[/green] {message}")

    def error(self, message: str) -> None:
        self.stderr_console.print(f"[red]✗[/red] {message}")

    def json_output(self, data: Any, output_format: str = "yaml") -> None:
        """Output JSON or YAML, highlighted on a terminal and plain when redirected."""
        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            text = json.dumps(data, indent=2, ensure_ascii=False)

        if sys.stdout.isatty():
            self.console.print(Syntax(text, output_format, theme="monokai", line_numbers=False))
        else:
            print(text, flush=True)
