from __future__ import annotations
from typing import TYPE_CHECKING, Optional
from rich.console import Console
from rich.text import Text
if TYPE_CHECKING:
    from ..runners.runner import SuiteResult

STATUS_COLORS = {True: "#33ff00", False: "#ff6666", None: "#cccccc"}
STATUS_MARKS = {True: "[ok]", False: "[err]", None: "[--]"}

def render_line(message: Optional[str], status: Optional[bool]) -> str:
    """Plain-text line for a buffered message, tagged with its status mark."""
    return f"{STATUS_MARKS.get(status, STATUS_MARKS[None])} {message or ''}"

def _line_status(line: str, default: Optional[bool]) -> Optional[bool]:
    for status, mark in STATUS_MARKS.items():
        if line.startswith(mark + " "):
            return status
    return default

def styled(message: Optional[str], status: Optional[bool]) -> Text:
    """Bold text coloured by status; lines carrying a status mark keep their own colour."""
    lines = [
        Text(line, style=f"bold {STATUS_COLORS[_line_status(line, status)]}")
        for line in (message or "").split("\n")
    ]
    return Text("\n").join(lines)

class ConsoleSink:
    """Default output sink: prints messages to a rich console, never as markup."""
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)
    def __call__(self, message: Optional[str] = None, status: Optional[bool] = None) -> None:
        self.console.print(styled(message, status))

class ConsoleReporter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)
    def emit(self, result: SuiteResult) -> None:
        self.console.print(Text(f"Suite: {result.suite}"))
        for c in result.cases:
            status = "PASS" if c.failed == 0 else ("ERROR" if c.errors else "FAIL")
            self.console.print(styled(f" - {c.id}: {status} ({c.duration:.3f}s)", c.failed == 0))
