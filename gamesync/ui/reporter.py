"""
Progress and warning reporting.

Core functions never print. They send events to a Reporter, which the
caller picks: ConsoleReporter for the terminal, RecordingReporter in tests,
or the silent base Reporter.
"""

from typing import List, Tuple, Union

from .colors import Colors, colorize


class Reporter:
    """Receives structured progress events. The base class discards them."""

    def __init__(self):
        self.warnings: List[Union[Warning, str]] = []

    def step(self, message: str):
        """A unit of work is starting."""

    def info(self, message: str):
        """Neutral detail."""

    def success(self, message: str):
        """A unit of work finished."""

    def warning(self, warning: Union[Warning, str]):
        """Non-fatal problem. Kept so the caller can inspect it afterwards."""
        self.warnings.append(warning)

    def error(self, message: str):
        """Fatal problem, reported right before the step gives up."""


class ConsoleReporter(Reporter):
    """Prints events with ANSI colors."""

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def _print(self, message: str, color: str):
        print(colorize(message, color) if self.use_color else message)

    def step(self, message: str):
        self._print(message, Colors.YELLOW)

    def info(self, message: str):
        self._print(message, Colors.BLUE)

    def success(self, message: str):
        self._print(message, Colors.GREEN)

    def warning(self, warning: Union[Warning, str]):
        super().warning(warning)
        self._print(f"Warning: {warning}", Colors.RED)

    def error(self, message: str):
        self._print(f"Error: {message}", Colors.RED)


class RecordingReporter(Reporter):
    """Keeps every event as a (kind, message) tuple."""

    def __init__(self):
        super().__init__()
        self.events: List[Tuple[str, str]] = []

    def step(self, message: str):
        self.events.append(("step", message))

    def info(self, message: str):
        self.events.append(("info", message))

    def success(self, message: str):
        self.events.append(("success", message))

    def warning(self, warning: Union[Warning, str]):
        super().warning(warning)
        self.events.append(("warning", str(warning)))

    def error(self, message: str):
        self.events.append(("error", message))

    def messages(self, kind: str) -> List[str]:
        return [msg for k, msg in self.events if k == kind]
