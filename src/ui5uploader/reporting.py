"""Colored console output for the user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from ui5uploader.pipeline.validation import ValidationResult


class Reporter:
    """
    Print categorized messages to a rich console.

    Errors are red, warnings yellow, information blue. The reporter never
    ends the process; callers decide the exit code.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def error(self, message: str, detail: object | None = None):
        self._print("red", message, detail)

    def warning(self, message: str, detail: object | None = None):
        self._print("yellow", message, detail)

    def info(self, message: str, detail: object | None = None):
        self._print("blue", message, detail)

    def success(self, message: str, detail: object | None = None):
        self._print("green", message, detail)

    def report(self, validation: ValidationResult):
        """Print warnings, then errors, then information if nothing failed."""
        for msg in validation.warnings:
            self.warning(msg)
        for msg in validation.errors:
            self.error(msg)
        if validation.fatal:
            return
        for msg in validation.information:
            self.info(msg)

    def _print(self, color: str, message: str, detail: object | None):
        text = f"[{color}]{escape(message)}[/{color}]"
        if detail is not None:
            text += f" {escape(str(detail))}"
        self.console.print(text)
