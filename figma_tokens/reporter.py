"""User-facing error reporting for the token importer.

Reported errors are printed with an actionable hint and recorded, but never
terminate the process; aborting is left to the caller raising a
``TokenImportError``. Honours the NO_COLOR convention: https://no-color.org/
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

import click

from .tokens_logging import get_logger

logger = get_logger("reporter")


def should_use_color(
    explicit_flag: bool | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Determine if color output should be used.

    Priority order:
    1. Explicit flag (if passed)
    2. NO_COLOR / FORCE_COLOR environment variables
    3. TTY detection (only colorize if output is a terminal)
    """
    if explicit_flag is not None:
        return explicit_flag

    if "NO_COLOR" in os.environ:
        return False

    if "FORCE_COLOR" in os.environ:
        return True

    if stream is None:
        stream = sys.stderr
    if hasattr(stream, "isatty") and not stream.isatty():
        return False

    return True


@dataclass
class ReportedError:
    """A single error reported during an import."""

    message: str
    hint: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"message": self.message, "hint": self.hint}


@dataclass
class ErrorReporter:
    """Prints and collects user-facing import errors.

    Example:
        >>> reporter = ErrorReporter(use_color=False)
        >>> reporter.report("Body font not found", '- Please add "font-body".')
        [FAIL] Body font not found
               - Please add "font-body".
    """

    use_color: bool | None = None
    stream: TextIO | None = None
    errors: list[ReportedError] = field(default_factory=list)

    RED = "\033[91m"
    DIM = "\033[2m"
    RESET = "\033[0m"

    def _colorize(self, text: str, color: str) -> str:
        if not should_use_color(self.use_color, self.stream):
            return text
        return f"{color}{text}{self.RESET}"

    def report(self, message: str, hint: str | None = None) -> None:
        """Report an error with an optional remediation hint.

        Args:
            message: What went wrong.
            hint: How the user can fix it.
        """
        self.errors.append(ReportedError(message=message, hint=hint))
        logger.error(message if hint is None else f"{message} {hint}")

        colored = should_use_color(self.use_color, self.stream)
        symbol = self._colorize("✗", self.RED) if colored else "[FAIL]"
        stream = self.stream or sys.stderr
        click.echo(f"{symbol} {message}", file=stream, color=colored)
        if hint:
            indent = " " * (2 if colored else 7)
            click.echo(f"{indent}{self._colorize(hint, self.DIM)}", file=stream, color=colored)

    @property
    def has_errors(self) -> bool:
        """Check if any error was reported."""
        return len(self.errors) > 0

    def clear(self) -> None:
        """Forget all reported errors."""
        self.errors.clear()
