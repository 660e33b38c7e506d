"""Error types and CLI exit codes.

``RenderError`` is the single failure category surfaced by the renderer.
The CLI errors carry an exit code and an optional hint.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class RenderError(RuntimeError):
    """Raised when a PDF could not be produced.

    Messages are generic; the underlying exception (if any) is chained as
    ``__cause__`` and never carries resume content into the message.
    """


RENDER_HINT = "re-run with --verbose to see which step of the PDF render failed"


class ExitCode(IntEnum):
    """Exit codes returned by `resume-pdf`."""
    SUCCESS = 0
    ERROR = 1
    USAGE = 2
    CONFIG_ERROR = 3
    NOT_FOUND = 6
    INTERRUPTED = 130  # Standard for Ctrl+C


@dataclass
class CLIError(Exception):
    """Error reported to the user with an exit code and an optional hint."""
    message: str
    code: ExitCode = ExitCode.ERROR
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


class ConfigError(CLIError):
    """Record or theme file could not be parsed, or the theme has bad values."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.CONFIG_ERROR, hint)


class NotFoundError(CLIError):
    """Record or theme file does not exist."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.NOT_FOUND, hint)


class UsageError(CLIError):
    """Record file has the wrong shape for a resume."""
    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message, ExitCode.USAGE, hint)


def handle_error(error: BaseException) -> int:
    """Print an error to stderr and return the exit code to use."""
    if isinstance(error, CLIError):
        print(f"Error: {error.message}", file=sys.stderr)
        if error.hint:
            print(f"Hint: {error.hint}", file=sys.stderr)
        return error.code

    if isinstance(error, KeyboardInterrupt):
        print("\nInterrupted.", file=sys.stderr)
        return ExitCode.INTERRUPTED

    if isinstance(error, RenderError):
        print(f"Error: {error}", file=sys.stderr)
        print(f"Hint: {RENDER_HINT}", file=sys.stderr)
        return ExitCode.ERROR

    print(f"Error: unexpected {type(error).__name__} while rendering", file=sys.stderr)
    return ExitCode.ERROR
