"""Located error and warning reports written to standard error."""

import inspect
import sys

from .crayon import Crayon


class FatalError(Exception):
    """An unrecoverable condition reported at a file and line."""

    def __init__(self, filename: str, line: int, message: str) -> None:
        super().__init__(message)
        self.filename = filename
        self.line = line
        self.message = message


def format_location(filename: str, line: int) -> str:
    """Return the highlighted '(Line N in FILE): ' prefix."""
    mark = f"{Crayon.BOLD.value}{Crayon.YELLOW.value}"
    reset = Crayon.NOCRAYON.value
    return f"(Line {mark}{line}{reset} in {mark}{filename}{reset}): "


def _render(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


def warningf(filename: str, line: int, fmt: str, *args) -> str:
    """Write a located message to standard error and return the message."""
    message = _render(fmt, args)
    sys.stderr.write(f"{format_location(filename, line)}{message}\n")
    return message


def errorf(filename: str, line: int, fmt: str, *args) -> None:
    """Write a located message to standard error and raise FatalError."""
    message = warningf(filename, line, fmt, *args)
    raise FatalError(filename, line, message)


def check(condition, fmt: str, *args) -> None:
    """Raise FatalError, located at the caller, unless condition holds."""
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is None:
        filename, line = "<unknown>", 0
    else:
        info = inspect.getframeinfo(caller)
        filename, line = info.filename, info.lineno
    del frame, caller
    errorf(filename, line, fmt, *args)