"""Loading of KEY=VALUE environment files into a string map."""

import sys
from typing import Iterable, Optional, TextIO

from .crayon import Crayon
from .kvmap import KVMap

DEFAULT_FILENAME = ".env"

_current: Optional["Environment"] = None


class EnvError(Exception):
    """An environment file could not be parsed."""

    def __init__(
        self,
        message: str,
        filename: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.line_number = line_number


class EnvFileError(EnvError):
    """An environment file could not be opened."""


def _warn(message: str) -> str:
    text = f"CENV Warning: {Crayon.YELLOW.value}{message}\n{Crayon.NOCRAYON.value}"
    sys.stderr.write(text)
    return message


def _bad_format(line_number: int) -> EnvError:
    return EnvError("bad format", line_number=line_number)


def parse_env(lines: Iterable[str]) -> KVMap:
    """Parse KEY=VALUE lines into a KVMap; later keys replace earlier ones.

    Trailing newlines and surrounding spaces are removed from each line and
    blank lines are skipped. A line without '=', with nothing before '=', or
    whose raw text ends right at '=' raises EnvError.
    """
    config = KVMap()
    for line_number, raw in enumerate(lines, start=1):
        text = raw.rstrip("\n").strip(" ")
        if not text:
            continue
        eq = text.find("=")
        if eq < 0:
            raise _bad_format(line_number)
        key = text[:eq]
        if not key or eq + 1 >= len(raw):
            raise _bad_format(line_number)
        config.force_insert(key, text[eq + 1:])
    return config


class Environment:
    """The settings read from one environment file."""

    def __init__(self, filename: str, config: KVMap) -> None:
        self.filename = filename
        self.config = config

    @classmethod
    def load(cls, filename: Optional[str] = None) -> "Environment":
        """Read and parse filename, falling back to .env with a warning."""
        if filename is None:
            filename = DEFAULT_FILENAME
            _warn(
                "No environment explicitly provided, using"
                f"{Crayon.BOLD.value} .env {Crayon.NOCRAYON.value}"
                f"{Crayon.YELLOW.value}by default."
            )
        try:
            with open(filename, encoding="utf-8") as handle:
                try:
                    config = parse_env(handle)
                except EnvError as exc:
                    exc.filename = filename
                    raise
        except OSError as exc:
            raise EnvFileError(
                f"could not open {filename}", filename=filename
            ) from exc
        return cls(filename, config)

    def get(self, key: Optional[str]) -> Optional[str]:
        """The value of key, or None for a missing or empty key."""
        if not key:
            return None
        return self.config.get(key) if key in self.config else None

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Write the file name and every KEY=VALUE pair to stream."""
        out = sys.stdout if stream is None else stream
        if self.filename:
            out.write(f"Environment file name: {self.filename}\n")
        for key, value in self.config.items():
            out.write(f"{key}={value}\n")

    def __repr__(self) -> str:
        return f"Environment({self.filename!r}, {self.config!r})"


def init(filename: Optional[str] = None) -> Environment:
    """Load filename as the current environment and return it.

    If the file cannot be opened the current environment is kept; if it is
    malformed the current environment is discarded.
    """
    global _current
    try:
        env = Environment.load(filename)
    except EnvFileError:
        raise
    except EnvError:
        _current = None
        raise
    _current = env
    return env


def get(key: Optional[str]) -> Optional[str]:
    """The value of key in the current environment, or None."""
    if _current is None:
        return None
    return _current.get(key)


def exists() -> bool:
    """True when an environment is currently loaded."""
    return _current is not None


def end() -> None:
    """Release the settings of the current environment and discard it."""
    global _current
    if _current is not None:
        _current.config.clear()
    _current = None


def display() -> None:
    """Print the current environment to standard output, if any."""
    if _current is not None:
        _current.display()


def diagnostics(error: Optional[BaseException]) -> Optional[str]:
    """Write a warning describing error to standard error and return it."""
    if error is None:
        return None
    if isinstance(error, EnvFileError):
        return _warn(f"Could not find environment file {error.filename}")
    if isinstance(error, EnvError):
        return _warn(f"File {error.filename} has bad format.")
    return _warn(f"Unknown error: {error}")