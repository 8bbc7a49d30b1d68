"""ANSI terminal styling codes and a helper to wrap text in them."""

from enum import Enum


class Crayon(str, Enum):
    """ANSI escape sequences for text style, foreground and background colour."""

    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    ITALIC = "\x1b[3m"
    UNDERLINE = "\x1b[4m"
    BLINK = "\x1b[5m"
    REVERSED = "\x1b[7m"
    STRIKETHRU = "\x1b[9m"

    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    GRAY = "\x1b[90m"

    FOREGROUND_BLACK = "\x1b[30m"
    FOREGROUND_RED = "\x1b[31m"
    FOREGROUND_GREEN = "\x1b[32m"
    FOREGROUND_YELLOW = "\x1b[33m"
    FOREGROUND_BLUE = "\x1b[34m"
    FOREGROUND_MAGENTA = "\x1b[35m"
    FOREGROUND_CYAN = "\x1b[36m"
    FOREGROUND_WHITE = "\x1b[37m"
    FOREGROUND_GRAY = "\x1b[90m"

    BACKGROUND_BLACK = "\x1b[40m"
    BACKGROUND_RED = "\x1b[41m"
    BACKGROUND_GREEN = "\x1b[42m"
    BACKGROUND_YELLOW = "\x1b[43m"
    BACKGROUND_BLUE = "\x1b[44m"
    BACKGROUND_WHITE = "\x1b[47m"
    BACKGROUND_GRAY = "\x1b[100m"

    NOCRAYON = "\x1b[0m"

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


def paint(text: str, *args) -> str:
    """Wrap text in the given crayons and reset afterwards.

    With no crayons the text is surrounded by resets on both sides.
    """
    styles = args or (Crayon.NOCRAYON,)
    prefix = "".join(str(style) for style in styles)
    return f"{prefix}{text}{Crayon.NOCRAYON.value}"