"""Console colours and cursor control through ANSI escape sequences."""

import sys
from enum import IntEnum
from typing import Optional, TextIO


class Color(IntEnum):
    """Console text attributes: foreground in the low nibble, background above it."""

    BLACK = 0
    NAVY = 1
    GREEN = 2
    TEAL = 3
    MAROON = 4
    PURPLE = 5
    OLIVE = 6
    SILVER = 7
    GRAY = 8
    BLUE = 9
    LIME = 10
    AQUA = 11
    RED = 12
    FUCHSIA = 13
    YELLOW = 14
    WHITE = 15


# Console colour bits are blue=1, green=2, red=4; ANSI uses red=1, green=2, blue=4.
_ANSI_ORDER = (0, 4, 2, 6, 1, 5, 3, 7)

CLEAR_SCREEN = "\x1b[2J\x1b[H"


def _ansi(nibble: int, base: int, bright: int) -> int:
    return (bright if nibble & 8 else base) + _ANSI_ORDER[nibble & 7]


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def color_code(code: int) -> str:
    """Return the ANSI sequence for a console attribute in the range 0-255."""
    code = int(code)
    if not 0 <= code <= 255:
        raise ValueError(f"colour attribute out of range: {code}")
    parts = ["0", str(_ansi(code & 0x0F, 30, 90))]
    background = code >> 4
    if background:
        parts.append(str(_ansi(background, 40, 100)))
    return "\x1b[" + ";".join(parts) + "m"


def color(code: int, stream: Optional[TextIO] = None) -> None:
    """Switch the text attribute of the stream."""
    _out(stream).write(color_code(code))


def gotoxy(x: int, y: int, stream: Optional[TextIO] = None) -> None:
    """Move the cursor to column x, row y (both counted from zero)."""
    if x < 0 or y < 0:
        raise ValueError("cursor coordinates must not be negative")
    _out(stream).write(f"\x1b[{y + 1};{x + 1}H")


def gotox(x: int, stream: Optional[TextIO] = None) -> None:
    """Move the cursor to column x of the current row."""
    if x < 0:
        raise ValueError("cursor coordinates must not be negative")
    _out(stream).write(f"\x1b[{x + 1}G")


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal and put the cursor at the top left."""
    _out(stream).write(CLEAR_SCREEN)