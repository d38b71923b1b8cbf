"""
Module for printing colored text to a terminal.
"""

import sys
from enum import Enum
from typing import Any, TextIO


class Color(Enum):
    """
    Foreground colors understood by print_colored.

    Values are ANSI escape codes; Windows consoles use console attributes.
    """
    RED = "\033[31m"
    GREEN = "\033[32m"


# ANSI code restoring the default attributes
RESET: str = "\033[0m"

# Console text attributes from wincon.h
FOREGROUND_GREEN: int = 0x0002
FOREGROUND_RED: int = 0x0004
FOREGROUND_INTENSITY: int = 0x0008
STD_OUTPUT_HANDLE: int = -11


def _windows_attribute(color: Color) -> int:
    if color is Color.RED:
        return FOREGROUND_RED | FOREGROUND_INTENSITY
    return FOREGROUND_GREEN | FOREGROUND_INTENSITY


def _print_windows(color: Color, text: str, sink: TextIO) -> bool:
    """
    Write ``text`` with the console foreground attribute set.

    Returns
    -------
    bool
        False when the console attributes could not be read, in which case
        nothing was written
    """
    import ctypes
    from ctypes import wintypes

    class CONSOLE_SCREEN_BUFFER_INFO(ctypes.Structure):
        _fields_ = [
            ("dwSize", wintypes._COORD),
            ("dwCursorPosition", wintypes._COORD),
            ("wAttributes", wintypes.WORD),
            ("srWindow", wintypes.SMALL_RECT),
            ("dwMaximumWindowSize", wintypes._COORD),
        ]

    kernel32 = ctypes.windll.kernel32
    handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
    info = CONSOLE_SCREEN_BUFFER_INFO()
    if not kernel32.GetConsoleScreenBufferInfo(handle, ctypes.byref(info)):
        return False

    old_attribute: int = info.wAttributes
    sink.flush()
    kernel32.SetConsoleTextAttribute(handle, _windows_attribute(color))
    try:
        sink.write(text)
        sink.flush()
    finally:
        kernel32.SetConsoleTextAttribute(handle, old_attribute)
    return True


def print_colored(
    color: Color,
    fmt: str,
    *args: Any,
    file: TextIO | None = None,
) -> None:
    """
    Print formatted text in the given color without a trailing newline.

    On a Windows console the foreground attribute is set for the duration of
    the write and then restored. Elsewhere ANSI codes are used when the sink
    is a terminal; redirected or captured output is written unstyled.

    Parameters
    ----------
    color : Color
        Foreground color
    fmt : str
        printf-style format string
    *args : Any
        Values interpolated into ``fmt`` with ``%``
    file : TextIO | None, optional
        Output sink, by default the current ``sys.stdout``
    """
    sink: TextIO = file if file is not None else sys.stdout
    text: str = fmt % args if args else fmt
    is_tty: bool = hasattr(sink, "isatty") and sink.isatty()

    if is_tty and sys.platform == "win32" and sink is sys.__stdout__:
        if _print_windows(color, text, sink):
            return

    if is_tty:
        sink.flush()
        sink.write(f"{color.value}{text}{RESET}")
        sink.flush()
    else:
        sink.write(text)
