"""Small timestamped console logger with coloured error and debug lines."""

from __future__ import annotations

import time

RED = "\x1b[31m"
GRN = "\x1b[32m"
YEL = "\x1b[33m"
BLU = "\x1b[34m"
MAG = "\x1b[35m"
CYN = "\x1b[36m"
WHT = "\x1b[37m"
RESET = "\x1b[0m"


def format_line(tag: str, message: str, *args: object) -> str:
    """Return ``"<date> [<tag>] <message>"`` with printf-style arguments applied."""
    text = message % args if args else message
    return f"{time.ctime()} [{tag}] {text}"


def log_error(message: str, *args: object) -> None:
    """Print an error line in red."""
    print(f"{RED}{format_line('Error', message, *args)}\n{RESET}", end="")


def log_info(message: str, *args: object) -> None:
    """Print an informational line."""
    print(format_line("Info", message, *args))


def log_debug(message: str, *args: object) -> None:
    """Print a debug line in cyan."""
    print(f"{CYN}{format_line('Debug', message, *args)}\n{RESET}", end="")