"""ANSI terminal colours and a console loading bar.

Colour lookups honour ``config.COLORLESS`` at call time, so output can be
made plain (e.g. on terminals without ANSI support) after import.
"""

from __future__ import annotations
import sys
from typing import Optional, TextIO

import alexandria.config as cfg  # For dynamic access to COLORLESS

# Raw escape sequences
T_RESET = "\033[0m"

FOREGROUND = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
}

BACKGROUND = {
    "black": "\033[40m",
    "red": "\033[41m",
    "green": "\033[42m",
    "yellow": "\033[43m",
    "blue": "\033[44m",
    "magenta": "\033[45m",
    "cyan": "\033[46m",
    "white": "\033[47m",
}


def fg(name: str) -> str:
    """Foreground escape for a colour name, or "" when colorless."""
    if cfg.COLORLESS:
        return ""
    try:
        return FOREGROUND[name]
    except KeyError:
        raise ValueError(f"unknown terminal colour: {name!r}") from None


def bg(name: str) -> str:
    """Background escape for a colour name, or "" when colorless."""
    if cfg.COLORLESS:
        return ""
    try:
        return BACKGROUND[name]
    except KeyError:
        raise ValueError(f"unknown terminal colour: {name!r}") from None


def reset() -> str:
    return "" if cfg.COLORLESS else T_RESET


def colorize(text: str, color: str, background: Optional[str] = None) -> str:
    """Wrap text in colour escapes followed by a reset."""
    prefix = fg(color) + (bg(background) if background else "")
    if not prefix:
        return text
    return f"{prefix}{text}{reset()}"


def format_loading_bar(percent: float, title: str = "", bar_width: int = 0,
                       count_finished: int = -1, count_total: int = -1) -> str:
    """Render a single-line loading bar, e.g. ``\\rjob: [===>  ]    50% (1/2)``.

    Args:
        percent: Completion in [0, 1].
        title: Optional prefix.
        bar_width: Total bar width including brackets; no bar if <= 2.
        count_finished: Finished task count, shown with count_total.
        count_total: Total task count; both counts must be given to show.
    """
    parts = ["\r"]
    if title:
        parts.append(f"{title}: ")

    if bar_width > 2:
        inner = bar_width - 2
        cutoff = int(inner * percent)
        bar = []
        for i in range(inner):
            if i < cutoff:
                bar.append("=")
            elif i == cutoff:
                bar.append(">")
            else:
                bar.append(" ")
        parts.append("[" + "".join(bar) + "] ")

    parts.append(f"{percent * 100.0:5.4g}%")

    if count_finished != -1 and count_total != -1:
        parts.append(f" ({count_finished}/{count_total})")
    return "".join(parts)


def stream_loading_bar(out: Optional[TextIO], percent: float, title: str = "",
                       bar_width: int = 0, count_finished: int = -1,
                       count_total: int = -1) -> None:
    """Write a loading bar to out (stdout if None) without a newline.

    Meant to be called per chunk of work rather than per operation.
    """
    out = out or sys.stdout
    out.write(format_loading_bar(percent, title, bar_width, count_finished, count_total))
    out.flush()
