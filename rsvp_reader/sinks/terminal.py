"""Text-mode display sinks for the command line.

WHY: Playing a page from the terminal is the quickest way to try the
reader and to check what the content locator picked.

HOW: TerminalSink redraws a single line in place with a carriage return,
highlighting the pivot in red (ANSI) under a fixed focal marker.
PlainSink prints one line per word, which is what you want when output is
piped or captured.

RULES:
- Output goes to the given stream (stdout by default)
- Colour is only used when the stream is a TTY
- The focal marker column is fixed, so padded words line up under it
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from rsvp_reader.config import MAX_PIVOT_PADDING, NBSP
from rsvp_reader.core.pivot import PivotParts
from rsvp_reader.sinks.base import DisplaySink, Progress

_RED = "\033[31m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_CLEAR_LINE = "\033[2K"

# Left margin so the longest padded former fragment still fits.
_MARGIN = MAX_PIVOT_PADDING + 2


class TerminalSink(DisplaySink):
    """Redraws the current word on one terminal line.

    The last word is kept so a progress update can redraw the line with
    the new status; the engine pushes progress after each word.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stdout
        self._color = bool(getattr(self._stream, "isatty", lambda: False)())
        self._progress = Progress(fraction=0.0)
        self._parts: Optional[PivotParts] = None

    def show_word(self, parts: PivotParts) -> None:
        if self._parts is None:
            self._stream.write(" " * (_MARGIN + 1) + "v\n")
        self._parts = parts
        self._redraw()

    def show_progress(self, progress: Progress) -> None:
        self._progress = progress
        if self._parts is not None:
            self._redraw()

    def close(self) -> None:
        """Finish the in-place line."""
        if self._parts is not None:
            self._stream.write("\n")
            self._stream.flush()

    def _redraw(self) -> None:
        parts = self._parts
        former = parts.former.rjust(_MARGIN + 1)
        if self._color:
            pivot = _BOLD + _RED + parts.pivot + _RESET
            prefix = "\r" + _CLEAR_LINE
        else:
            pivot = parts.pivot
            prefix = "\r"
        status = "  [{:3d}% {}]".format(int(self._progress.fraction * 100), self._progress.remaining_label())
        self._stream.write(prefix + former + pivot + parts.latter.ljust(_MARGIN) + status)
        self._stream.flush()


class PlainSink(DisplaySink):
    """Prints one word per line, no control characters."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stdout

    def show_word(self, parts: PivotParts) -> None:
        self._stream.write(parts.text.strip(NBSP) + "\n")
        self._stream.flush()

    def close(self) -> None:
        self._stream.flush()
