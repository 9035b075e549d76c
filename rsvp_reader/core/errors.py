"""Typed errors for text acquisition failures.

WHY: The engine, the CLI, and the GUI all need to tell "there was nothing
to read" apart from genuine bugs, and show the user a prompt instead of a
traceback.

HOW: A small hierarchy under ReaderError. Both kinds are recoverable: the
user makes a selection (or opens another page) and starts again.

RULES:
- NoUsableTextError: no selection and no qualifying content, or text too short
- EmptyTokenizationError: acquired text split into zero words
"""

from __future__ import annotations


class ReaderError(Exception):
    """Base class for recoverable reader errors."""


class NoUsableTextError(ReaderError):
    """Raised when neither a selection nor detected content yields usable text."""


class EmptyTokenizationError(ReaderError):
    """Raised when acquired text contains no words."""
