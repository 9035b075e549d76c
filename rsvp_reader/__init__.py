"""RSVP Reader — word-at-a-time speed reading over arbitrary documents.

WHY: Reading long web pages word by word at a fixed focal point removes
most eye movement, but only if the reader is fed the article itself and
not the navigation, comments, and footers that surround it.

HOW: Three-stage pipeline: locate (score candidate containers in the
document tree and pick the article), clean and tokenize (strip chrome,
split on whitespace), and play (a pacing engine that renders one word at a
time through a pivot renderer onto a pluggable display sink).

RULES:
- Core modules depend only on the DocumentNode abstraction, never on bs4
- The pacing engine owns at most one pending timer at any instant
- Display sinks are dumb: they render what the engine pushes to them
"""

__version__ = "0.1.0"
