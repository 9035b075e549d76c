"""Display sinks — where rendered words and progress are pushed.

WHY: The pacing engine produces a word triple and a progress estimate per
tick; the terminal, the Tk window, and tests each present them
differently. A central dict makes the text-mode sinks easy to look up.

HOW: SINKS maps string keys to sink *classes*. The Tk window implements
its own sink in gui.py because it needs a live widget tree.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- Values are DisplaySink subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rsvp_reader.sinks.terminal import PlainSink, TerminalSink

if TYPE_CHECKING:
    from rsvp_reader.sinks.base import DisplaySink

SINKS: dict[str, type[DisplaySink]] = {
    "terminal": TerminalSink,
    "plain": PlainSink,
}
