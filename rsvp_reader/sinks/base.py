"""Abstract display sink and the progress record pushed to it.

WHY: The engine must be able to drive any display without knowing how it
draws. This base class fixes the two things a display receives: the
current word split around its pivot, and a progress estimate.

HOW: DisplaySink is an ABC with a required show_word() and an optional
show_progress(). Progress is a frozen dataclass; seconds_remaining is None
when no estimate is meaningful and renders as "-".

RULES:
- show_word() receives PivotParts with alignment padding already applied
- show_progress() and close() default to no-ops
- progress fraction is within 0..1
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from rsvp_reader.core.pivot import PivotParts


@dataclass(frozen=True)
class Progress:
    """How far through the word sequence playback is."""

    fraction: float
    seconds_remaining: Optional[float] = None

    def remaining_label(self) -> str:
        """Seconds remaining as display text, ``"-"`` when unknown."""
        if self.seconds_remaining is None:
            return "-"
        return "{}s".format(int(round(self.seconds_remaining)))


class DisplaySink(ABC):
    """Receives rendered words and progress from the pacing engine.

    To add a new display:
    1. Subclass DisplaySink
    2. Implement show_word(), optionally show_progress()
    3. Register text-mode sinks in SINKS in sinks/__init__.py
    """

    @abstractmethod
    def show_word(self, parts: PivotParts) -> None:
        """Display one word split around its pivot character."""

    def show_progress(self, progress: Progress) -> None:
        """Display the latest progress estimate."""

    def close(self) -> None:
        """Release any display resources; called when playback is torn down."""
