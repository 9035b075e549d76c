"""Configuration constants, reader defaults, and .env loading.

WHY: Centralizes the thresholds and defaults that drive content detection
and pacing so they are easy to find, update, and override. The numbers are
plain data kept out of the logic, so they can be tuned in one place.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values. parse_wpm() gives a clear error for bad speed input.

RULES:
- MIN_TEXT_LENGTH / MIN_WORD_COUNT gate auto-detected content
- A selection is only accepted when its trimmed length exceeds MIN_SELECTION_LENGTH
- Speeds below MIN_WPM are floored, never rejected
- DEFAULT_WPM and LOG_LEVEL can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Content detection thresholds
# ---------------------------------------------------------------------------

MIN_TEXT_LENGTH = 150
"""Minimum cleaned-text length (characters) for a content candidate."""

MIN_WORD_COUNT = 25
"""Minimum whitespace-split word count for the selected candidate."""

MIN_SELECTION_LENGTH = 10
"""A selection (or acquired text) must be longer than this to be used."""

# ---------------------------------------------------------------------------
# Pacing
# ---------------------------------------------------------------------------

MIN_WPM = 50
WPM_CHOICES: list[int] = list(range(200, 1001, 50))

# ---------------------------------------------------------------------------
# Pivot rendering
# ---------------------------------------------------------------------------

NBSP = "\u00a0"
MAX_PIVOT_PADDING = 15
PIVOT_CENTER_OFFSET = 0.4
"""Share of the pivot glyph's width counted on its left side."""

# ---------------------------------------------------------------------------
# Display messages
# ---------------------------------------------------------------------------

READY_MESSAGE = "RSVP Ready"
FINISHED_MESSAGE = "Finished!"
NO_TEXT_MESSAGE = "Select text or find content?"
NO_WORDS_MESSAGE = "No words found?"

LOG_LEVEL = os.getenv("RSVP_LOG_LEVEL", "WARNING").upper()


def parse_wpm(value: object) -> int:
    """Parse a words-per-minute value and floor it to MIN_WPM.

    WHY: Speed arrives as text from a combobox, a CLI flag, or an env var.
    Anything below MIN_WPM would make the tick interval run away, so it is
    floored rather than rejected.

    HOW: int() on the stripped string form, then max() against MIN_WPM.

    RULES:
    - Raises ValueError for values that are not integers
    - Never returns less than MIN_WPM
    """
    text = str(value).strip()
    # "350 wpm" is how the choices are labelled in the GUI
    if text.lower().endswith("wpm"):
        text = text[:-3].strip()
    try:
        wpm = int(text)
    except ValueError:
        raise ValueError(
            "Invalid reading speed {!r}: expected a whole number of words per minute.".format(value)
        ) from None
    return max(MIN_WPM, wpm)


DEFAULT_WPM = parse_wpm(os.getenv("RSVP_DEFAULT_WPM", "350"))
"""Starting speed; RSVP_DEFAULT_WPM accepts the same forms as the speed box."""
