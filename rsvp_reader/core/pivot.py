"""Pivot renderer — splits a word around its focal character.

WHY: The reader keeps one character of each word (the pivot) fixed under a
red focal marker so the eye never has to move. That only works if the
parts on either side of the pivot are padded so the pivot lands in the
same column for every word, whatever its length.

HOW: pivot_index() picks the middle character (left of centre for even
lengths). render_pivot() slices the word into former / pivot / latter and
pads the visually shorter side with non-breaking spaces, assuming a
fixed-width font.

RULES:
- n=0 → no pivot; n=1 → 0; odd n → n // 2; even n → n // 2 - 1
- widthDiff = (len(former) + 0.4) - (len(latter) + 0.6)
- padding = round(|widthDiff|), capped at MAX_PIVOT_PADDING
- widthDiff > 0 pads the end of latter; widthDiff < 0 pads the start of former
- An empty word renders as a lone non-breaking space pivot
"""

from __future__ import annotations

from dataclasses import dataclass

from rsvp_reader.config import MAX_PIVOT_PADDING, NBSP, PIVOT_CENTER_OFFSET


@dataclass(frozen=True)
class PivotParts:
    """The three display fragments for one word.

    ``former`` and ``latter`` already include their alignment padding.
    """

    former: str
    pivot: str
    latter: str

    @property
    def text(self) -> str:
        """The fragments joined back together, padding included."""
        return self.former + self.pivot + self.latter


def pivot_index(word: str) -> int:
    """Index of the focal character of ``word`` (0 for empty words)."""
    n = len(word)
    if n <= 1:
        return 0
    if n % 2:
        return n // 2
    return n // 2 - 1


def render_pivot(word: str) -> PivotParts:
    """Split ``word`` into padded (former, pivot, latter) fragments."""
    word = (word or "").strip()
    if not word:
        return PivotParts(former="", pivot=NBSP, latter="")

    index = pivot_index(word)
    former = word[:index]
    pivot = word[index]
    latter = word[index + 1:]

    width_diff = (len(former) + PIVOT_CENTER_OFFSET) - (len(latter) + (1.0 - PIVOT_CENTER_OFFSET))
    padding = min(MAX_PIVOT_PADDING, int(round(abs(width_diff))))

    if width_diff > 0:
        latter = latter + NBSP * padding
    elif width_diff < 0:
        former = NBSP * padding + former

    return PivotParts(former=former, pivot=pivot, latter=latter)
