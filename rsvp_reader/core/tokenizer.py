"""Whitespace tokenizer and per-word delay heuristic.

WHY: The reader shows one word per tick. Words keep their punctuation so
"jumps." is displayed as written, and the punctuation then lengthens the
pause before the next word.

HOW: tokenize() splits on any whitespace run. delay_multiplier() looks at
a single word's length and trailing character.

RULES:
- No separate punctuation tokens; no empty tokens
- Empty or all-whitespace input returns an empty list
- Multiplier: 1.0 base, +0.3 if longer than 8 chars, +0.5 if ending in . , ; ! ?
"""

from __future__ import annotations

from typing import List

LONG_WORD_LENGTH = 8
LONG_WORD_BONUS = 0.3
PUNCTUATION_BONUS = 0.5
PAUSE_PUNCTUATION = ".,;!?"


def tokenize(text: str) -> List[str]:
    """Split text into words on whitespace runs."""
    return text.split()


def delay_multiplier(word: str) -> float:
    """Return how much longer than the base interval to wait after ``word``."""
    multiplier = 1.0
    if len(word) > LONG_WORD_LENGTH:
        multiplier += LONG_WORD_BONUS
    if word and word[-1] in PAUSE_PUNCTUATION:
        multiplier += PUNCTUATION_BONUS
    return multiplier
