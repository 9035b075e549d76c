"""Text cleaner — plain text of a subtree with page chrome removed.

WHY: Both the scorer and the reader need the text a human would read in a
container, not the script bodies, hidden widgets, menus, and form controls
it also holds. Counting those would inflate scores for chrome-heavy
containers and feed junk words into playback.

HOW: Clone the subtree, remove every descendant matching
NON_CONTENT_SELECTOR from the clone, take the remaining text, and collapse
whitespace runs to single spaces.

RULES:
- The live tree is never touched; removal happens on a detached clone
- Output has no leading/trailing whitespace and no run longer than one space
- Returns "" for a subtree without content-bearing text
"""

from __future__ import annotations

import re

from rsvp_reader.core.document import DocumentNode

NON_CONTENT_SELECTOR = ", ".join([
    "script", "style", "noscript", "iframe",
    "button", "select", "textarea",
    "nav", "aside", "footer", "header",
    '[aria-hidden="true"]',
])

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run with one space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_text(node: DocumentNode) -> str:
    """Return the normalized readable text of ``node``'s subtree."""
    clone = node.clone()
    for unwanted in clone.select(NON_CONTENT_SELECTOR):
        unwanted.remove()
    return collapse_whitespace(clone.text())
