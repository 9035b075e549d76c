"""Main-content locator — picks the article node out of a whole document.

WHY: When the user has not selected anything, the reader still needs
something sensible to read. Most pages mark their article with semantic
tags or well-known container ids/classes, but also reuse those names for
sidebars and teasers, so every candidate is scored and only a clear,
long-enough winner is accepted.

HOW: collect_candidates() gathers <main>/<article> nodes, then nodes
matching COMMON_CONTENT_SELECTORS (skipping any already covered by an
earlier candidate), filtered through is_potential_content().
score_candidates() scores each one with the content scorer.
locate_main_content() keeps the first-seen maximum and checks it against
the MIN_TEXT_LENGTH / MIN_WORD_COUNT gates.

RULES:
- Discovery order: semantic tags (document order), then the selector list
- Ties keep the first-seen maximum
- A candidate that raises while scoring gets score 0; locate never raises
- The winner must score > 0, have >= MIN_TEXT_LENGTH cleaned characters,
  and >= MIN_WORD_COUNT words; otherwise the result is None
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from rsvp_reader.config import MIN_TEXT_LENGTH, MIN_WORD_COUNT
from rsvp_reader.core.cleaner import clean_text
from rsvp_reader.core.document import DocumentNode
from rsvp_reader.core.scorer import score_node

logger = logging.getLogger(__name__)

SEMANTIC_CONTENT_SELECTOR = "main, article"

COMMON_CONTENT_SELECTORS = [
    "#content", "#main-content", "#main", "#entry", "#article",
    ".content", ".main-content", ".main", ".entry", ".entry-content",
    ".post", ".post-content", ".post-body", ".article", ".article-content", ".article-body",
    ".story", ".story-content",
]

NON_CONTENT_TAG_SELECTOR = (
    "script, style, noscript, iframe, header, footer, nav, aside, "
    "form, button, select, textarea"
)

NON_CONTENT_ROLE_RE = re.compile(
    r"^(navigation|search|banner|complementary|contentinfo|form|menu|menubar"
    r"|tablist|dialog|alert|log|status|timer)",
    re.IGNORECASE,
)

CHROME_DESCENDANT_SELECTOR = "header *, footer *, nav *, aside *"

RECOGNIZED_CONTENT_SELECTOR = "main, article, #content, #main, .content, .entry-content, .post-body"


@dataclass
class Candidate:
    """A node considered for main content, with its score."""

    node: DocumentNode
    score: float


def is_potential_content(node: DocumentNode) -> bool:
    """True unless ``node`` is chrome, hidden, or sits inside chrome.

    A recognized content container (e.g. an <article> inside a <header>)
    is still allowed through.
    """
    if node.matches(NON_CONTENT_TAG_SELECTOR):
        return False
    if node.get_attribute("aria-hidden") == "true":
        return False

    role = node.get_attribute("role")
    if role and NON_CONTENT_ROLE_RE.match(role):
        return False

    if node.matches(CHROME_DESCENDANT_SELECTOR):
        if not node.matches(RECOGNIZED_CONTENT_SELECTOR):
            return False

    return True


def collect_candidates(root: DocumentNode) -> List[DocumentNode]:
    """Gather candidate nodes in discovery order."""
    candidates: List[DocumentNode] = []

    for node in root.select(SEMANTIC_CONTENT_SELECTOR):
        if is_potential_content(node):
            candidates.append(node)

    for node in root.select(", ".join(COMMON_CONTENT_SELECTORS)):
        if not is_potential_content(node):
            continue
        if any(existing.contains(node) for existing in candidates):
            continue
        candidates.append(node)

    logger.info("Found %d initial content candidates", len(candidates))
    return candidates


def _safe_score(node: DocumentNode) -> float:
    try:
        return score_node(node)
    except Exception:
        logger.exception("Scoring failed for %s; treating as score 0", node.describe())
        return 0.0


def score_candidates(root: DocumentNode) -> List[Candidate]:
    """Score every candidate, preserving discovery order."""
    scored: List[Candidate] = []
    for node in collect_candidates(root):
        score = _safe_score(node)
        logger.debug("Scored %s: %.2f", node.describe(), score)
        scored.append(Candidate(node=node, score=score))
    return scored


def locate_main_content(root: DocumentNode) -> Optional[DocumentNode]:
    """Return the node most likely to hold the article, or None."""
    best: Optional[Candidate] = None
    for candidate in score_candidates(root):
        if best is None or candidate.score > best.score:
            best = candidate

    if best is None or best.score <= 0:
        logger.info("Could not determine main content element reliably")
        return None

    try:
        text = clean_text(best.node)
    except Exception:
        logger.exception("Text extraction failed for %s", best.node.describe())
        return None

    word_count = len(text.split())
    if len(text) < MIN_TEXT_LENGTH or word_count < MIN_WORD_COUNT:
        logger.info(
            "Best candidate %s rejected (score: %.2f, length: %d, words: %d)",
            best.node.describe(), best.score, len(text), word_count,
        )
        return None

    logger.info("Selected %s with score %.2f", best.node.describe(), best.score)
    return best.node
