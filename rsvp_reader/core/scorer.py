"""Content scorer — how much a node looks like "the article".

WHY: Pages wrap their article in containers that also hold navigation,
link lists, galleries, and comment threads. A single numeric score lets
the locator compare candidates of very different shapes.

HOW: take_snapshot() reads everything the heuristics need from the node
once (cleaned text length, structural counts, tag, class string) into an
immutable ScoreSnapshot. score_snapshot() then runs SCORE_ADJUSTMENTS, an
ordered pipeline of pure functions, each taking the snapshot and the
running score and returning the new score.

RULES:
- Cleaned text shorter than MIN_TEXT_LENGTH scores exactly 0, nothing else runs
- Base: log10(L + 1) * (P + 1), then + 2 per heading
- Link density A / (L + 1): > 0.10 halves, > 0.30 then multiplies by 0.3
  (both fire for very link-heavy nodes, 0.15x in total)
- Image density I / (L / 100 + 1) > 5 → x0.6
- <main> → x2.0, else <article> → x1.5
- Denylisted class substring → x0.3
- More than 5 list items and over 80% of them holding a link → x0.2
- Result is clamped to >= 0
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, Tuple

from rsvp_reader.config import MIN_TEXT_LENGTH
from rsvp_reader.core.cleaner import clean_text
from rsvp_reader.core.document import DocumentNode

PRIMARY_CONTENT_TAGS = frozenset({"main"})
SECTIONING_CONTENT_TAGS = frozenset({"article"})

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"

CLASS_DENYLIST_RE = re.compile(
    r"comment|meta|share|related|sidebar|ad|nav|menu|footer|header"
    r"|masthead|widget|utility|social",
    re.IGNORECASE,
)

LINK_DENSITY_SOFT = 0.10
LINK_DENSITY_HARD = 0.30
IMAGE_DENSITY_LIMIT = 5
LINK_LIST_MIN_ITEMS = 5
LINK_LIST_RATIO = 0.8


@dataclass(frozen=True)
class ScoreSnapshot:
    """Everything the scoring rules read, captured once per node."""

    text_length: int
    paragraph_count: int = 0
    link_count: int = 0
    image_count: int = 0
    heading_count: int = 0
    list_item_count: int = 0
    linked_list_item_count: int = 0
    tag: str = ""
    class_name: str = ""

    @property
    def link_density(self) -> float:
        return self.link_count / (self.text_length + 1)

    @property
    def image_density(self) -> float:
        return self.image_count / (self.text_length / 100 + 1)


def take_snapshot(node: DocumentNode) -> ScoreSnapshot:
    """Capture cleaned text length and structural counts for ``node``."""
    text_length = len(clean_text(node))
    list_items = node.select("li")
    return ScoreSnapshot(
        text_length=text_length,
        paragraph_count=len(node.select("p")),
        link_count=len(node.select("a")),
        image_count=len(node.select("img")),
        heading_count=len(node.select(HEADING_SELECTOR)),
        list_item_count=len(list_items),
        linked_list_item_count=sum(1 for li in list_items if li.select("a")),
        tag=node.tag,
        class_name=node.class_name,
    )


# ---------------------------------------------------------------------------
# Scoring rules, applied in order
# ---------------------------------------------------------------------------

def _base_score(snap: ScoreSnapshot, score: float) -> float:
    return math.log10(snap.text_length + 1) * (snap.paragraph_count + 1)


def _heading_bonus(snap: ScoreSnapshot, score: float) -> float:
    return score + snap.heading_count * 2


def _link_density_penalty(snap: ScoreSnapshot, score: float) -> float:
    # Sequential, not tiered: a node over both limits gets both penalties.
    if snap.link_density > LINK_DENSITY_SOFT:
        score *= 0.5
    if snap.link_density > LINK_DENSITY_HARD:
        score *= 0.3
    return score


def _image_density_penalty(snap: ScoreSnapshot, score: float) -> float:
    if snap.image_density > IMAGE_DENSITY_LIMIT:
        score *= 0.6
    return score


def _semantic_tag_bonus(snap: ScoreSnapshot, score: float) -> float:
    if snap.tag in PRIMARY_CONTENT_TAGS:
        return score * 2.0
    if snap.tag in SECTIONING_CONTENT_TAGS:
        return score * 1.5
    return score


def _class_name_penalty(snap: ScoreSnapshot, score: float) -> float:
    if CLASS_DENYLIST_RE.search(snap.class_name):
        score *= 0.3
    return score


def _link_list_penalty(snap: ScoreSnapshot, score: float) -> float:
    if snap.list_item_count > LINK_LIST_MIN_ITEMS:
        if snap.linked_list_item_count / snap.list_item_count > LINK_LIST_RATIO:
            score *= 0.2
    return score


def _clamp(snap: ScoreSnapshot, score: float) -> float:
    return max(0.0, score)


ScoreRule = Callable[[ScoreSnapshot, float], float]

SCORE_ADJUSTMENTS: Tuple[Tuple[str, ScoreRule], ...] = (
    ("base", _base_score),
    ("headings", _heading_bonus),
    ("link_density", _link_density_penalty),
    ("image_density", _image_density_penalty),
    ("semantic_tag", _semantic_tag_bonus),
    ("class_name", _class_name_penalty),
    ("link_list", _link_list_penalty),
    ("clamp", _clamp),
)


def score_snapshot(snap: ScoreSnapshot) -> float:
    """Run the scoring pipeline over a snapshot."""
    if snap.text_length < MIN_TEXT_LENGTH:
        return 0.0
    score = 0.0
    for _name, rule in SCORE_ADJUSTMENTS:
        score = rule(snap, score)
    return score


def score_node(node: DocumentNode) -> float:
    """Score ``node`` as a main-content candidate (0 means disqualified)."""
    return score_snapshot(take_snapshot(node))
