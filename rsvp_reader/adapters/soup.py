"""BeautifulSoup implementation of DocumentNode.

WHY: HTML pages saved to disk (or fetched by some other tool) are parsed
with BeautifulSoup + lxml, the same stack used elsewhere for stripping
site chrome. The content heuristics need that tree behind the
DocumentNode interface.

HOW: SoupNode wraps a bs4 Tag. Selector support comes from soupsieve via
Tag.select() and Tag.css.match(). clone() uses bs4's deep Tag copy, and
remove() uses extract() so removing a node whose ancestor was already
removed is harmless.

RULES:
- Only Tag elements are exposed; strings and comments are not nodes
- Multi-valued attributes (class, rel) are joined with single spaces
- Equality and hashing follow the wrapped Tag's identity
- parse_html() returns the document root (the BeautifulSoup object)
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from rsvp_reader.core.document import DocumentNode

HTML_EXTENSIONS = {".html", ".htm", ".xhtml"}


class SoupNode(DocumentNode):
    """DocumentNode backed by a BeautifulSoup Tag."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def raw(self) -> Tag:
        """The wrapped bs4 Tag."""
        return self._tag

    @property
    def tag(self) -> str:
        return (self._tag.name or "").lower()

    def get_attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    def children(self) -> List[DocumentNode]:
        return [SoupNode(child) for child in self._tag.children if isinstance(child, Tag)]

    def select(self, selector: str) -> List[DocumentNode]:
        return [SoupNode(found) for found in self._tag.select(selector)]

    def matches(self, selector: str) -> bool:
        if isinstance(self._tag, BeautifulSoup):
            return False
        return bool(self._tag.css.match(selector))

    def contains(self, other: DocumentNode) -> bool:
        if not isinstance(other, SoupNode):
            return False
        target = other._tag
        if target is self._tag:
            return True
        return any(parent is self._tag for parent in target.parents)

    def text(self) -> str:
        return self._tag.get_text()

    def clone(self) -> DocumentNode:
        return SoupNode(copy.copy(self._tag))

    def remove(self) -> None:
        self._tag.extract()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoupNode):
            return NotImplemented
        return self._tag is other._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return "SoupNode({})".format(self.describe())


def parse_html(markup: Union[str, bytes]) -> SoupNode:
    """Parse HTML markup and return the document root node."""
    return SoupNode(BeautifulSoup(markup, "lxml"))


def load_document(path: Union[str, Path]) -> SoupNode:
    """Read an HTML file from disk and return its document root.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the extension is not an HTML extension.
    """
    path = Path(path)
    if path.suffix.lower() not in HTML_EXTENSIONS:
        raise ValueError(
            "Unsupported document type: {} (expected one of {})".format(
                path.suffix or "(none)", ", ".join(sorted(HTML_EXTENSIONS))
            )
        )
    if not path.is_file():
        raise FileNotFoundError("Document not found: {}".format(path))
    return parse_html(path.read_bytes())
