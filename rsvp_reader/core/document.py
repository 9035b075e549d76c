"""Capability-based abstraction over a node in a document tree.

WHY: Content detection needs to query tags, attributes, descendants, and
text, but it should not care whether the tree came from BeautifulSoup, a
browser bridge, or a synthetic test fixture. Depending on a narrow set of
capabilities keeps the heuristics portable and unit-testable.

HOW: DocumentNode is an ABC listing the operations the cleaner, scorer,
and locator use. Concrete adapters (see adapters/soup.py) wrap a native
tree API. Selectors are simple CSS selectors: tag names, #id, .class,
[attr="value"], comma groups, and descendant combinators.

RULES:
- select() returns element descendants in document order, never the node itself
- matches() evaluates a selector against the node in its full tree context
- contains() is inclusive: a node contains itself
- clone() returns a detached deep copy; remove() is only ever called on clones
- Equality is node identity, not structural equality
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional


class DocumentNode(ABC):
    """One element of a host document tree."""

    @property
    @abstractmethod
    def tag(self) -> str:
        """Lower-case tag name, e.g. ``"article"``."""

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        """Attribute value as a string, or None when absent."""

    @abstractmethod
    def children(self) -> List[DocumentNode]:
        """Direct element children in document order."""

    @abstractmethod
    def select(self, selector: str) -> List[DocumentNode]:
        """Element descendants matching ``selector`` in document order."""

    @abstractmethod
    def matches(self, selector: str) -> bool:
        """True if this node matches ``selector``."""

    @abstractmethod
    def contains(self, other: DocumentNode) -> bool:
        """True if ``other`` is this node or one of its descendants."""

    @abstractmethod
    def text(self) -> str:
        """Raw concatenated text of the subtree, whitespace untouched."""

    @abstractmethod
    def clone(self) -> DocumentNode:
        """Detached deep copy of the subtree rooted at this node."""

    @abstractmethod
    def remove(self) -> None:
        """Detach this node from its parent."""

    @property
    def node_id(self) -> str:
        return self.get_attribute("id") or ""

    @property
    def class_name(self) -> str:
        """The class attribute as one space-separated string."""
        return self.get_attribute("class") or ""

    def describe(self) -> str:
        """Short ``tag#id.class`` label for logs and CLI listings."""
        label = self.tag
        if self.node_id:
            label += "#" + self.node_id
        classes = self.class_name.split()
        if classes:
            label += "." + ".".join(classes)
        return label
