"""Input sources — where the text to read comes from.

WHY: The reader prefers what the user explicitly selected and only falls
back to detecting the article in the whole document. The engine should
not care whether the selection came from a GUI text box, a CLI flag, or a
text file, so the source is a small interface.

HOW: InputSource exposes get_selection() and document_root(). StaticSource
holds fixed values (CLI, tests). acquire_text() applies the selection
rules, falls back to the main-content locator plus cleaner, and raises
NoUsableTextError when neither yields enough text.

RULES:
- A selection is used only if its trimmed length exceeds MIN_SELECTION_LENGTH
- Line breaks in a selection are replaced by single spaces
- Text shorter than MIN_SELECTION_LENGTH after acquisition is unusable
- .txt/.md files are read as a selection; HTML files become a document root
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from rsvp_reader.adapters.soup import HTML_EXTENSIONS, load_document
from rsvp_reader.config import MIN_SELECTION_LENGTH
from rsvp_reader.core.cleaner import clean_text
from rsvp_reader.core.document import DocumentNode
from rsvp_reader.core.errors import NoUsableTextError
from rsvp_reader.core.locator import locate_main_content

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {".txt", ".md", ".text"}

_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")


class InputSource(ABC):
    """Supplies a user selection and/or a document tree."""

    @abstractmethod
    def get_selection(self) -> Optional[str]:
        """The currently selected text, or None."""

    @abstractmethod
    def document_root(self) -> Optional[DocumentNode]:
        """Root of the document to search for main content, or None."""


class StaticSource(InputSource):
    """Fixed selection and document, e.g. from command-line arguments."""

    def __init__(
        self,
        selection: Optional[str] = None,
        document: Optional[DocumentNode] = None,
    ) -> None:
        self.selection = selection
        self.document = document

    def get_selection(self) -> Optional[str]:
        return self.selection

    def document_root(self) -> Optional[DocumentNode]:
        return self.document


def normalize_selection(raw: Optional[str]) -> str:
    """Return the usable form of a selection, or "" if it is too short."""
    if not raw:
        return ""
    text = raw.strip()
    if len(text) <= MIN_SELECTION_LENGTH:
        return ""
    return _LINE_BREAK_RE.sub(" ", text)


def acquire_text(source: InputSource) -> str:
    """Get the text to read from ``source``.

    Raises:
        NoUsableTextError: If there is no usable selection and no
            qualifying main content, or the result is too short.
    """
    text = normalize_selection(source.get_selection())
    if text:
        logger.debug("Using selection (%d chars)", len(text))
    else:
        root = source.document_root()
        node = locate_main_content(root) if root is not None else None
        if node is not None:
            text = clean_text(node)
            logger.debug("Using detected content %s (%d chars)", node.describe(), len(text))

    if len(text) < MIN_SELECTION_LENGTH:
        raise NoUsableTextError(
            "Please select some text, or open a page whose main content can be detected."
        )
    return text


def source_from_file(
    path: Union[str, Path],
    selection: Optional[str] = None,
) -> StaticSource:
    """Build a StaticSource from a file on disk.

    HTML files become the document root; plain-text files are read as the
    selection (an explicit ``selection`` argument wins over the file).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the extension is neither HTML nor plain text.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in HTML_EXTENSIONS:
        return StaticSource(selection=selection, document=load_document(path))
    if suffix in TEXT_EXTENSIONS:
        if not path.is_file():
            raise FileNotFoundError("File not found: {}".format(path))
        file_text = path.read_text(encoding="utf-8")
        return StaticSource(selection=selection or file_text)
    raise ValueError(
        "Unsupported file type: {} (expected one of {})".format(
            suffix or "(none)", ", ".join(sorted(HTML_EXTENSIONS | TEXT_EXTENSIONS))
        )
    )
