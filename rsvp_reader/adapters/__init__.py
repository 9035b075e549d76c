"""Adapters from native document trees to the DocumentNode abstraction.

WHY: The core heuristics only know DocumentNode. Each tree library gets
one small adapter here so the core never imports it directly.

HOW: soup.py wraps BeautifulSoup tags (lxml parser) and provides helpers
to parse markup and load documents from disk.

RULES:
- Adapters never add heuristics; they only translate capabilities
"""

from rsvp_reader.adapters.soup import SoupNode, load_document, parse_html

__all__ = ["SoupNode", "load_document", "parse_html"]
