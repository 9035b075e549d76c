"""Core content-detection and word-rendering modules.

WHY: The core package holds the heuristics that decide what to read and
how each word is laid out. They are consumed by the pacing engine, the
CLI, and the GUI, and must stay free of any display or timer concerns.

HOW: document.py defines the DocumentNode abstraction, cleaner.py turns a
node into plain text, scorer.py and locator.py pick the article node,
tokenizer.py splits text into words, and pivot.py lays out one word.

RULES:
- Nothing in core mutates a live document tree
- Everything here is synchronous and free of timers
- Heuristic failures surface as score 0 or typed errors, never crashes
"""
