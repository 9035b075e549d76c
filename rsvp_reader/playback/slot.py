"""Process-wide slot holding at most one pacing engine.

WHY: Two live engines would mean two timers pushing words into displays
at once. Launching the reader again must first tear down the previous
instance completely (timer cancelled, display released).

HOW: EngineSlot holds one engine handle behind a lock. install() closes
whatever engine is there before storing the new one; clear() closes and
empties the slot. The owner (GUI or CLI) creates the slot explicitly.

RULES:
- install() always closes the previous engine before the new one is visible
- Installing the engine that is already in the slot is a no-op
- clear() on an empty slot is a no-op
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from rsvp_reader.playback.engine import PacingEngine

logger = logging.getLogger(__name__)


class EngineSlot:
    """Owns the single live PacingEngine."""

    def __init__(self) -> None:
        self._engine: Optional[PacingEngine] = None
        self._lock = threading.Lock()

    @property
    def current(self) -> Optional[PacingEngine]:
        with self._lock:
            return self._engine

    def install(self, engine: PacingEngine) -> PacingEngine:
        """Tear down the current engine (if any) and hold ``engine`` instead."""
        with self._lock:
            previous = self._engine
            if previous is engine:
                return engine
            if previous is not None:
                logger.info("Removing existing reader instance")
                previous.close()
            self._engine = engine
        return engine

    def clear(self) -> None:
        """Tear down and forget the current engine."""
        with self._lock:
            previous, self._engine = self._engine, None
            if previous is not None:
                previous.close()
