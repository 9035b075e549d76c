"""Playback: the pacing engine, its timers, and instance ownership.

WHY: Playback is the only stateful, time-driven part of the reader. It is
kept apart from the core heuristics so timer discipline lives in one place.

HOW: scheduler.py adapts event loops (asyncio, Tk) to one cancellable
timer interface, engine.py holds the Idle/Playing/Paused/Finished state
machine, and slot.py enforces one live engine per process.

RULES:
- The engine never holds more than one pending timer handle
- Every transition out of Playing cancels that handle before returning
"""

from rsvp_reader.playback.engine import PacingEngine, PlaybackState
from rsvp_reader.playback.scheduler import AsyncioScheduler, Scheduler, TkScheduler
from rsvp_reader.playback.slot import EngineSlot

__all__ = [
    "AsyncioScheduler",
    "EngineSlot",
    "PacingEngine",
    "PlaybackState",
    "Scheduler",
    "TkScheduler",
]
