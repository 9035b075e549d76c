"""Pacing engine — the playback state machine.

WHY: Words must appear one at a time, in order, exactly once each, at a
pace the user can change mid-read, with short pauses after long words and
punctuation. Pausing, stopping, or closing must never leave a stale timer
that could fire later and overwrite the display.

HOW: PacingEngine owns the word sequence, a cursor, a PlaybackState, and a
single timer handle. Each tick renders the word at the cursor through the
pivot renderer, pushes it to the display sink, advances the cursor by one,
and reschedules itself after base_interval * delay_multiplier(word). The
speed is polled from a callable at every scheduling decision.

RULES:
- States: IDLE → PLAYING ⇄ PAUSED; PLAYING → FINISHED; any → IDLE on stop()
- start() at cursor 0 acquires and tokenizes text; at cursor > 0 it resumes
- The first tick after start()/resume() waits one base interval, 60000 / wpm
- A tick at cursor == len(words) moves to FINISHED and shows FINISHED_MESSAGE
- A speed change while PLAYING reschedules at the new base interval with
  no multiplier; otherwise it only refreshes the progress estimate
- _schedule() cancels any pending handle before creating a new one
- Speed is floored to MIN_WPM
- close() resets like stop() but pushes nothing more to the sink
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, List, Optional, Tuple

from rsvp_reader.config import (
    DEFAULT_WPM,
    FINISHED_MESSAGE,
    MIN_WPM,
    NO_TEXT_MESSAGE,
    NO_WORDS_MESSAGE,
)
from rsvp_reader.core.errors import EmptyTokenizationError, NoUsableTextError, ReaderError
from rsvp_reader.core.pivot import render_pivot
from rsvp_reader.core.tokenizer import delay_multiplier, tokenize
from rsvp_reader.playback.scheduler import Scheduler
from rsvp_reader.sinks.base import DisplaySink, Progress
from rsvp_reader.sources import InputSource, acquire_text

logger = logging.getLogger(__name__)

MS_PER_MINUTE = 60000.0


class PlaybackState(str, enum.Enum):
    """Playback states of a PacingEngine.

    RULES:
    - idle: nothing loaded, cursor 0 (initial, and after stop())
    - playing: a tick is pending
    - paused: cursor and words kept, no tick pending
    - finished: every word shown; the next start() reloads text
    """

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"


def base_interval_ms(wpm: int) -> float:
    """Milliseconds per word at ``wpm`` words per minute."""
    return MS_PER_MINUTE / wpm


def compute_progress(
    cursor: int,
    total: int,
    wpm: int,
    state: PlaybackState,
) -> Progress:
    """Progress estimate for a cursor position.

    The time estimate is only meaningful while a sequence is loaded and
    not yet finished; otherwise seconds_remaining is None.
    """
    if total <= 0:
        return Progress(fraction=0.0)
    fraction = min(1.0, cursor / total)
    if state in (PlaybackState.IDLE, PlaybackState.FINISHED):
        return Progress(fraction=fraction)
    remaining = total - cursor
    return Progress(fraction=fraction, seconds_remaining=remaining / wpm * 60)


class PacingEngine:
    """Drives one reading session from an input source onto a display sink.

    Args:
        source: Supplies the selection or the document to read.
        sink: Receives each rendered word and progress updates.
        scheduler: One-shot timer facility of the host event loop.
        speed: Callable returning the current words-per-minute; polled at
            every scheduling decision so external changes apply at once.
        on_finish: Called once each time playback reaches the end of the
            words, after the finished message has been shown.
    """

    def __init__(
        self,
        source: InputSource,
        sink: DisplaySink,
        scheduler: Scheduler,
        speed: Optional[Callable[[], int]] = None,
        on_finish: Optional[Callable[[], None]] = None,
    ) -> None:
        self._source = source
        self._sink = sink
        self._scheduler = scheduler
        self._speed = speed or (lambda: DEFAULT_WPM)
        self._on_finish = on_finish
        self._words: Tuple[str, ...] = ()
        self._cursor = 0
        self._state = PlaybackState.IDLE
        self._timer: Any = None
        self._closed = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def has_pending_tick(self) -> bool:
        return self._timer is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def current_speed(self) -> int:
        """The polled speed, floored to MIN_WPM."""
        return max(MIN_WPM, int(self._speed()))

    def progress(self) -> Progress:
        return compute_progress(self._cursor, len(self._words), self.current_speed(), self._state)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Start a new session, or resume a paused one.

        Raises:
            NoUsableTextError: No selection and no detectable content.
            EmptyTokenizationError: The acquired text has no words.
            RuntimeError: The engine has been closed.
        """
        self._ensure_open()
        if self._state is PlaybackState.PLAYING:
            logger.debug("start() ignored: already playing")
            return
        if self._state is PlaybackState.FINISHED:
            self._cursor = 0

        if self._cursor == 0:
            try:
                self._load_words()
            except ReaderError:
                self._words = ()
                self._set_state(PlaybackState.IDLE)
                raise

        self._set_state(PlaybackState.PLAYING)
        self._schedule(base_interval_ms(self.current_speed()))
        self._publish_progress()

    def resume(self) -> None:
        """Continue from the paused position without reloading text."""
        if self._state is not PlaybackState.PAUSED:
            logger.debug("resume() ignored in state %s", self._state.value)
            return
        self.start()

    def pause(self) -> None:
        """Stop ticking but keep the cursor and words."""
        self._cancel_timer()
        if self._state is PlaybackState.PLAYING:
            self._set_state(PlaybackState.PAUSED)
            self._publish_progress()

    def toggle(self) -> None:
        """Pause while playing, otherwise start or resume."""
        if self._state is PlaybackState.PLAYING:
            self.pause()
        else:
            self.start()

    def stop(self) -> None:
        """Cancel playback, drop the words, and return to IDLE at cursor 0."""
        self._reset()
        self._publish_progress()

    def on_speed_change(self) -> None:
        """React to an external speed change."""
        if self._state is PlaybackState.PLAYING:
            # The in-flight word's multiplier is not re-applied here.
            self._schedule(base_interval_ms(self.current_speed()))
        self._publish_progress()

    def close(self) -> None:
        """Tear the engine down: cancel the timer and release the sink."""
        if self._closed:
            return
        self._reset()
        self._closed = True
        self._sink.close()
        logger.debug("Engine closed")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load_words(self) -> None:
        try:
            text = acquire_text(self._source)
        except NoUsableTextError:
            self._sink.show_word(render_pivot(NO_TEXT_MESSAGE))
            raise

        words = tokenize(text)
        if not words:
            self._sink.show_word(render_pivot(NO_WORDS_MESSAGE))
            raise EmptyTokenizationError("The acquired text contains no words.")

        self._words = tuple(words)
        self._cursor = 0
        logger.debug("Loaded %d words", len(self._words))

    def _tick(self) -> None:
        self._timer = None
        if self._state is not PlaybackState.PLAYING:
            return

        if self._cursor < len(self._words):
            word = self._words[self._cursor]
            self._sink.show_word(render_pivot(word))
            self._cursor += 1
            interval = base_interval_ms(self.current_speed()) * delay_multiplier(word)
            self._schedule(interval)
            self._publish_progress()
        else:
            self._cancel_timer()
            self._set_state(PlaybackState.FINISHED)
            self._sink.show_word(render_pivot(FINISHED_MESSAGE))
            self._publish_progress()
            if self._on_finish is not None:
                self._on_finish()

    def _reset(self) -> None:
        self._cancel_timer()
        self._cursor = 0
        self._words = ()
        self._set_state(PlaybackState.IDLE)

    def _schedule(self, delay_ms: float) -> None:
        self._cancel_timer()
        self._timer = self._scheduler.schedule(delay_ms, self._tick)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            timer, self._timer = self._timer, None
            self._scheduler.cancel(timer)

    def _set_state(self, state: PlaybackState) -> None:
        if state is not self._state:
            logger.debug("Playback %s -> %s at word %d", self._state.value, state.value, self._cursor)
        self._state = state

    def _publish_progress(self) -> None:
        self._sink.show_progress(self.progress())

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("This reader has been closed; create a new one.")
