"""Shared test fixtures for the rsvp_reader test suite.

WHY: Content detection and playback tests need realistic pages and a way
to drive the pacing engine without real time passing. Centralizing them
here keeps every test module on the same sample data.

HOW: Module-level HTML constants describe a typical article page and a
page with nothing worth reading. FakeScheduler records every requested
delay and fires callbacks on demand; RecordingSink keeps everything the
engine displays.

RULES:
- No real timers, threads, or GUI in unit tests
- FakeScheduler.fire() insists on exactly one pending callback, so every
  test that fires also checks the one-timer invariant
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from rsvp_reader.adapters.soup import parse_html
from rsvp_reader.core.pivot import PivotParts
from rsvp_reader.playback.engine import PacingEngine
from rsvp_reader.playback.scheduler import Scheduler
from rsvp_reader.sinks.base import DisplaySink, Progress
from rsvp_reader.sources import StaticSource


# ---------------------------------------------------------------------------
# Sample pages
# ---------------------------------------------------------------------------

ARTICLE_HTML = """
<html>
<head>
  <title>Speed reading</title>
  <style>p { color: red; }</style>
  <script>var tracking = "should never be read";</script>
</head>
<body>
  <header class="masthead">
    <nav>
      <ul>
        <li><a href="/">Home</a></li>
        <li><a href="/world">World</a></li>
        <li><a href="/science">Science</a></li>
      </ul>
    </nav>
  </header>
  <div class="sidebar-widgets">
    <ul>
      <li><a href="/a">Most read one</a></li>
      <li><a href="/b">Most read two</a></li>
      <li><a href="/c">Most read three</a></li>
      <li><a href="/d">Most read four</a></li>
      <li><a href="/e">Most read five</a></li>
      <li><a href="/f">Most read six</a></li>
      <li><a href="/g">Most read seven</a></li>
    </ul>
  </div>
  <article id="story" class="story">
    <h1>Reading one word at a time</h1>
    <p>Rapid serial visual presentation shows a text one word at a time in a
       fixed position on the screen, so the eyes never have to travel along a line.</p>
    <p>Because the reader no longer scans, the speed is set by the display rather
       than by the eye, and most people can follow several hundred words per minute.</p>
    <p>The trick is to pick the right part of a page, because menus, footers and
       comment threads are not worth reading at any speed.</p>
    <div aria-hidden="true">Hidden tracking pixel text</div>
    <button>Share this story</button>
  </article>
  <footer><p>Copyright 2024 Example News. All rights reserved.</p></footer>
</body>
</html>
"""

NOTHING_TO_READ_HTML = """
<html>
<body>
  <nav><ul><li><a href="/">Home</a></li><li><a href="/about">About</a></li></ul></nav>
  <div class="content"><p>Welcome! Sign in to continue.</p></div>
  <footer>Copyright 2024</footer>
</body>
</html>
"""

SCENARIO_TEXT = "The quick brown fox jumps."


# ---------------------------------------------------------------------------
# Playback doubles
# ---------------------------------------------------------------------------

class FakeScheduler(Scheduler):
    """Manual scheduler: records delays, fires callbacks when told to."""

    def __init__(self) -> None:
        self.pending: Dict[int, Tuple[float, Callable[[], None]]] = {}
        self.delays: List[float] = []
        self.cancelled: List[int] = []
        self._next_handle = 0

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self.pending[handle] = (delay_ms, callback)
        self.delays.append(delay_ms)
        return handle

    def cancel(self, handle: int) -> None:
        self.pending.pop(handle, None)
        self.cancelled.append(handle)

    @property
    def pending_delay(self) -> Optional[float]:
        if not self.pending:
            return None
        assert len(self.pending) == 1, "more than one timer pending"
        return next(iter(self.pending.values()))[0]

    def fire(self) -> float:
        """Run the single pending callback and return its delay."""
        assert len(self.pending) == 1, "expected exactly one pending timer, got {}".format(len(self.pending))
        handle, (delay, callback) = next(iter(self.pending.items()))
        del self.pending[handle]
        callback()
        return delay

    def run_all(self, limit: int = 10000) -> int:
        """Fire until nothing is pending; returns the number of fires."""
        fired = 0
        while self.pending:
            self.fire()
            fired += 1
            assert fired < limit, "scheduler did not go idle"
        return fired


class RecordingSink(DisplaySink):
    """Keeps every word and progress update the engine pushes."""

    def __init__(self) -> None:
        self.words: List[PivotParts] = []
        self.progress: List[Progress] = []
        self.closed = False

    def show_word(self, parts: PivotParts) -> None:
        self.words.append(parts)

    def show_progress(self, progress: Progress) -> None:
        self.progress.append(progress)

    def close(self) -> None:
        self.closed = True

    @property
    def texts(self) -> List[str]:
        return [parts.text.strip("\u00a0") for parts in self.words]


class CountingSource(StaticSource):
    """StaticSource that counts how often the selection is read."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.selection_reads = 0

    def get_selection(self) -> Optional[str]:
        self.selection_reads += 1
        return super().get_selection()


class Speed:
    """Mutable speed provider, standing in for the WPM control."""

    def __init__(self, wpm: int) -> None:
        self.wpm = wpm

    def __call__(self) -> int:
        return self.wpm


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def article_root():
    return parse_html(ARTICLE_HTML)


@pytest.fixture
def article_path(tmp_path):
    """ARTICLE_HTML saved as an .html file."""
    path = tmp_path / "article.html"
    path.write_text(ARTICLE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def nothing_root():
    return parse_html(NOTHING_TO_READ_HTML)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def speed():
    return Speed(350)


@pytest.fixture
def make_engine(scheduler, sink, speed):
    """Factory for engines wired to the shared fake scheduler, sink and speed."""

    def _make(selection=SCENARIO_TEXT, document=None, source=None):
        if source is None:
            source = CountingSource(selection=selection, document=document)
        return PacingEngine(source=source, sink=sink, scheduler=scheduler, speed=speed)

    return _make
