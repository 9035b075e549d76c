"""Tkinter desktop window for the RSVP reader.

WHY: Reading is a visual activity; the terminal can only approximate a
fixed focal point. The window shows each word in a large monospace font
with its pivot character in red, directly under a red focal marker, and
lets the user change speed while reading.

HOW: A single ReaderApp class builds the window: a source area (Open a
page or text file, or paste text and optionally select a passage), the
word display between two guide lines, and a control row (speed, Start /
Pause / Continue, Stop, Close) with a progress bar. The pacing engine runs
on Tk's own event loop through TkScheduler, so every tick happens on the
main thread. The window is both the engine's input source and, through
_TkDisplaySink, its display sink.

RULES:
- The selected range of the text box is the selection; with no selection
  and no page loaded, the whole text box is read
- An opened HTML page is searched for main content when nothing is selected
- The speed combobox calls engine.on_speed_change() on every change
- The window owns one EngineSlot; closing the window clears it first
- tkinter widgets are ONLY touched from the main thread
"""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk
from typing import Optional

from rsvp_reader.adapters.soup import HTML_EXTENSIONS, load_document
from rsvp_reader.config import DEFAULT_WPM, LOG_LEVEL, READY_MESSAGE, WPM_CHOICES, parse_wpm
from rsvp_reader.core.cleaner import clean_text
from rsvp_reader.core.document import DocumentNode
from rsvp_reader.core.errors import ReaderError
from rsvp_reader.core.pivot import PivotParts, render_pivot
from rsvp_reader.playback.engine import PacingEngine, PlaybackState
from rsvp_reader.playback.scheduler import TkScheduler
from rsvp_reader.playback.slot import EngineSlot
from rsvp_reader.sinks.base import DisplaySink, Progress
from rsvp_reader.sources import TEXT_EXTENSIONS, InputSource

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_WINDOW_TITLE = "RSVP Reader"
_WINDOW_MIN_WIDTH = 560
_WINDOW_MIN_HEIGHT = 480
_PAD = 8

_WORD_FONT = ("Courier New", 30, "bold")
_TEXT_COLOR = "#333333"
_PIVOT_COLOR = "red"
_GUIDE_COLOR = "#cccccc"
_DISPLAY_HEIGHT = 90

_FILE_TYPES = [
    ("Web pages", " ".join("*" + ext for ext in sorted(HTML_EXTENSIONS))),
    ("Text files", " ".join("*" + ext for ext in sorted(TEXT_EXTENSIONS))),
    ("All files", "*"),
]


class _TkDisplaySink(DisplaySink):
    """Pushes engine output into the window's word labels and progress bar."""

    def __init__(self, app: ReaderApp) -> None:
        self._app = app

    def show_word(self, parts: PivotParts) -> None:
        self._app.set_word(parts)

    def show_progress(self, progress: Progress) -> None:
        self._app.set_progress(progress)


class _TkInputSource(InputSource):
    """Reads the selection and loaded page from the window."""

    def __init__(self, app: ReaderApp) -> None:
        self._app = app

    def get_selection(self) -> Optional[str]:
        return self._app.selected_text()

    def document_root(self) -> Optional[DocumentNode]:
        return self._app.document


class ReaderApp:
    """Main application window for word-by-word reading.

    RULES:
    - All engine calls happen from Tk callbacks on the main thread
    - The Start button label follows the engine state
      (Start / Pause / Continue)
    """

    def __init__(self, root: tk.Tk) -> None:
        self._root = root
        self._root.title(_WINDOW_TITLE)
        self._root.minsize(_WINDOW_MIN_WIDTH, _WINDOW_MIN_HEIGHT)
        self._root.protocol("WM_DELETE_WINDOW", self._close)

        self.document: Optional[DocumentNode] = None

        self._build_ui()

        self._slot = EngineSlot()
        self._engine = self._slot.install(PacingEngine(
            source=_TkInputSource(self),
            sink=_TkDisplaySink(self),
            scheduler=TkScheduler(self._root),
            speed=self.current_wpm,
        ))
        self.set_word(render_pivot(READY_MESSAGE))

    # ------------------------------------------------------------------
    # UI Construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        """Build the main window layout."""
        main = ttk.Frame(self._root, padding=_PAD)
        main.pack(fill=tk.BOTH, expand=True)

        # --- Source ---
        source_frame = ttk.LabelFrame(main, text="Source", padding=_PAD)
        source_frame.pack(fill=tk.BOTH, expand=True, pady=(0, _PAD))

        file_row = ttk.Frame(source_frame)
        file_row.pack(fill=tk.X, pady=(0, 4))
        self._file_label = ttk.Label(
            file_row, text="Paste text below, or open a page", foreground="gray"
        )
        self._file_label.pack(side=tk.LEFT, fill=tk.X, expand=True)
        ttk.Button(file_row, text="Clear", command=self._clear_source).pack(side=tk.RIGHT)
        ttk.Button(file_row, text="Open...", command=self._browse_file).pack(
            side=tk.RIGHT, padx=(0, 4)
        )

        self._text = tk.Text(source_frame, height=8, wrap=tk.WORD, font=("TkDefaultFont", 11))
        scrollbar = ttk.Scrollbar(source_frame, orient=tk.VERTICAL, command=self._text.yview)
        self._text.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self._text.pack(fill=tk.BOTH, expand=True)

        # --- Word display ---
        display = tk.Frame(main, height=_DISPLAY_HEIGHT, bg="white")
        display.pack(fill=tk.X, pady=(0, _PAD))
        display.pack_propagate(False)

        self._guides = tk.Canvas(display, height=_DISPLAY_HEIGHT, bg="white", highlightthickness=0)
        self._guides.place(relx=0, rely=0, relwidth=1, relheight=1)
        self._guides.bind("<Configure>", self._draw_guides)

        word_row = tk.Frame(display, bg="white")
        word_row.place(relx=0.5, rely=0.5, anchor=tk.CENTER)
        self._former_var = tk.StringVar()
        self._pivot_var = tk.StringVar()
        self._latter_var = tk.StringVar()
        for var, color in (
            (self._former_var, _TEXT_COLOR),
            (self._pivot_var, _PIVOT_COLOR),
            (self._latter_var, _TEXT_COLOR),
        ):
            tk.Label(
                word_row, textvariable=var, font=_WORD_FONT, fg=color, bg="white",
                padx=0, pady=0, borderwidth=0,
            ).pack(side=tk.LEFT)

        # --- Progress ---
        progress_row = ttk.Frame(main)
        progress_row.pack(fill=tk.X, pady=(0, _PAD))
        self._progress_bar = ttk.Progressbar(progress_row, maximum=1.0, mode="determinate")
        self._progress_bar.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self._remaining_label = ttk.Label(progress_row, text="-", width=8, anchor=tk.E)
        self._remaining_label.pack(side=tk.RIGHT, padx=(_PAD, 0))

        # --- Controls ---
        controls = ttk.Frame(main)
        controls.pack(fill=tk.X)

        ttk.Label(controls, text="Speed:").pack(side=tk.LEFT)
        choices = ["{} wpm".format(wpm) for wpm in WPM_CHOICES]
        self._wpm_var = tk.StringVar(value="{} wpm".format(DEFAULT_WPM))
        self._wpm_combo = ttk.Combobox(
            controls, textvariable=self._wpm_var, values=choices, width=9
        )
        self._wpm_combo.pack(side=tk.LEFT, padx=(4, _PAD))
        self._wpm_combo.bind("<<ComboboxSelected>>", self._on_wpm_change)
        self._wpm_combo.bind("<Return>", self._on_wpm_change)

        self._start_btn = ttk.Button(controls, text="Start", command=self._toggle)
        self._start_btn.pack(side=tk.LEFT)
        ttk.Button(controls, text="Stop", command=self._stop).pack(side=tk.LEFT, padx=(4, 0))
        ttk.Button(controls, text="Close", command=self._close).pack(side=tk.RIGHT)

    def _draw_guides(self, event: tk.Event) -> None:
        """Draw the two guide lines with red focal ticks at the centre."""
        canvas = self._guides
        canvas.delete("all")
        width, height = event.width, event.height
        centre = width // 2
        top, bottom = 15, height - 15
        canvas.create_line(0, top, width, top, fill=_GUIDE_COLOR)
        canvas.create_line(0, bottom, width, bottom, fill=_GUIDE_COLOR)
        canvas.create_line(centre, top - 8, centre, top, fill=_PIVOT_COLOR)
        canvas.create_line(centre, bottom, centre, bottom + 8, fill=_PIVOT_COLOR)

    # ------------------------------------------------------------------
    # Source handling
    # ------------------------------------------------------------------

    def _browse_file(self) -> None:
        """Open a file dialog and load the chosen page or text file."""
        path = filedialog.askopenfilename(title="Open a page or text file", filetypes=_FILE_TYPES)
        if path:
            self._load_file(Path(path))

    def _load_file(self, path: Path) -> None:
        self._engine.stop()
        suffix = path.suffix.lower()
        try:
            if suffix in HTML_EXTENSIONS:
                self.document = load_document(path)
                preview = clean_text(self.document)
            elif suffix in TEXT_EXTENSIONS:
                self.document = None
                preview = path.read_text(encoding="utf-8")
            else:
                raise ValueError("Unsupported file type: {}".format(suffix or "(none)"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not open %s: %s", path, exc)
            messagebox.showerror("Cannot open file", str(exc))
            return

        self._file_label.configure(text=path.name, foreground="")
        self._text.delete("1.0", tk.END)
        self._text.insert("1.0", preview)
        self.set_word(render_pivot(READY_MESSAGE))

    def _clear_source(self) -> None:
        self._engine.stop()
        self.document = None
        self._file_label.configure(text="Paste text below, or open a page", foreground="gray")
        self._text.delete("1.0", tk.END)
        self.set_word(render_pivot(READY_MESSAGE))

    def selected_text(self) -> Optional[str]:
        """The selected range of the text box, or the whole box without a page."""
        ranges = self._text.tag_ranges(tk.SEL)
        if ranges:
            return self._text.get(ranges[0], ranges[1])
        if self.document is None:
            return self._text.get("1.0", tk.END)
        return None

    # ------------------------------------------------------------------
    # Display sink callbacks
    # ------------------------------------------------------------------

    def set_word(self, parts: PivotParts) -> None:
        self._former_var.set(parts.former)
        self._pivot_var.set(parts.pivot)
        self._latter_var.set(parts.latter)

    def set_progress(self, progress: Progress) -> None:
        self._progress_bar.configure(value=progress.fraction)
        self._remaining_label.configure(text=progress.remaining_label())
        self._refresh_controls()

    def _refresh_controls(self) -> None:
        state = self._engine.state
        if state is PlaybackState.PLAYING:
            label = "Pause"
        elif state is PlaybackState.PAUSED:
            label = "Continue"
        else:
            label = "Start"
        self._start_btn.configure(text=label)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def current_wpm(self) -> int:
        """Speed from the combobox; falls back to DEFAULT_WPM on bad input."""
        try:
            return parse_wpm(self._wpm_var.get())
        except ValueError:
            return DEFAULT_WPM

    def _on_wpm_change(self, event: Optional[tk.Event] = None) -> None:
        self._engine.on_speed_change()

    def _toggle(self) -> None:
        try:
            self._engine.toggle()
        except ReaderError as exc:
            messagebox.showwarning(_WINDOW_TITLE, str(exc))
        self._refresh_controls()

    def _stop(self) -> None:
        self._engine.stop()
        self.set_word(render_pivot(READY_MESSAGE))

    def _close(self) -> None:
        """Tear down the engine before the window goes away."""
        self._slot.clear()
        self._root.destroy()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Launch the Tkinter GUI application.

    RULES:
    - This function blocks until the window is closed
    - Must be called from the main thread
    """
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    root = tk.Tk()
    ReaderApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
