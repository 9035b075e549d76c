"""Command-line interface for the RSVP reader.

WHY: Users need a quick way to speed-read a saved web page or a text file
from the terminal, and to see which part of a page the content locator
would pick before trusting it in the GUI.

HOW: Uses argparse to accept an optional input file (HTML or plain text),
an explicit --text selection, a speed, and a display mode. Playback runs
on an asyncio event loop via asyncio.run(), with an AsyncioScheduler
driving the pacing engine. Status messages go to stderr; words go to
stdout.

RULES:
- Positional argument: optional input file (.html/.htm/.xhtml or .txt/.md)
- --text is treated as the user's selection and wins over detection
- --extract-only prints the acquired text and exits
- --candidates prints every scored candidate, best first, and exits
- Exit status 1 when there is nothing to read or the input is invalid
- Ctrl-C tears the engine down (timer cancelled) and exits 130
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from rsvp_reader.config import DEFAULT_WPM, LOG_LEVEL, parse_wpm
from rsvp_reader.core.errors import ReaderError
from rsvp_reader.core.locator import score_candidates
from rsvp_reader.playback.engine import PacingEngine
from rsvp_reader.playback.scheduler import AsyncioScheduler
from rsvp_reader.playback.slot import EngineSlot
from rsvp_reader.sinks import SINKS
from rsvp_reader.sources import InputSource, StaticSource, acquire_text, source_from_file

def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _build_source(args: argparse.Namespace) -> InputSource:
    """Build the input source from the file argument and/or --text.

    Raises:
        FileNotFoundError: If the input file does not exist.
        ValueError: If the input file type is unsupported, or no input given.
    """
    if args.input_file:
        return source_from_file(args.input_file, selection=args.text)
    if args.text:
        return StaticSource(selection=args.text)
    raise ValueError("Nothing to read: give an input file or --text.")


def _print_candidates(source: InputSource) -> int:
    root = source.document_root()
    if root is None:
        _status("No document to search (candidates need an HTML input file).")
        return 1
    scored = score_candidates(root)
    if not scored:
        _status("No content candidates found.")
        return 1
    ranked = sorted(enumerate(scored), key=lambda pair: (-pair[1].score, pair[0]))
    for _, candidate in ranked:
        print("{:10.2f}  {}".format(candidate.score, candidate.node.describe()))
    return 0


async def _play(source: InputSource, sink_name: str, wpm: int) -> int:
    """Play ``source`` until finished, returning the exit status."""
    sink = SINKS[sink_name]()
    finished = asyncio.Event()
    slot = EngineSlot()
    engine = slot.install(PacingEngine(
        source=source,
        sink=sink,
        scheduler=AsyncioScheduler(),
        speed=lambda: wpm,
        on_finish=finished.set,
    ))
    try:
        try:
            engine.start()
        except ReaderError as exc:
            _status("Error: {}".format(exc))
            return 1
        _status("Reading {} words at {} wpm (Ctrl-C to stop)".format(len(engine.words), engine.current_speed()))
        await finished.wait()
        return 0
    finally:
        slot.clear()


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running playback.
    """
    parser = argparse.ArgumentParser(
        prog="rsvp_reader",
        description="Speed-read a web page or text file one word at a time, "
                    "detecting the article automatically when no text is given.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="HTML page (.html/.htm/.xhtml) or text file (.txt/.md) to read.",
    )

    parser.add_argument(
        "--text",
        default=None,
        help="Text to read instead of detecting content (acts as the selection).",
    )

    parser.add_argument(
        "--wpm",
        type=parse_wpm,
        default=DEFAULT_WPM,
        help="Reading speed in words per minute, minimum 50 (default: %(default)s).",
    )

    parser.add_argument(
        "--display",
        choices=sorted(SINKS.keys()),
        default="terminal",
        help="How words are shown (default: %(default)s).",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--extract-only",
        action="store_true",
        help="Print the text that would be read and exit.",
    )
    mode.add_argument(
        "--candidates",
        action="store_true",
        help="List detected content candidates with their scores and exit.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log content detection and playback details to stderr.",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a parsed command line and return the exit status."""
    _configure_logging(args.verbose)

    try:
        source = _build_source(args)
    except (FileNotFoundError, ValueError) as exc:
        _status("Error: {}".format(exc))
        return 1

    if args.candidates:
        return _print_candidates(source)

    if args.extract_only:
        try:
            print(acquire_text(source))
        except ReaderError as exc:
            _status("Error: {}".format(exc))
            return 1
        return 0

    return asyncio.run(_play(source, args.display, args.wpm))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        code = run(args)
    except KeyboardInterrupt:
        _status("\nStopped.")
        sys.exit(130)
    sys.exit(code)


if __name__ == "__main__":
    main()
