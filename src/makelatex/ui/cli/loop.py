"""Interactive loop serialising file-watch rebuilds and single-key commands.

Two producers feed one queue: the one-shot file watch and a keyboard thread.
Only :meth:`Dispatcher.run` executes builds, so at most one build is in
flight at any time. The watch is disarmed while a build runs and re-armed
once it returns, which means replacements saved during a build are not seen.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from functools import partial
import logging
from pathlib import Path
import queue
import sys
import termios
import threading
import tty
from typing import Protocol, TextIO

from makelatex.adapters.watch import OneShotWatch
from makelatex.core.session import Session


logger = logging.getLogger(__name__)

QUIT_KEY = "q"
END_OF_TRANSMISSION = "\x04"


@dataclass(frozen=True, slots=True)
class Keystroke:
    """A single character typed by the operator."""

    char: str


@dataclass(frozen=True, slots=True)
class FileReplaced:
    """The watched document was replaced (or the loop is starting up)."""

    path: str | None = None


Message = Keystroke | FileReplaced


class Rearmable(Protocol):
    def arm(self) -> None: ...


@contextmanager
def cbreak_terminal(stream: TextIO) -> Iterator[None]:
    """Turn off line buffering and echo on ``stream`` for the duration of the block.

    Only the local modes change, so output processing keeps translating
    newlines for anything printed meanwhile. Streams that are not terminals
    are left alone. The saved attributes are restored on the way out,
    including when the block raises.
    """
    if not stream.isatty():
        yield
        return
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd, termios.TCSANOW)
    logger.debug("Keyboard switched to cbreak mode")
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug("Keyboard mode restored")


def read_keystroke(stream: TextIO | None = None) -> str:
    """Read one character, raising :class:`EOFError` once input is exhausted."""
    char = (stream if stream is not None else sys.stdin).read(1)
    if not char:
        raise EOFError
    return char


class KeyboardReader(threading.Thread):
    """Forward keystrokes to ``post`` until the quit key is typed."""

    def __init__(
        self,
        post: Callable[[Message], None],
        read_key: Callable[[], str] = read_keystroke,
    ) -> None:
        super().__init__(name="make-latex-keyboard", daemon=True)
        self._post = post
        self._read_key = read_key

    def run(self) -> None:
        while True:
            try:
                char = self._read_key()
            except EOFError:
                char = QUIT_KEY
            if char == END_OF_TRANSMISSION:
                char = QUIT_KEY
            self._post(Keystroke(char))
            if char == QUIT_KEY:
                return


class Dispatcher:
    """Run builds and command keys one message at a time."""

    def __init__(self, session: Session, *, watch: Rearmable | None = None) -> None:
        self.session = session
        self.watch = watch
        self._queue: queue.Queue[Message] = queue.Queue()
        self._commands: dict[str, Callable[[], object]] = {
            "m": session.make,
            "b": session.make_bibliography,
            "t": session.open_terminal,
            "e": session.open_editor,
            "p": session.open_pdf_viewer,
        }

    def post(self, message: Message) -> None:
        """Queue a message; safe to call from any thread."""
        self._queue.put(message)

    def on_file_replaced(self, event: object) -> None:
        """Watch callback translating the notification into a queued message."""
        path = getattr(event, "dest_path", None) or getattr(event, "src_path", None)
        self.post(FileReplaced(str(path) if path else None))

    def run(self) -> None:
        """Process messages until the quit key arrives."""
        while self.handle(self._queue.get()):
            pass

    def handle(self, message: Message) -> bool:
        """Process one message, returning ``False`` when the loop should stop."""
        if isinstance(message, FileReplaced):
            logger.debug("Rebuilding after replacement of %s", message.path or "<startup>")
            self.session.make()
            if self.watch is not None:
                self.watch.arm()
            return True

        char = message.char
        if char == QUIT_KEY:
            return False
        command = self._commands.get(char)
        if command is None:
            self.session.console.print(f"unknown command {char}", markup=False, highlight=False)
        else:
            command()
        return True


class _Watch(Rearmable, Protocol):
    def close(self) -> None: ...


def run_session(
    session: Session,
    *,
    watch_factory: Callable[[Path, Callable[[object], None]], _Watch] = OneShotWatch,
    keyboard: TextIO | None = None,
    read_key: Callable[[], str] | None = None,
) -> None:
    """Build, watch and serve command keys until the operator quits."""
    config = session.config
    keyboard = keyboard if keyboard is not None else sys.stdin
    if read_key is None:
        read_key = partial(read_keystroke, keyboard)
    dispatcher = Dispatcher(session)
    watch = watch_factory(config.main_file, dispatcher.on_file_replaced)
    dispatcher.watch = watch

    session.say(f"watching {config.main_file}; output is {config.pdf_file}")
    # Startup has no real event; the placeholder triggers the first build.
    dispatcher.post(FileReplaced())
    with cbreak_terminal(keyboard):
        KeyboardReader(dispatcher.post, read_key).start()
        try:
            dispatcher.run()
        finally:
            watch.close()
    session.say("bye")


__all__ = [
    "END_OF_TRANSMISSION",
    "QUIT_KEY",
    "Dispatcher",
    "FileReplaced",
    "KeyboardReader",
    "Keystroke",
    "Message",
    "cbreak_terminal",
    "read_keystroke",
    "run_session",
]
