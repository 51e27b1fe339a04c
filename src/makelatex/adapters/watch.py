"""One-shot notifications for documents saved by rename.

Editors such as vim save by moving files around, and replacing a file
invalidates any watch attached to it. The watch therefore observes the
containing directory and only reports saves of the target path. It fires
once per :meth:`OneShotWatch.arm` call.

Two save styles are recognised. An atomic replace moves a finished file
onto the target and fires straight away. A backup save first moves the
target aside and then writes a new file in its place; the watch waits
until that write is closed, or the moved-aside copy is deleted, so the
build never starts before the new document exists.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import os
from pathlib import Path
import threading
from typing import Any

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


logger = logging.getLogger(__name__)

WatchCallback = Callable[[FileSystemEvent], None]


def _normalise(path: str | bytes) -> str:
    return os.path.abspath(os.fsdecode(path))


class _ReplaceHandler(FileSystemEventHandler):
    def __init__(self, owner: OneShotWatch) -> None:
        super().__init__()
        self._owner = owner

    def on_moved(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        target = self._owner.target
        if event.dest_path and _normalise(event.dest_path) == target:
            self._owner._fire(event)
        elif _normalise(event.src_path) == target:
            self._owner._moved_aside(_normalise(event.dest_path))

    def on_closed(self, event: FileSystemEvent) -> None:
        if not event.is_directory and _normalise(event.src_path) == self._owner.target:
            self._owner._fire_if_pending(event)

    def on_deleted(self, event: FileSystemEvent) -> None:
        if not event.is_directory and _normalise(event.src_path) == self._owner.backup:
            self._owner._fire_if_pending(event)


class OneShotWatch:
    """Report the next save of ``target`` to ``callback``, then go quiet."""

    def __init__(
        self,
        target: Path | str,
        callback: WatchCallback,
        *,
        observer_factory: Callable[[], Any] = Observer,
    ) -> None:
        self.target = _normalise(os.fspath(target))
        self.directory = os.path.dirname(self.target)
        self.backup: str | None = None
        self._callback = callback
        self._observer = observer_factory()
        self._handler = _ReplaceHandler(self)
        self._watch: Any = None
        self._armed = False
        self._started = False
        self._lock = threading.Lock()

    @property
    def armed(self) -> bool:
        with self._lock:
            return self._armed

    @property
    def pending(self) -> bool:
        """Whether the target was moved aside and its replacement is awaited."""
        with self._lock:
            return self._armed and self.backup is not None

    def arm(self) -> None:
        """Register a fresh single-use interest in the target."""
        # The observer dispatches under its own lock, so it is never taken
        # while holding ``self._lock``.
        if self._watch is not None:
            self._observer.unschedule(self._watch)
            self._watch = None
        with self._lock:
            self._armed = True
            self.backup = None
        self._watch = self._observer.schedule(self._handler, self.directory, recursive=False)
        if not self._started:
            self._observer.start()
            self._started = True
        logger.debug("Watching %s for replacement", self.target)

    def _moved_aside(self, backup: str) -> None:
        with self._lock:
            if not self._armed:
                return
            self.backup = backup
        logger.debug("%s moved aside to %s; waiting for the new file", self.target, backup)

    def _fire_if_pending(self, event: FileSystemEvent) -> None:
        with self._lock:
            if self.backup is None:
                return
        self._fire(event)

    def _fire(self, event: FileSystemEvent) -> None:
        with self._lock:
            if not self._armed:
                return
            self._armed = False
            self.backup = None
        logger.debug("Detected replacement of %s", self.target)
        self._callback(event)

    def close(self) -> None:
        """Stop observing and release the observer thread."""
        with self._lock:
            self._armed = False
            self.backup = None
        if not self._started:
            return
        self._observer.stop()
        self._observer.join()
        self._started = False


__all__ = ["OneShotWatch", "WatchCallback"]
