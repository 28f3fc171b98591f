# rusuku/rusuku_io/terminal.py
# Terminal mode save/restore & bounded-wait key polling for the dashboard loop

from __future__ import annotations

import os
import queue
import sys
import threading
from typing import Any, Callable, TextIO

from readchar import readkey

from ..core.exceptions import TerminalError
from ..core.debug import debug_print

KeyReader = Callable[[], str]


# * Saves tty attributes on enter & restores them on exit, however the loop ended
class TerminalSession:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._saved: list[Any] | None = None

    @property
    def active(self) -> bool:
        return self._saved is not None

    def __enter__(self) -> "TerminalSession":
        # windows consoles & redirected stdin have no termios state to protect
        if os.name != "posix" or not self._stream.isatty():
            return self

        import termios

        try:
            self._saved = termios.tcgetattr(self._stream.fileno())
        except termios.error as e:
            raise TerminalError(f"Unable to read terminal attributes: {e}") from e
        debug_print("Saved terminal attributes", "TERMINAL")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self._saved is None:
            return

        import termios

        saved, self._saved = self._saved, None
        try:
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, saved)
        except termios.error as e:
            raise TerminalError(f"Unable to restore terminal attributes: {e}") from e
        debug_print("Restored terminal attributes", "TERMINAL")


# * Reads keys on a background thread; the dashboard loop drains them w/ a bounded wait
# * Only the loop thread ever touches dashboard state; this thread just feeds the queue
class KeyPoller:
    def __init__(self, read_key: KeyReader = readkey) -> None:
        self._read_key = read_key
        self._queue: queue.Queue[tuple[str, Any]] = queue.Queue()
        self._worker: threading.Thread | None = None
        self._stopped = threading.Event()

    def start(self) -> None:
        if self._worker is not None:
            return

        def worker() -> None:
            while not self._stopped.is_set():
                try:
                    k = self._read_key()
                except (KeyboardInterrupt, Exception) as exc:
                    self._queue.put(("error", exc))
                    return
                self._queue.put(("key", k))

        # readkey() can't be interrupted, so the thread must not block interpreter exit
        self._worker = threading.Thread(target=worker, name="rusuku-keys", daemon=True)
        self._worker.start()

    def stop(self) -> None:
        self._stopped.set()

    # wait up to `timeout` seconds for one key; None when nothing arrived
    def poll(self, timeout: float) -> str | None:
        self.start()
        try:
            kind, payload = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

        if kind == "error":
            if isinstance(payload, KeyboardInterrupt):
                raise KeyboardInterrupt
            raise TerminalError(f"Key input failed: {payload}") from payload
        return payload

    def __enter__(self) -> "KeyPoller":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
