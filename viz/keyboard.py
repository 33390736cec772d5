# viz/keyboard.py
from __future__ import annotations
from collections import deque
from contextlib import contextmanager
from typing import Deque, List, Optional
import os, queue, select, sys, threading
from readchar import key
from core.interfaces import KeySource

ARROWS = (key.UP, key.DOWN, key.LEFT, key.RIGHT)

class InputReaderError(RuntimeError):
    """The input thread died; raised from the game loop."""

def split_keys(text: str) -> List[str]:
    """Arrow escape sequences stay whole; every other character is its own key."""
    keys = []
    i = 0
    while i < len(text):
        for k in ARROWS:
            if text.startswith(k, i):
                keys.append(k)
                i += len(k)
                break
        else:
            keys.append(text[i])
            i += 1
    return keys

class TerminalKeySource(KeySource):
    """Reads the bytes select() reported straight from the descriptor.

    The stream must already be unbuffered (see cbreak()); one read may
    carry several keys, which are handed out one per read() call.
    """
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin
        self._pending: Deque[str] = deque()

    def poll(self, timeout: float) -> bool:
        if self._pending:
            return True
        ready, _, _ = select.select([self.stream], [], [], timeout)
        return bool(ready)

    def read(self) -> Optional[str]:
        if not self._pending:
            data = os.read(self.stream.fileno(), 32)
            if not data:
                raise EOFError("terminal input closed")
            self._pending.extend(split_keys(data.decode("utf-8", errors="replace")))
        return self._pending.popleft() if self._pending else None

@contextmanager
def cbreak(stream=None):
    """Unbuffered, non-echoing stdin for the duration of the block."""
    stream = stream if stream is not None else sys.stdin
    if not stream.isatty():
        yield
        return
    import termios, tty
    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


class InputReader:
    """Forwards key presses from a KeySource into a channel on a daemon thread.

    The thread blocks at most poll_sec at a time, so close() takes effect
    within one poll interval.
    """
    def __init__(self, source: KeySource, channel: Optional[queue.Queue] = None, poll_sec: float = 0.5):
        self._source = source
        self.channel: queue.Queue[str] = channel if channel is not None else queue.Queue()
        self._poll_sec = poll_sec
        self._t: Optional[threading.Thread] = None
        self._stop = threading.Event()
        self._error: Optional[BaseException] = None
        self._started = False

    def start(self) -> None:
        if self._started: return
        self._stop.clear()
        self._t = threading.Thread(target=self._run, name="InputReader", daemon=True)
        self._t.start()
        self._started = True

    def _run(self) -> None:
        try:
            while not self._stop.is_set():
                if not self._source.poll(self._poll_sec):
                    continue
                k = self._source.read()
                if isinstance(k, str):
                    self.channel.put(k)
        except Exception as e:
            self._error = e

    @property
    def alive(self) -> bool:
        return self._t is not None and self._t.is_alive()

    def raise_if_failed(self) -> None:
        if self._error is not None:
            raise InputReaderError("input reader stopped") from self._error

    def close(self, timeout: float = 1.0) -> None:
        if not self._started: return
        self._stop.set()
        if self._t is not None:
            self._t.join(timeout=timeout)
        self._started = False
