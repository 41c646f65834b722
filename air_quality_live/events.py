"""
Tick and key-press events for the terminal loop.

A tick thread posts a Tick every ``tick_rate`` seconds and an optional
reader thread posts one Input per character read from a text stream. The
consumer blocks on ``next()`` and sees events in arrival order.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import queue
import threading
from typing import Iterator, Optional, TextIO, Union


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Input:
    key: str


Event = Union[Tick, Input]


class Events:
    def __init__(self, tick_rate: float = 1.0, input_stream: Optional[TextIO] = None) -> None:
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate}")
        self.tick_rate = float(tick_rate)
        self._queue: "queue.Queue[Event]" = queue.Queue()
        self._stop = threading.Event()

        self._tick_thread = threading.Thread(target=self._tick_loop, name="events-tick", daemon=True)
        self._tick_thread.start()

        self._input_thread: Optional[threading.Thread] = None
        if input_stream is not None:
            self._input_thread = threading.Thread(
                target=self._input_loop, args=(input_stream,), name="events-input", daemon=True
            )
            self._input_thread.start()

    def _tick_loop(self) -> None:
        # Event.wait doubles as an interruptible sleep
        while not self._stop.wait(self.tick_rate):
            self._queue.put(Tick())

    def _input_loop(self, stream: TextIO) -> None:
        while not self._stop.is_set():
            ch = stream.read(1)
            if not ch:
                logger.debug("Input stream closed")
                return
            if ch in "\r\n":
                continue
            self._queue.put(Input(ch))

    def next(self, timeout: Optional[float] = None) -> Event:
        """Block until the next event. Raises queue.Empty on timeout."""
        return self._queue.get(timeout=timeout)

    def __iter__(self) -> Iterator[Event]:
        while True:
            yield self.next()

    def close(self) -> None:
        self._stop.set()

    def __enter__(self) -> "Events":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
