"""Unbuffered channels plus the generator and take stages built on them."""

from __future__ import annotations

import argparse
import random
import threading
from collections import deque
from typing import Any, Callable, Iterator, Optional

_POLL = 0.01


class ChannelClosed(Exception):
    """Raised when a channel is closed, or a wait is cancelled by its done event."""


class _Slot:
    __slots__ = ("value", "filled")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.filled = False


class Channel:
    """Unbuffered channel: every send waits until a receiver takes the value."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._senders: deque[_Slot] = deque()
        self._receivers: deque[_Slot] = deque()
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def _wait(self, slot: _Slot, queue: deque[_Slot], done: Optional[threading.Event]) -> bool:
        """Wait until ``slot`` is filled; False if cancelled by ``done``."""
        queue.append(slot)
        self._cond.notify_all()
        while not slot.filled:
            if self._closed or (done is not None and done.is_set()):
                queue.remove(slot)
                if self._closed:
                    raise ChannelClosed("channel closed")
                return False
            self._cond.wait(_POLL)
        return True

    def send(self, value: Any, done: Optional[threading.Event] = None) -> bool:
        """Deliver ``value``; False if ``done`` was set first, ChannelClosed if closed."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("send on closed channel")
            if done is not None and done.is_set():
                return False
            if self.try_send(value):
                return True
            return self._wait(_Slot(value), self._senders, done)

    def try_send(self, value: Any) -> bool:
        """Deliver ``value`` only if a receiver is already waiting."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("send on closed channel")
            if not self._receivers:
                return False
            slot = self._receivers.popleft()
            slot.value, slot.filled = value, True
            self._cond.notify_all()
            return True

    def recv(self, done: Optional[threading.Event] = None) -> Any:
        """Take the next value; ChannelClosed when closed or ``done`` is set."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("receive on closed channel")
            if done is not None and done.is_set():
                raise ChannelClosed("receive cancelled")
            if self._senders:
                slot = self._senders.popleft()
                slot.filled = True
                self._cond.notify_all()
                return slot.value
            slot = _Slot()
            if not self._wait(slot, self._receivers, done):
                raise ChannelClosed("receive cancelled")
            return slot.value

    def close(self) -> None:
        """Close the channel; closing twice raises ChannelClosed."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[Any]:
        while True:
            try:
                yield self.recv()
            except ChannelClosed:
                return


def _spawn(out: Channel, body: Callable[[], None]) -> Channel:
    def run() -> None:
        try:
            body()
        finally:
            out.close()

    threading.Thread(target=run, daemon=True).start()
    return out


def generator(done: Optional[threading.Event], fn: Callable[[], Any]) -> Channel:
    """Send ``fn()`` results forever until ``done`` is set."""
    out = Channel()

    def body() -> None:
        while out.send(fn(), done):
            pass

    return _spawn(out, body)


def take(done: Optional[threading.Event], stream: Channel, n: int) -> Channel:
    """Relay at most ``n`` values from ``stream``."""
    taken = Channel()

    def body() -> None:
        for _ in range(n):
            try:
                value = stream.recv(done)
            except ChannelClosed:
                return
            if not taken.send(value, done):
                return

    return _spawn(taken, body)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="generators")
    parser.add_argument("--count", type=int, default=20)
    parser.add_argument("--max", type=int, default=100000, dest="max_value")
    args = parser.parse_args(argv)

    done = threading.Event()
    for value in take(done, generator(done, lambda: random.randrange(args.max_value)), args.count):
        print(value)
    done.set()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())