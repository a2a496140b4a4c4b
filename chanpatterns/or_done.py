"""The or-done relay: read a stream until it closes or a done event is set."""

from __future__ import annotations

import argparse
import threading
from typing import Callable, Optional

from chanpatterns.generators import Channel, ChannelClosed


def numbered_values(out: Channel, count: int = 100) -> None:
    """Send "Value-1" through "Value-<count>" on ``out``, then close it."""
    try:
        for number in range(1, count + 1):
            out.send(f"Value-{number}")
    finally:
        out.close()


def or_done(done: Optional[threading.Event], stream: Channel) -> Channel:
    """Relay ``stream`` until it closes or ``done`` is set."""
    relay = Channel()

    def run() -> None:
        try:
            while True:
                try:
                    value = stream.recv(done)
                except ChannelClosed:
                    return
                if not relay.send(value, done):
                    return
        finally:
            relay.close()

    threading.Thread(target=run, daemon=True).start()
    return relay


def consume(
    done: Optional[threading.Event],
    stream: Channel,
    label: object,
    out: Callable[[str], object] = print,
) -> int:
    """Report every value read through ``or_done``; return how many were read."""
    count = 0
    for value in or_done(done, stream):
        out(f"{label}. Input coming is {value}")
        count += 1
    return count


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="or-done", description="Share one stream between three consumers.")
    parser.add_argument("--count", type=int, default=100)
    args = parser.parse_args(argv)

    stream = Channel()
    done = threading.Event()
    threading.Thread(target=numbered_values, args=(stream, args.count), daemon=True).start()
    consumers = [threading.Thread(target=consume, args=(done, stream, label)) for label in (1, 2, 3)]
    for thread in consumers:
        thread.start()
    for thread in consumers:
        thread.join()
    print("Hello")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())