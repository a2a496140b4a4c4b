"""A pipeline of stages computing sqrt(x*x + 10) over a stream of numbers."""

from __future__ import annotations

import argparse
import math
import threading
from typing import Any, Callable, Iterable, Optional

from chanpatterns.generators import Channel


def _stage(stream: Channel, fn: Callable[[Any], Any]) -> Channel:
    out = Channel()

    def run() -> None:
        try:
            for value in stream:
                out.send(fn(value))
        finally:
            out.close()

    threading.Thread(target=run, daemon=True).start()
    return out


def from_iterable(values: Iterable[Any]) -> Channel:
    """Send each value in turn, then close."""
    out = Channel()

    def run() -> None:
        try:
            for value in values:
                out.send(value)
        finally:
            out.close()

    threading.Thread(target=run, daemon=True).start()
    return out


def square(stream: Channel) -> Channel:
    """Square every value."""
    return _stage(stream, lambda value: value * value)


def add_ten(stream: Channel) -> Channel:
    """Add ten to every value."""
    return _stage(stream, lambda value: value + 10)


def square_root(stream: Channel) -> Channel:
    """Take the square root of every value."""
    return _stage(stream, lambda value: math.sqrt(value))


def count_up(limit: int = 100) -> Channel:
    """Send 0 up to ``limit - 1``."""
    return from_iterable(range(limit))


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="pipeline", description="Print sqrt(x*x + 10) for each number.")
    parser.add_argument("nums", nargs="*", type=int, default=list(range(1, 10)))
    args = parser.parse_args(argv)

    for value in square_root(add_ten(square(from_iterable(args.nums)))):
        print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())