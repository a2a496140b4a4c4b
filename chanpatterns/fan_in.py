"""Fan-in: several prime-finding stages merged back into one stream."""

from __future__ import annotations

import argparse
import math
import os
import random
import threading
import time
from typing import Optional

from chanpatterns.generators import Channel, ChannelClosed, generator, take


def is_prime(num: int) -> bool:
    """Return True when ``num`` is a prime number."""
    if num <= 1:
        return False
    return all(num % divisor for divisor in range(2, math.isqrt(num) + 1))


def primes_generator(done: Optional[threading.Event], input_stream: Channel) -> Channel:
    """Relay only the primes read from ``input_stream``."""
    primes = Channel()

    def run() -> None:
        try:
            while True:
                try:
                    num = input_stream.recv(done)
                except ChannelClosed:
                    return
                if is_prime(num) and not primes.send(num, done):
                    return
        finally:
            primes.close()

    threading.Thread(target=run, daemon=True).start()
    return primes


def fan_in(done: Optional[threading.Event], *args: Channel) -> Channel:
    """Merge every channel in ``args`` into one; it closes once all inputs end."""
    merged = Channel()

    def relay(stream: Channel) -> None:
        while True:
            try:
                value = stream.recv(done)
            except ChannelClosed:
                return
            if not merged.send(value, done):
                return

    relays = [threading.Thread(target=relay, args=(stream,), daemon=True) for stream in args]
    for thread in relays:
        thread.start()

    def close_when_finished() -> None:
        for thread in relays:
            thread.join()
        merged.close()

    threading.Thread(target=close_when_finished, daemon=True).start()
    return merged


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="fan-in", description="Find random primes with several workers.")
    parser.add_argument("--count", type=int, default=20)
    parser.add_argument("--max", type=int, default=1000000000, dest="max_value")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1)
    args = parser.parse_args(argv)

    done = threading.Event()
    start = time.monotonic()
    numbers = generator(done, lambda: random.randrange(args.max_value))
    prime_streams = [primes_generator(done, numbers) for _ in range(args.workers)]
    combined = fan_in(done, *prime_streams)
    for value in take(done, combined, args.count):
        print(value)
    print(f"{time.monotonic() - start:.6f}s")
    done.set()
    print("khatam sab")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())