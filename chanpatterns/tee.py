"""Tee: copy every value of one stream onto several outputs."""

from __future__ import annotations

import argparse
import random
import threading
import time
from typing import Optional

from chanpatterns.generators import Channel, ChannelClosed, generator


def tee(done: Optional[threading.Event], input_stream: Channel, num_out_chans: int) -> list[Channel]:
    """Send each value of ``input_stream`` to every one of ``num_out_chans`` outputs."""
    if num_out_chans < 0:
        raise ValueError("number of output channels cannot be negative")
    outputs = [Channel() for _ in range(num_out_chans)]

    def run() -> None:
        try:
            while True:
                try:
                    value = input_stream.recv(done)
                except ChannelClosed:
                    return
                for channel in outputs:
                    if not channel.send(value, done):
                        return
        finally:
            for channel in outputs:
                channel.close()

    threading.Thread(target=run, daemon=True).start()
    return outputs


def _print_received(name: str, channel: Channel) -> None:
    for value in channel:
        print(f"[{name}] Received: {value}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="tee", description="Copy transactions to several consumers.")
    parser.add_argument("--duration", type=float, default=2.0)
    parser.add_argument("--max", type=int, default=100, dest="max_value")
    args = parser.parse_args(argv)

    done = threading.Event()
    transactions = generator(done, lambda: random.randrange(args.max_value))
    names = ("Analytics", "Fraud", "Finance")
    outputs = tee(done, transactions, len(names))
    receivers = [
        threading.Thread(target=_print_received, args=(name, channel))
        for name, channel in zip(names, outputs)
    ]
    for thread in receivers:
        thread.start()
    time.sleep(args.duration)
    done.set()
    for thread in receivers:
        thread.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())