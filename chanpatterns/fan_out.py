"""Fan-out: spread one stream over several outputs or workers."""

from __future__ import annotations

import argparse
import os
import random
import threading
import time
from typing import Any, Callable, Optional

from chanpatterns.generators import Channel, ChannelClosed, generator

_RETRY_INTERVAL = 0.001


def _cancelled(done: Optional[threading.Event]) -> bool:
    return done is not None and done.is_set()


def _make_outputs(num_out_chans: int) -> list[Channel]:
    if num_out_chans < 1:
        raise ValueError("fan-out needs at least one output channel")
    return [Channel() for _ in range(num_out_chans)]


def opportunistic_fan_out(
    done: Optional[threading.Event], input_stream: Channel, num_out_chans: int
) -> list[Channel]:
    """Give each value to the first output whose receiver is ready."""
    outputs = _make_outputs(num_out_chans)

    def run() -> None:
        try:
            while True:
                try:
                    value = input_stream.recv(done)
                except ChannelClosed:
                    return
                while True:
                    if _cancelled(done):
                        return
                    if any(channel.try_send(value) for channel in outputs):
                        break
                    time.sleep(_RETRY_INTERVAL)
        finally:
            for channel in outputs:
                channel.close()

    threading.Thread(target=run, daemon=True).start()
    return outputs


def round_robin_fan_out(
    done: Optional[threading.Event], input_stream: Channel, num_out_chans: int
) -> list[Channel]:
    """Give values to the outputs in turn."""
    outputs = _make_outputs(num_out_chans)

    def run() -> None:
        try:
            index = 0
            while True:
                try:
                    value = input_stream.recv(done)
                except ChannelClosed:
                    return
                if not outputs[index].send(value, done):
                    return
                index = (index + 1) % num_out_chans
        finally:
            for channel in outputs:
                channel.close()

    threading.Thread(target=run, daemon=True).start()
    return outputs


def process_job(
    worker_id: int, job: Any, out: Callable[[str], object] = print, delay: float = 0.5
) -> None:
    """Pretend to work on ``job`` for ``delay`` seconds, then report it."""
    time.sleep(delay)
    out(f"[Worker {worker_id}] job: {job}")


def worker(
    worker_id: int,
    done: Optional[threading.Event],
    jobs: Channel,
    handler: Callable[[int, Any], object] = process_job,
) -> int:
    """Hand jobs to ``handler`` until ``jobs`` closes or ``done`` is set; return the count."""
    handled = 0
    while True:
        try:
            job = jobs.recv(done)
        except ChannelClosed:
            return handled
        handler(worker_id, job)
        handled += 1


def _print_received(name: str, channel: Channel) -> None:
    for value in channel:
        print(f"[{name}] Received: {value}")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="fan-out", description="Spread random numbers over workers.")
    parser.add_argument("--mode", choices=("random", "round-robin", "opportunistic"), default="random")
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--duration", type=float, default=None)
    parser.add_argument("--delay", type=float, default=0.5)
    parser.add_argument("--max", type=int, default=None, dest="max_value")
    args = parser.parse_args(argv)

    done = threading.Event()
    if args.mode == "random":
        max_value = args.max_value or 1000000000
        workers = args.workers or os.cpu_count() or 1
        duration = 5.0 if args.duration is None else args.duration
        jobs = generator(done, lambda: random.randrange(max_value))
        handler = lambda worker_id, job: process_job(worker_id, job, print, args.delay)  # noqa: E731
        threads = [
            threading.Thread(target=worker, args=(worker_id, done, jobs, handler))
            for worker_id in range(1, workers + 1)
        ]
        for thread in threads:
            thread.start()
        time.sleep(duration)
        done.set()
        for thread in threads:
            thread.join()
        print("All workers done.")
        return 0

    max_value = args.max_value or 100000
    workers = args.workers or 3
    if args.mode == "round-robin":
        fan_out = round_robin_fan_out
        duration = 2.0 if args.duration is None else args.duration
    else:
        fan_out = opportunistic_fan_out
        duration = 1.0 if args.duration is None else args.duration
    stream = generator(done, lambda: random.randrange(max_value))
    outputs = fan_out(done, stream, workers)
    receivers = [
        threading.Thread(target=_print_received, args=(f"worker{number}", channel))
        for number, channel in enumerate(outputs, start=1)
    ]
    for thread in receivers:
        thread.start()
    time.sleep(duration)
    done.set()
    for thread in receivers:
        thread.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())