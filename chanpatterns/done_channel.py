"""Workers that spin until their own done event is set."""

from __future__ import annotations

import argparse
import threading
import time
from typing import Callable, Optional


def do_work(done: threading.Event, worker_id: int, out: Callable[[str], object] = print) -> int:
    """Report work until ``done`` is set; return how many rounds were done."""
    rounds = 0
    while not done.is_set():
        out(f"Worker no. {worker_id} Do some work... {rounds}")
        rounds += 1
    return rounds


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="done-channel", description="Stop workers one by one.")
    parser.add_argument("--interval", type=float, default=1.0)
    args = parser.parse_args(argv)

    events = [threading.Event() for _ in range(3)]
    threads = [
        threading.Thread(target=do_work, args=(event, worker_id))
        for worker_id, event in enumerate(events, start=1)
    ]
    for thread in threads:
        thread.start()
    for event in events:
        time.sleep(args.interval)
        event.set()
    for thread in threads:
        thread.join()
    print("Hello")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())