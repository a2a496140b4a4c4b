"""Doubling numbers concurrently, with a shared lock or with confined result slots."""

from __future__ import annotations

import argparse
import threading
import time
from typing import Callable, Optional, Sequence


def double_int(num: int, delay: float = 1.0) -> int:
    """Return ``num * 2`` after sleeping ``delay`` seconds."""
    time.sleep(delay)
    return num * 2


def _run_each(nums: Sequence[int], task: Callable[[int, int], None]) -> None:
    threads = [threading.Thread(target=task, args=pair) for pair in enumerate(nums)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def double_with_lock(nums: Sequence[int], delay: float = 1.0) -> list[int]:
    """Double every number concurrently, appending under a lock (order not kept)."""
    results: list[int] = []
    lock = threading.Lock()

    def update(_index: int, num: int) -> None:
        processed = double_int(num, delay)
        with lock:
            results.append(processed)

    _run_each(nums, update)
    return results


def double_confined(nums: Sequence[int], delay: float = 1.0) -> list[int]:
    """Double every number concurrently; each thread owns one result slot."""
    results = [0] * len(nums)

    def update(index: int, num: int) -> None:
        results[index] = double_int(num, delay)

    _run_each(nums, update)
    return results


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="confinement")
    parser.add_argument("nums", nargs="*", type=int, default=[1, 2, 3, 4, 5])
    parser.add_argument("--delay", type=float, default=1.0)
    parser.add_argument("--lock", action="store_true")
    args = parser.parse_args(argv)

    start = time.monotonic()
    double = double_with_lock if args.lock else double_confined
    results = double(args.nums, args.delay)
    print(f"Time taken :=  {time.monotonic() - start:.6f}s")
    print("Doubled numbers: [" + " ".join(map(str, results)) + "]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())