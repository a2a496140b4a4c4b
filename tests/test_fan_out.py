import itertools
import re
import threading

import pytest

from chanpatterns.fan_out import (
    main,
    opportunistic_fan_out,
    process_job,
    round_robin_fan_out,
    worker,
)
from chanpatterns.generators import generator
from chanpatterns.pipeline import from_iterable


def _collect(channels):
    results = [[] for _ in channels]
    threads = [
        threading.Thread(target=lambda ch=ch, res=res: res.extend(ch), daemon=True)
        for ch, res in zip(channels, results)
    ]
    for thread in threads:
        thread.start()
    return results, threads


def _join(threads):
    for thread in threads:
        thread.join(timeout=5)
    return [thread.is_alive() for thread in threads]


def test_round_robin_distributes_in_turn():
    outputs = round_robin_fan_out(None, from_iterable(range(9)), 3)
    results, threads = _collect(outputs)
    assert _join(threads) == [False, False, False]
    assert results == [list(range(i, 9, 3)) for i in range(3)]


def test_round_robin_requires_an_output():
    with pytest.raises(ValueError):
        round_robin_fan_out(None, from_iterable([]), 0)


def test_round_robin_stops_on_done():
    done = threading.Event()
    counter = itertools.count()
    outputs = round_robin_fan_out(done, generator(done, lambda: next(counter)), 2)
    results, threads = _collect(outputs)
    first = outputs  # keep references alive
    threading.Timer(0.1, done.set).start()
    assert _join(threads) == [False, False]
    assert len(first) == 2
    assert set(results[0]).isdisjoint(results[1])


def test_opportunistic_delivers_each_value_once():
    values = list(range(30))
    outputs = opportunistic_fan_out(None, from_iterable(values), 3)
    results, threads = _collect(outputs)
    assert _join(threads) == [False, False, False]
    merged = [v for res in results for v in res]
    assert sorted(merged) == values
    for res in results:
        assert res == sorted(res)


def test_opportunistic_requires_an_output():
    with pytest.raises(ValueError):
        opportunistic_fan_out(None, from_iterable([]), 0)


def test_opportunistic_stops_on_done():
    done = threading.Event()
    counter = itertools.count()
    outputs = opportunistic_fan_out(done, generator(done, lambda: next(counter)), 3)
    results, threads = _collect(outputs)
    threading.Timer(0.1, done.set).start()
    assert _join(threads) == [False, False, False]
    merged = [v for res in results for v in res]
    assert len(merged) == len(set(merged))


def test_process_job_reports():
    lines = []
    process_job(2, 7, lines.append, 0)
    assert lines == ["[Worker 2] job: 7"]


def test_worker_handles_all_jobs():
    handled = []
    count = worker(5, None, from_iterable([1, 2, 3]), lambda wid, job: handled.append((wid, job)))
    assert count == 3
    assert handled == [(5, 1), (5, 2), (5, 3)]


def test_worker_returns_when_done_is_set():
    done = threading.Event()
    done.set()
    handled = []
    assert worker(1, done, from_iterable([1, 2]), lambda wid, job: handled.append(job)) == 0
    assert handled == []


def test_main_random_mode(capsys):
    args = ["--mode", "random", "--workers", "2", "--duration", "0.2", "--delay", "0.05"]
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "All workers done."
    assert all(re.fullmatch(r"\[Worker [12]\] job: \d+", line) for line in lines[:-1])


def test_main_round_robin_mode(capsys):
    assert main(["--mode", "round-robin", "--duration", "0.1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines
    assert all(re.fullmatch(r"\[worker[123]\] Received: \d+", line) for line in lines)