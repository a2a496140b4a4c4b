import threading
import time

from chanpatterns.done_channel import do_work, main


def test_do_work_with_done_set_does_nothing():
    done = threading.Event()
    done.set()
    lines = []
    assert do_work(done, 1, lines.append) == 0
    assert lines == []


def test_do_work_stops_when_done_set():
    done = threading.Event()
    lines = []
    result = []
    thread = threading.Thread(target=lambda: result.append(do_work(done, 7, lines.append)))
    thread.start()
    time.sleep(0.05)
    done.set()
    thread.join(5)
    assert result and result[0] == len(lines)
    assert lines[0] == "Worker no. 7 Do some work... 0"
    assert all(line.endswith(f" {index}") for index, line in enumerate(lines))