import time

from chanpatterns.confinement import double_confined, double_int, double_with_lock, main


def test_double_int_doubles():
    assert double_int(21, delay=0) == 42


def test_double_confined_keeps_order():
    assert double_confined([1, 2, 3, 4, 5], delay=0) == [2, 4, 6, 8, 10]


def test_double_with_lock_has_same_values():
    nums = [7, 3, 9, 1]
    assert sorted(double_with_lock(nums, delay=0)) == sorted(double_confined(nums, delay=0))


def test_empty_input():
    assert double_confined([], delay=0) == []
    assert double_with_lock([], delay=0) == []


def test_confined_runs_concurrently():
    start = time.monotonic()
    result = double_confined(list(range(5)), delay=0.2)
    elapsed = time.monotonic() - start
    assert len(result) == 5
    assert elapsed < 0.9


def test_main_prints_doubled_numbers(capsys):
    assert main(["--delay", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Time taken :=")
    assert lines[1] == "Doubled numbers: [2 4 6 8 10]"


def test_main_with_lock_prints_all_values(capsys):
    assert main(["4", "5", "--lock", "--delay", "0"]) == 0
    last = capsys.readouterr().out.splitlines()[1]
    values = sorted(int(part) for part in last.split("[")[1].rstrip("]").split())
    assert values == double_confined([4, 5], delay=0)