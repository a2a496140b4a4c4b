# chanpatterns

Concurrency patterns built on threads and a small unbuffered, closable
`Channel` type. Cancellation is signalled with a `threading.Event` (called
`done` throughout): once it is set, every stage stops and closes its output.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The channel

`chanpatterns.generators.Channel` is unbuffered: a send waits until a
receiver takes the value.

- `send(value, done=None)` delivers the value and returns `True`, or returns
  `False` if `done` was set first. It raises `ChannelClosed` on a closed
  channel.
- `try_send(value)` delivers only if a receiver is already waiting, and
  returns whether it did.
- `recv(done=None)` returns the next value, and raises `ChannelClosed` when
  the channel is closed or `done` is set.
- `close()` closes the channel; closing it twice raises `ChannelClosed`.
- Iterating over a channel yields values until it is closed.

## Patterns

- **generators** – `generator(done, fn)` sends `fn()` results until `done`
  is set; `take(done, stream, n)` relays at most `n` values.
- **confinement** – `double_int(num, delay=1.0)` doubles a number after a
  sleep. `double_with_lock(nums, delay)` doubles every number in its own
  thread and appends under a lock, so the order is not kept;
  `double_confined(nums, delay)` gives each thread its own result slot and
  keeps the input order without a lock.
- **done_channel** – `do_work(done, worker_id, out=print)` reports work in a
  loop until `done` is set and returns how many rounds it ran.
- **pipeline** – `from_iterable(values)`, `square(stream)`,
  `add_ten(stream)` and `square_root(stream)` chain into `sqrt(x*x + 10)`;
  `count_up(limit=100)` sends `0` to `limit - 1`.
- **or_done** – `or_done(done, stream)` relays a stream until it closes or
  `done` is set. `consume(done, stream, label, out=print)` reports each value
  read through it and returns the count; `numbered_values(out, count=100)`
  sends `"Value-1"` to `"Value-<count>"` and closes the channel.
- **fan_in** – `is_prime(num)`, `primes_generator(done, input_stream)` which
  relays only primes, and `fan_in(done, *channels)` which merges channels into
  one that closes once all inputs have ended.
- **fan_out** – `round_robin_fan_out(done, input_stream, n)` hands values to
  the outputs in turn; `opportunistic_fan_out(done, input_stream, n)` hands
  each value to the first output whose receiver is ready. Both raise
  `ValueError` for fewer than one output. `worker(worker_id, done, jobs,
  handler=process_job)` passes jobs to a handler until the jobs channel closes
  or `done` is set, and returns how many it handled.
- **tee** – `tee(done, input_stream, n)` sends every value to each of `n`
  outputs; a negative `n` raises `ValueError`.

## Using it as a library

```python
from chanpatterns.pipeline import add_ten, from_iterable, square, square_root

for value in square_root(add_ten(square(from_iterable([1, 2, 3])))):
    print(value)
```

## Running the demonstrations

Each pattern has a command that runs a demonstration of it:

```
chanpatterns-generators      [--count N] [--max M]
chanpatterns-confinement     [NUMS ...] [--delay S] [--lock]
chanpatterns-done-channel    [--interval S]
chanpatterns-pipeline        [NUMS ...]
chanpatterns-or-done         [--count N]
chanpatterns-fan-in          [--count N] [--max M] [--workers W]
chanpatterns-fan-out         [--mode random|round-robin|opportunistic]
                             [--workers W] [--duration S] [--delay S] [--max M]
chanpatterns-tee             [--duration S] [--max M]
```

The package has no dependencies outside the standard library.