"""Thread-based channel concurrency patterns: generators, confinement, done events,
pipelines, or-done, fan-in, fan-out and tee."""

__version__ = "0.1.0"

__all__ = [
    "confinement",
    "done_channel",
    "fan_in",
    "fan_out",
    "generators",
    "or_done",
    "pipeline",
    "tee",
]