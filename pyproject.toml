[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chanpatterns"
version = "0.1.0"
description = "Thread-based channel concurrency patterns: generators, pipelines, or-done, fan-in, fan-out, tee and confinement"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "channels",
    "pipeline",
    "fan-in",
    "fan-out",
    "tee",
    "threading",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chanpatterns-generators = "chanpatterns.generators:main"
chanpatterns-confinement = "chanpatterns.confinement:main"
chanpatterns-done-channel = "chanpatterns.done_channel:main"
chanpatterns-pipeline = "chanpatterns.pipeline:main"
chanpatterns-or-done = "chanpatterns.or_done:main"
chanpatterns-fan-in = "chanpatterns.fan_in:main"
chanpatterns-fan-out = "chanpatterns.fan_out:main"
chanpatterns-tee = "chanpatterns.tee:main"

[tool.hatch.build.targets.wheel]
packages = ["chanpatterns"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
