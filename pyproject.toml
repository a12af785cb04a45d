[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketgb"
version = "0.1.0"
description = "Building blocks for a Game Boy emulator: APU frame sequencer, high pass filter, ring buffer, memory bus, audio resampling, settings and serial log"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "dmg", "audio", "resampling", "frame-sequencer"]
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
    "Topic :: System :: Emulators",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketgb"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
