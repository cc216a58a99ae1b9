[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labsuite"
version = "0.1.0"
description = "A word frequency counter, a ring buffer, Conway's Game of Life, a WAV sound processor and a typed CSV reader"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "word-frequency",
    "circular-buffer",
    "ring-buffer",
    "game-of-life",
    "cellular-automaton",
    "wav",
    "audio",
    "csv",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Sound/Audio :: Editors",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labsuite-wordfreq = "labsuite.wordfreq:main"
labsuite-life = "labsuite.life.game:main"
labsuite-sound = "labsuite.sound.processor:main"
labsuite-csv = "labsuite.csvparser:main"

[tool.hatch.build.targets.wheel]
packages = ["labsuite"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
