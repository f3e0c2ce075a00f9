[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toybox"
version = "0.1.0"
description = "Small games, physics simulations and tools: pong, breakout, a night-watch game, pendulums, springs, orbits, a grep and a thread pool"
requires-python = ">=3.10"
keywords = [
    "games",
    "pygame",
    "simulation",
    "physics",
    "pendulum",
    "pong",
    "breakout",
    "grep",
    "thread pool",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Text Processing :: Filters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
toybox-grep = "toybox.grep:main"
toybox-orbits = "toybox.orbit_sim:main"
toybox-pendulum = "toybox.one_pendulum:main"
toybox-double-pendulum = "toybox.double_pendulum:main"
toybox-springs = "toybox.spring_sim:main"
toybox-pong = "toybox.pong.game:main"
toybox-breakout = "toybox.breakout.game:main"
toybox-fnaf = "toybox.fnaf.game:main"

[tool.hatch.build.targets.wheel]
packages = ["toybox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
