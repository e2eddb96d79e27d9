[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spycity"
version = "0.2.0"
description = "A small city simulation of spies, officers and citizens, with a terminal monitor and design-pattern examples"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "spies", "city", "curses", "design-patterns"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spycity-simulation = "spycity.simulation:main"
spycity-timer = "spycity.timer:main"
spycity-monitor = "spycity.monitor_app:main"
spycity-facade-demo = "spycity.patterns.facade:main"
spycity-factory-demo = "spycity.patterns.factory:main"
spycity-observer-demo = "spycity.patterns.observer:main"
spycity-state-demo = "spycity.patterns.state:main"

[tool.hatch.build.targets.wheel]
packages = ["spycity"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
