[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tm1637hal"
version = "0.5.2"
description = "A platform-agnostic driver for the TM1637 7-segment LED display controller, with blocking and asyncio modes."
requires-python = ">=3.10"
dependencies = []
keywords = ["tm1637", "7-segment", "led", "display", "driver", "gpio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["tm1637hal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
