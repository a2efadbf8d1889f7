[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retroracers"
version = "0.1.0"
description = "Two small arcade games, a stock-car racer and a desert runner, played from key scripts on simulated retro displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "racing", "runner", "glcd", "vga", "retro"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stock-car = "retroracers.car:main"
trex = "retroracers.dino:main"

[tool.hatch.build.targets.wheel]
packages = ["retroracers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
