[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "growbot"
version = "0.1.0"
description = "Game rules, configuration and button payloads for a group-chat growing game bot"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "bot", "game", "leaderboard", "promo-codes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Communications :: Chat",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["growbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
