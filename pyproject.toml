[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ircserv"
version = "0.1.0"
description = "A small IRC server with client registration, channels and a handful of basic commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["irc", "chat", "server", "rfc1459"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: No Input/Output (Daemon)",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat :: Internet Relay Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ircserv = "ircserv.server:main"

[tool.hatch.build.targets.wheel]
packages = ["ircserv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
