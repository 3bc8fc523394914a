[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lsrouter"
version = "0.1.0"
description = "A small link-state router daemon that discovers neighbours with UDP HELLO broadcasts"
requires-python = ">=3.10"
dependencies = []
keywords = ["routing", "link-state", "udp", "hello", "neighbor-discovery"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lsrouter = "lsrouter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lsrouter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
