[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "statekit"
version = "0.1.0"
description = "Thread-safe finite state machines and a bit-register switchboard for binary conditions"
requires-python = ">=3.10"
dependencies = []
keywords = ["state machine", "fsm", "switchboard", "bitset", "concurrency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["statekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
