[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkwork"
version = "0.1.0"
description = "Singly linked lists with classic pointer algorithms, plus a longest unique substring helper"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "algorithms", "two pointers", "sliding window", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkwork-substring = "linkwork.substring:main"

[tool.hatch.build.targets.wheel]
packages = ["linkwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
