[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "joshu"
version = "0.1.0"
description = "Building blocks of a terminal file manager: file operations, sorting, key parsing and label layout"
requires-python = ">=3.10"
dependencies = [
    "regex",
    "wcwidth",
]
keywords = ["file-manager", "terminal", "tui", "sorting", "file-operations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["joshu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
