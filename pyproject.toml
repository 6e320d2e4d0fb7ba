[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termgit"
version = "0.1.0"
description = "Building blocks of a terminal user interface for git: key bindings, file trees with folding and navigation, commit log batches and layout geometry."
requires-python = ">=3.10"
dependencies = []
keywords = ["git", "tui", "terminal", "keybindings", "filetree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termgit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
