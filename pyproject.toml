[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmacs"
version = "0.1.0"
description = "Core pieces of a small Emacs-like terminal text editor: buffers, cursor motion, modes, commands, buffer listing and key parsing"
requires-python = ">=3.10"
keywords = ["editor", "emacs", "text", "terminal", "buffer"]
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
    "Topic :: Text Editors",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gmacs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
