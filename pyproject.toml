[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vimrest"
version = "0.3.8"
description = "Vim-style field editing, motions, search, scrolling and response viewing for an HTTP client"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "rest", "vim", "editor", "motions"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vimrest"]

[tool.pytest.ini_options]
addopts = "-ra"
