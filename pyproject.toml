[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "markedit"
version = "0.1.0"
description = "Building blocks of a markdown editor: snippets, themes, slide mapping, YAML front matter and HTML page templates"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "editor", "snippets", "themes", "reveal.js", "templates", "front matter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["markedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
