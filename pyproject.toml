[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "makedoc"
version = "1.0.0"
description = "Format plain text documents with simple bracket tags into fixed-width text output"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "formatting", "documentation", "plain-text", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
makedoc = "makedoc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["makedoc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
