[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ao3feeds"
version = "1.0.0"
description = "Follow Archive of Our Own tag feeds from the terminal and download works as PDF files"
requires-python = ">=3.10"
keywords = ["ao3", "atom", "feeds", "rss", "pdf", "kindle", "reader"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "lxml>=4.9",
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
ao3feeds = "ao3feeds.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ao3feeds"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
