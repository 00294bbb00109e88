[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doclinkcheck"
version = "0.1.0"
description = "Analyze Markdown documents for broken links, orphaned pages and link statistics"
requires-python = ">=3.10"
keywords = ["markdown", "links", "documentation", "link-checker", "orphans"]
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
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "click>=8.0",
    "termcolor>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
doclinkcheck = "doclinkcheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["doclinkcheck"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
