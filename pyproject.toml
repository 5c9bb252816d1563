[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trivia-tui"
version = "0.1.0"
description = "A terminal trivia quiz game with multiple-choice questions from the Open Trivia Database"
requires-python = ">=3.10"
keywords = ["trivia", "quiz", "terminal", "tui", "game"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "requests>=2.28",
    "blessed>=1.20",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
trivia-tui = "trivia_tui.app:main"

[tool.hatch.build.targets.wheel]
packages = ["trivia_tui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
