[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mydaily"
version = "0.1.0"
description = "A personal weekly planner with user accounts, event reminders and a Chinese lunar calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["calendar", "planner", "schedule", "lunar", "reminders", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mydaily = "mydaily.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mydaily"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
