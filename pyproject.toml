[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daytrack"
version = "0.1.0"
description = "Daily task planner building blocks that keep tasks, visited days and the login record in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "planner", "schedule", "calendar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["daytrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
