"""Daily task planner building blocks that keep their data in plain text files."""

__version__ = "0.1.0"