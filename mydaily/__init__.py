"""Personal weekly planner: accounts, events, reminders and a Chinese lunar calendar."""

__version__ = "0.1.0"

__all__ = ["__version__"]