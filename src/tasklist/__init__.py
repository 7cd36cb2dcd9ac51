"""Interactive, memory-only project/task manager."""

__version__ = "0.1.0"
