"""Astronaut Schedule Organizer: a conflict-free daily task planner for the console."""

__version__ = "0.1.0"
