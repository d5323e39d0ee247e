"""
kimaiPy: A command line client for the Kimai 2 time tracker.

- Starts, stops and restarts measurements (timesheet entries)
- Lists active and recent measurements, projects and activities
- Argos/BitBar output for status-bar widgets
- Interactive menu with fuzzy search (via `python -m kimaipy` or `kimaipy` without arguments)
"""

__version__ = "0.1.0"
