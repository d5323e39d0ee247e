"""Interactive terminal UI for kimaiPy."""
