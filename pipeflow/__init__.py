"""Run chains of commands between files, as a shell pipeline does, plus small string, memory and I/O helpers."""

__version__ = "0.1.0"