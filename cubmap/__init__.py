"""Reading and validation of .cub scene files, with a command-line checker."""

__version__ = "0.1.0"