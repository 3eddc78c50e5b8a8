"""tusk: a small per-account task tracker for the command line."""

__version__ = "0.1.0"
