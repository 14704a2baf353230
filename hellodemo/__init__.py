"""Print a greeting, from the command line or from code."""

__version__ = "0.0.1"
__all__ = ["greeting", "output", "utils"]