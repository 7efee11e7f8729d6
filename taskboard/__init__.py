"""A to-do list with filtered views, JSON file persistence, completion statistics and a command line."""

__version__ = "0.1.0"

__all__ = ["__version__"]