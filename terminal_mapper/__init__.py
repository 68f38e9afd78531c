"""Create, name and find Terminal windows by project."""

__version__ = "0.1.0"
