"""A simple ToDo list kept in a locked CSV file, with a ``tasks`` command."""

__version__ = "0.1.0"
__all__ = ["__version__"]