"""Sort blocks of code while keeping comments, annotations and spacing attached."""

__version__ = "1.0.0"