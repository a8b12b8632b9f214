"""Order- and comment-preserving INI configuration reader and writer."""

__version__ = "4.17.0"
__all__ = ["converter", "document", "names", "parser", "values", "writer"]