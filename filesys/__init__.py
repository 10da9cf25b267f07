"""File status queries, filesystem operations, directory iteration and unique paths."""

__version__ = "0.1.0"

__all__ = ["convenience", "directory", "errors", "operations", "status", "unique"]