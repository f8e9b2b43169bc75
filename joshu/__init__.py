"""Terminal file manager building blocks: file operations, sorting, key names and label layout."""

__version__ = "0.1.0"