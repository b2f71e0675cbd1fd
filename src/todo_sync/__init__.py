"""Single-list todo client kept in sync with a remote todo service."""

__version__ = "0.1.0"
