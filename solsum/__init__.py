"""SolSum package entry.

This lightweight package provides a stable module entrypoint (python -m solsum)
while keeping the top-level layers (core/, domain/, storage/, services/, ...)
importable on their own.
"""

from solsum.version import __version__  # single source of truth

__all__ = ["__version__"]
