"""Server-side pre-receive gate for non-ASCII file names."""

__version__ = "0.1.0"
