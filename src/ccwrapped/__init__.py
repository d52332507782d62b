"""Claude Code Wrapped: a usage digest built from local Claude Code data."""

__version__ = "0.1.0"
