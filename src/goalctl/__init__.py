"""goalctl — recurring goal tracker CLI."""

__version__ = "0.1.0"
