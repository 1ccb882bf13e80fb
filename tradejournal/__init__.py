"""Single-user trading journal service."""

__version__ = "0.1.0"
