"""Client core for the open market product API."""

__version__ = "0.1.0"
