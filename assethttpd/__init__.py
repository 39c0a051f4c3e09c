"""A small threaded HTTP server for static files on 127.0.0.1."""

__version__ = "0.1.0"
__all__ = ["__version__"]