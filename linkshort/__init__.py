"""In-memory URL shortener with expiring links."""

__version__ = "0.1.0"
