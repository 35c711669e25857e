"""Log count extraction from dashboard pages."""

__version__ = "0.1.0"
