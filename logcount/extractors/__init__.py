"""Log count extraction module."""

from .base import LogsExtractor, parse_count
from .factory import ExtractorFactory

__all__ = ["LogsExtractor", "ExtractorFactory", "parse_count"]
