"""Dashboard-specific extractor implementations."""

from .counter_container import CounterContainerExtractor
from .heading_counter import HeadingCounterExtractor
from .statistic_tab import StatisticTabExtractor
from .turnstile_dashboard import TurnstileDashboardExtractor

__all__ = [
    "CounterContainerExtractor",
    "HeadingCounterExtractor",
    "StatisticTabExtractor",
    "TurnstileDashboardExtractor",
]
