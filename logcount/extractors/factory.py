"""Factory pattern for creating log count extractors."""

import logging
from typing import Dict, List, Type

from ..errors import UnsupportedVariantError
from ..models import LinkType
from .base import LogsExtractor
from .strategies import (
    CounterContainerExtractor,
    HeadingCounterExtractor,
    StatisticTabExtractor,
    TurnstileDashboardExtractor,
)

logger = logging.getLogger(__name__)


class ExtractorFactory:
    """Factory for creating extractors keyed by link type."""

    _extractors: Dict[LinkType, Type[LogsExtractor]] = {
        LinkType.A: TurnstileDashboardExtractor,
        LinkType.B: CounterContainerExtractor,
        LinkType.C: StatisticTabExtractor,
        LinkType.D: HeadingCounterExtractor,
    }

    @classmethod
    def create_extractor(cls, link_type: LinkType) -> LogsExtractor:
        """Create the extractor for the given link type."""
        extractor_class = cls._extractors.get(link_type)
        if extractor_class is None:
            raise UnsupportedVariantError(str(getattr(link_type, "value", link_type)))

        extractor = extractor_class()
        logger.info(f"Created {extractor.__class__.__name__} for link type {link_type.value}")
        return extractor

    @classmethod
    def get_supported_link_types(cls) -> List[LinkType]:
        """Get list of supported link types."""
        return list(cls._extractors.keys())

    @classmethod
    def register_extractor(cls, link_type: LinkType, extractor_class: Type[LogsExtractor]) -> None:
        """Register an extractor for a link type."""
        cls._extractors[link_type] = extractor_class
        logger.info(f"Registered extractor for {link_type.value}: {extractor_class.__name__}")
