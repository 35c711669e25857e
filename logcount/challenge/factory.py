"""Factory for creating CAPTCHA solvers."""

import logging
from enum import Enum
from typing import Dict, List, Optional, Type

from ..config import settings
from .base import CaptchaSolver
from .solvers import TwoCaptchaSolver

logger = logging.getLogger(__name__)


class CaptchaSolverType(str, Enum):
    """CAPTCHA solver types."""

    TWOCAPTCHA = "2captcha"


class CaptchaSolverFactory:
    """Factory for creating per-request CAPTCHA solvers."""

    _solvers: Dict[CaptchaSolverType, Type[CaptchaSolver]] = {
        CaptchaSolverType.TWOCAPTCHA: TwoCaptchaSolver,
    }

    @classmethod
    def create_solver(
        cls, api_key: str, solver_type: Optional[CaptchaSolverType] = None
    ) -> CaptchaSolver:
        """Create a solver for ``api_key``; instances are never shared across requests."""
        solver_type = solver_type or CaptchaSolverType(settings.captcha_solver)
        solver_class = cls._solvers.get(solver_type)
        if not solver_class:
            raise ValueError(f"Unsupported CAPTCHA solver: {solver_type}")

        solver = solver_class(api_key)
        logger.info(f"Created CAPTCHA solver: {solver_type.value}")
        return solver

    @classmethod
    def register_solver(
        cls, solver_type: CaptchaSolverType, solver_class: Type[CaptchaSolver]
    ) -> None:
        """Register a solver implementation."""
        cls._solvers[solver_type] = solver_class
        logger.info(f"Registered CAPTCHA solver for {solver_type.value}: {solver_class.__name__}")

    @classmethod
    def get_available_solvers(cls) -> List[CaptchaSolverType]:
        """Get list of available CAPTCHA solver types."""
        return list(cls._solvers.keys())
