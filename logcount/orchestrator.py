"""Per-request pipeline: launch, navigate, pass the challenge, extract, close."""

import logging
from enum import Enum
from typing import Optional, Type

from playwright.async_api import Error as PlaywrightError

from .browser import BrowserManager
from .challenge import CaptchaSolverFactory, ChallengeInterceptor, TurnstileTokenCompleter
from .errors import LogsFetchError, UnexpectedFault
from .extractors import ExtractorFactory, LogsExtractor
from .models import ExtractionRequest, ExtractionResult

logger = logging.getLogger(__name__)


class FetchState(str, Enum):
    """Orchestrator states."""

    IDLE = "idle"
    LAUNCHING = "launching"
    NAVIGATING = "navigating"
    CAPTURING_CHALLENGE = "capturing_challenge"
    SOLVING = "solving"
    COMPLETING = "completing"
    EXTRACTING = "extracting"
    CLOSED = "closed"


class LogsFetchOrchestrator:
    """Drives one ExtractionRequest through its own browser session.

    Every run ends in ``CLOSED`` with the session torn down. On failure the
    state the error came from is kept in ``failed_state`` and the error is
    re-raised as a LogsFetchError kind; any other error becomes
    UnexpectedFault.
    """

    def __init__(
        self,
        request: ExtractionRequest,
        browser_manager: Optional[BrowserManager] = None,
        solver_factory: Type[CaptchaSolverFactory] = CaptchaSolverFactory,
        extractor_factory: Type[ExtractorFactory] = ExtractorFactory,
        completer: Optional[TurnstileTokenCompleter] = None,
    ):
        self.request = request
        self.browser_manager = browser_manager or BrowserManager()
        self.solver_factory = solver_factory
        self.extractor_factory = extractor_factory
        self.completer = completer or TurnstileTokenCompleter()
        self.state = FetchState.IDLE
        self.failed_state: Optional[FetchState] = None

    def _transition(self, state: FetchState) -> None:
        logger.debug(f"[{self.request.link_type.value}] {self.state.value} -> {state.value}")
        self.state = state

    async def run(self) -> ExtractionResult:
        """Run the pipeline and return the extraction result."""
        logger.info(
            f"Fetching logs from {self.request.target_url} "
            f"for link type: {self.request.link_type.value}"
        )
        extractor = self.extractor_factory.create_extractor(self.request.link_type)

        try:
            self._transition(FetchState.LAUNCHING)
            async with self.browser_manager.session(extractor.launch_options) as session:
                return await self._drive(session, extractor)
        except LogsFetchError as e:
            self.failed_state = self.state
            logger.error(f"[{self.failed_state.value}] {e.__class__.__name__}: {e}")
            raise
        except PlaywrightError as e:
            self.failed_state = self.state
            logger.error(f"[{self.failed_state.value}] Browser error: {e}")
            raise UnexpectedFault(str(e)) from e
        except Exception as e:
            self.failed_state = self.state
            logger.exception(f"[{self.failed_state.value}] Unexpected error: {e}")
            raise UnexpectedFault(str(e)) from e
        finally:
            self._transition(FetchState.CLOSED)

    async def _drive(self, session, extractor: LogsExtractor) -> ExtractionResult:
        page = session.page

        interceptor = None
        if extractor.requires_challenge:
            interceptor = ChallengeInterceptor(page)
            await interceptor.install()

        self._transition(FetchState.NAVIGATING)
        await session.navigate(self.request.target_url)

        if interceptor is not None:
            self._transition(FetchState.CAPTURING_CHALLENGE)
            params = await interceptor.wait_for_parameters()

            self._transition(FetchState.SOLVING)
            solver = self.solver_factory.create_solver(self.request.solver_api_key)
            token = await solver.solve(params)
            logger.info("Captcha solved")

            self._transition(FetchState.COMPLETING)
            await self.completer.complete(page, token, extractor.ready_selector)

        self._transition(FetchState.EXTRACTING)
        result = await extractor.extract(page)
        logger.info(f"Logs count for {self.request.link_type.value}: {result.logs_count}")
        return result
