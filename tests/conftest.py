"""
Pytest configuration and fakes for logcount tests.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Dict, Iterable, List, Optional

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from logcount.browser import BrowserProvider, BrowserSession
from logcount.challenge import CaptchaSolver
from logcount.challenge.completion import INVOKE_CALLBACK_JS
from logcount.config import settings
from logcount.extractors.strategies.counter_container import NON_EMPTY_TEXT_JS
from logcount.extractors.strategies.heading_counter import NUMERIC_HEADING_JS
from logcount.extractors.strategies.statistic_tab import (
    ACTIVE_TAB_JS,
    CLICK_TAB_JS,
    READ_STATISTICS_JS,
)
from logcount.models import ExtractionRequest, LinkType


class FakeConsoleMessage:
    """Stand-in for playwright's ConsoleMessage."""

    def __init__(self, text: str):
        self.text = text


class FakePage:
    """Minimal Page double that models the DOM state the extractors read.

    Element text may be given as a sequence; each unsuccessful poll of a
    ``wait_for_function`` condition advances every sequence by one value,
    and the wait times out once no sequence can advance.
    """

    def __init__(
        self,
        selectors: Iterable[str] = (),
        texts: Optional[Dict[str, object]] = None,
        html: str = "",
        tabs: Iterable[str] = (),
        statistics: Optional[List[Dict[str, Optional[str]]]] = None,
        console_on_goto: Iterable[str] = (),
        selectors_after_callback: Iterable[str] = (),
        navigates_on_callback: bool = True,
        goto_error: Optional[Exception] = None,
    ):
        self.selectors = set(selectors)
        self._texts = {
            selector: list(value) if isinstance(value, (list, tuple)) else [value]
            for selector, value in (texts or {}).items()
        }
        self.html = html
        self.tabs = list(tabs)
        self.active_tab: Optional[str] = None
        self.statistics = statistics or []
        self.console_on_goto = list(console_on_goto)
        self.selectors_after_callback = set(selectors_after_callback)
        self.navigates_on_callback = navigates_on_callback
        self.goto_error = goto_error

        self.init_scripts: List[str] = []
        self.listeners: Dict[str, list] = {}
        self.goto_calls: List[dict] = []
        self.callback_tokens: List[str] = []
        self.load_states: List[str] = []
        self.main_frame = object()
        self.navigated = False
        self.waited_ms = 0

    # Events and scripts

    def on(self, event, handler):
        self.listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event, handler):
        self.listeners.get(event, []).remove(handler)

    def emit_console(self, text: str):
        for handler in list(self.listeners.get("console", [])):
            handler(FakeConsoleMessage(text))

    async def add_init_script(self, script):
        self.init_scripts.append(script)

    # Navigation

    async def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.goto_error is not None:
            raise self.goto_error
        for text in self.console_on_goto:
            self.emit_console(text)

    async def _until_navigated(self):
        while not self.navigated:
            await asyncio.sleep(0.005)

    async def wait_for_event(self, event, predicate=None, timeout=None):
        assert event == "framenavigated"
        try:
            await asyncio.wait_for(self._until_navigated(), timeout / 1000)
        except asyncio.TimeoutError:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")
        if predicate is not None:
            assert predicate(self.main_frame)
        return self.main_frame

    async def wait_for_load_state(self, state=None, timeout=None):
        self.load_states.append(state)

    # DOM

    def text(self, selector: str) -> Optional[str]:
        values = self._texts.get(selector)
        return values[0] if values else None

    def _advance(self) -> bool:
        advanced = False
        for values in self._texts.values():
            if len(values) > 1:
                values.pop(0)
                advanced = True
        return advanced

    def _has(self, selector: str) -> bool:
        return selector in self.selectors or selector in self._texts

    async def wait_for_selector(self, selector, timeout=None, state=None):
        if not self._has(selector):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {selector}")

    def _condition(self, expression, arg):
        if expression == NON_EMPTY_TEXT_JS:
            return lambda: bool((self.text(arg) or "").strip())
        if expression == NUMERIC_HEADING_JS:
            selector, placeholder = arg

            def numeric():
                text = (self.text(selector) or "").strip()
                if not text or text == placeholder:
                    return False
                try:
                    float(text)
                except ValueError:
                    return False
                return True

            return numeric
        if expression == ACTIVE_TAB_JS:
            return lambda: self.active_tab == arg[1]
        raise NotImplementedError(expression)

    async def wait_for_function(self, expression, arg=None, timeout=None):
        condition = self._condition(expression, arg)
        while not condition():
            if not self._advance():
                raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def inner_text(self, selector, timeout=None):
        return self.text(selector) or ""

    async def content(self):
        return self.html

    async def evaluate(self, expression, arg=None):
        if expression == CLICK_TAB_JS:
            label = arg[1]
            if label in self.tabs:
                self.active_tab = label
                return True
            return False
        if expression == READ_STATISTICS_JS:
            return [dict(statistic) for statistic in self.statistics]
        if expression == INVOKE_CALLBACK_JS:
            self.callback_tokens.append(arg)
            self.selectors |= self.selectors_after_callback
            if self.navigates_on_callback:
                self.navigated = True
            return None
        raise NotImplementedError(expression)

    async def wait_for_timeout(self, timeout):
        self.waited_ms += timeout


class FakeBrowserProvider(BrowserProvider):
    """Hands out BrowserSessions backed by a FakePage and counts open/close."""

    def __init__(self, page: Optional[FakePage] = None, launch_error: Optional[Exception] = None):
        self.page = page
        self.launch_error = launch_error
        self.opened = 0
        self.closed = 0
        self.launch_options = []

    @asynccontextmanager
    async def open_session(self, options):
        self.launch_options.append(options)
        if self.launch_error is not None:
            raise self.launch_error
        session = BrowserSession(options)
        session.page = self.page
        self.opened += 1
        try:
            yield session
        finally:
            await session.close()
            self.closed += 1


class StubSolver(CaptchaSolver):
    """Solver double returning a fixed token or raising."""

    def __init__(self, api_key: str = "test-key", token: str = "TOK123", error: Optional[Exception] = None):
        super().__init__(api_key)
        self.token = token
        self.error = error
        self.calls = []

    async def solve(self, params):
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        return self.token


class StubSolverFactory:
    """Records the API keys solvers were created for."""

    def __init__(self, solver: StubSolver):
        self.solver = solver
        self.api_keys: List[str] = []

    def create_solver(self, api_key, solver_type=None):
        self.api_keys.append(api_key)
        return self.solver


INTERCEPTED_LINE = (
    'intercepted-params:{"sitekey": "X", "pageurl": "http://t", "action": "login", '
    '"data": "cdata", "pagedata": "pdata", "userAgent": "Mozilla/5.0 Test"}'
)


@pytest.fixture
def fast_timeouts(monkeypatch):
    """Shrink every configured wait so timeout paths finish quickly."""
    monkeypatch.setattr(settings, "challenge_capture_timeout_ms", 50)
    monkeypatch.setattr(settings, "navigation_settle_timeout_ms", 50)
    monkeypatch.setattr(settings, "content_ready_timeout_ms", 50)
    monkeypatch.setattr(settings, "extraction_timeout_ms", 50)
    monkeypatch.setattr(settings, "tab_activation_timeout_ms", 50)
    monkeypatch.setattr(settings, "tab_settle_delay_ms", 0)


@pytest.fixture
def make_request():
    """Build an ExtractionRequest for a link type."""

    def _make(link_type: LinkType, url: str = "http://t", api_key: str = "test-key"):
        return ExtractionRequest(target_url=url, solver_api_key=api_key, link_type=link_type)

    return _make


@pytest.fixture
def turnstile_page():
    """A protected page that reports its Turnstile parameters and renders after the token."""
    return FakePage(
        html='<span class="font-weight-medium">Всего 512 логов</span>',
        console_on_goto=["Console was cleared", INTERCEPTED_LINE],
        selectors_after_callback=[".font-weight-medium"],
    )
